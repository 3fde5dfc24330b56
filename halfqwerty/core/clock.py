"""Millisecond clock used for chord timeouts and typing tests."""

from __future__ import annotations

import time
from typing import Callable

Clock = Callable[[], float]


def monotonic_ms() -> float:
    """Current reading of the monotonic clock in milliseconds."""
    return time.monotonic() * 1000.0
