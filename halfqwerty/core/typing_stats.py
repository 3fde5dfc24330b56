"""Typing-test accumulator: character and error counts, WPM, accuracy."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from halfqwerty.core.clock import Clock, monotonic_ms

logger = logging.getLogger(__name__)

CHARS_PER_WORD = 5


@dataclass(frozen=True)
class TypingStats:
    total_chars: int = 0
    mirror_chars: int = 0  # keys resolved through the mirror, mapped or not
    errors: int = 0
    elapsed_ms: float = 0.0
    wpm: float = 0.0
    accuracy: float = 0.0


class TypingTest:
    """Counts committed characters between start() and end()."""

    def __init__(self, clock: Clock = monotonic_ms):
        self._clock = clock
        self.reset()

    def reset(self) -> None:
        self.active = False
        self.total_chars = 0
        self.mirror_chars = 0
        self.errors = 0
        self.start_ms = 0.0
        self.end_ms = 0.0

    def start(self) -> None:
        self.reset()
        self.start_ms = self._clock()
        self.active = True
        logger.debug("Typing test started")

    def end(self) -> None:
        if not self.active:
            return
        self.end_ms = self._clock()
        self.active = False
        logger.debug("Typing test ended: %d chars, %d errors", self.total_chars, self.errors)

    def record_char(self, mirrored: bool = False) -> None:
        if not self.active:
            return
        self.total_chars += 1
        if mirrored:
            self.mirror_chars += 1

    def record_error(self) -> None:
        if self.active:
            self.errors += 1

    def stats(self) -> TypingStats:
        """Snapshot of the counters with derived WPM and accuracy.

        A running test is measured up to the current time.
        """
        end = self._clock() if self.active else self.end_ms
        elapsed = end - self.start_ms
        wpm = 0.0
        if elapsed > 0:
            minutes = elapsed / 60000.0
            wpm = (self.total_chars / CHARS_PER_WORD) / minutes
        accuracy = 0.0
        if self.total_chars > 0:
            accuracy = (self.total_chars - self.errors) / self.total_chars * 100.0
            accuracy = min(100.0, max(0.0, accuracy))
        return TypingStats(
            total_chars=self.total_chars,
            mirror_chars=self.mirror_chars,
            errors=self.errors,
            elapsed_ms=max(0.0, elapsed),
            wpm=wpm,
            accuracy=accuracy,
        )
