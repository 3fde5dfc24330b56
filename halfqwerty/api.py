"""Null-safe functional API over InputContext.

Every function accepts ``None`` (or a destroyed context) in place of a
context: mutators do nothing and accessors return their default.
"""

from __future__ import annotations

import logging

from halfqwerty.core.clock import Clock, monotonic_ms
from halfqwerty.core.context import InputContext
from halfqwerty.core.layouts import LayoutVariant
from halfqwerty.core.states import DEFAULT_SPACE_TIMEOUT_MS
from halfqwerty.core.typing_stats import TypingStats

logger = logging.getLogger(__name__)


def _live(ic: InputContext | None) -> bool:
    return ic is not None and not ic.closed


def create(layout: LayoutVariant | str = LayoutVariant.WIDE, clock: Clock = monotonic_ms) -> InputContext | None:
    """Return a new context, or None for an unknown keyboard type."""
    try:
        return InputContext(layout, clock=clock)
    except ValueError:
        logger.debug("Unknown keyboard type %r", layout)
        return None


def destroy(ic: InputContext | None) -> None:
    if ic is not None:
        ic.close()


# ------------------------------------------------------------------
# Processing
# ------------------------------------------------------------------

def process(ic: InputContext | None, code: int) -> bool:
    return ic.process(code) if _live(ic) else False


def process_key_down(ic: InputContext | None, code: int) -> bool:
    return ic.process_key_down(code) if _live(ic) else False


def process_key_up(ic: InputContext | None, code: int) -> bool:
    return ic.process_key_up(code) if _live(ic) else False


def get_commit_string(ic: InputContext | None) -> str:
    return ic.commit_string if _live(ic) else ""


def get_preedit_string(ic: InputContext | None) -> str:
    return ""


def reset(ic: InputContext | None) -> None:
    if _live(ic):
        ic.reset()


def is_empty(ic: InputContext | None) -> bool:
    return ic.is_empty() if _live(ic) else True


# ------------------------------------------------------------------
# Settings
# ------------------------------------------------------------------

def set_keyboard_type(ic: InputContext | None, layout: LayoutVariant | str) -> None:
    if _live(ic):
        ic.set_keyboard_type(layout)


def get_keyboard_type(ic: InputContext | None) -> LayoutVariant:
    return ic.get_keyboard_type() if _live(ic) else LayoutVariant.WIDE


def set_space_timeout(ic: InputContext | None, timeout_ms: int) -> None:
    if _live(ic):
        ic.set_space_timeout(timeout_ms)


def get_space_timeout(ic: InputContext | None) -> int:
    return ic.get_space_timeout() if _live(ic) else DEFAULT_SPACE_TIMEOUT_MS


def set_sticky_keys_enabled(ic: InputContext | None, enabled: bool) -> None:
    if _live(ic):
        ic.set_sticky_keys_enabled(enabled)


def get_sticky_keys_enabled(ic: InputContext | None) -> bool:
    return ic.sticky_keys_enabled if _live(ic) else False


def set_shift_sticky(ic: InputContext | None, value: bool) -> None:
    if _live(ic):
        ic.set_shift_sticky(value)


def set_ctrl_sticky(ic: InputContext | None, value: bool) -> None:
    if _live(ic):
        ic.set_ctrl_sticky(value)


def set_alt_sticky(ic: InputContext | None, value: bool) -> None:
    if _live(ic):
        ic.set_alt_sticky(value)


def get_shift_sticky(ic: InputContext | None) -> bool:
    return ic.shift_sticky if _live(ic) else False


def get_ctrl_sticky(ic: InputContext | None) -> bool:
    return ic.ctrl_sticky if _live(ic) else False


def get_alt_sticky(ic: InputContext | None) -> bool:
    return ic.alt_sticky if _live(ic) else False


# ------------------------------------------------------------------
# Typing test
# ------------------------------------------------------------------

def start_typing_test(ic: InputContext | None) -> None:
    if _live(ic):
        ic.start_typing_test()


def end_typing_test(ic: InputContext | None) -> None:
    if _live(ic):
        ic.end_typing_test()


def get_typing_stats(ic: InputContext | None) -> TypingStats:
    return ic.get_typing_stats() if _live(ic) else TypingStats()


def reset_typing_stats(ic: InputContext | None) -> None:
    if _live(ic):
        ic.reset_typing_stats()


# ------------------------------------------------------------------
# Space state
# ------------------------------------------------------------------

def is_space_down(ic: InputContext | None) -> bool:
    return ic.is_space_down() if _live(ic) else False


def is_space_used(ic: InputContext | None) -> bool:
    return ic.is_space_used() if _live(ic) else False


def reset_space_state(ic: InputContext | None) -> None:
    if _live(ic):
        ic.reset_space_state()
