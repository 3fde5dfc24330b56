"""Reserved engine key codes.

The engine works on single 8-bit codes: plain ASCII plus three virtual
codes that stand for the sticky modifiers.
"""

from __future__ import annotations

NUL = 0
BACKSPACE = 8
DELETE = 127
SPACE = 32

# Virtual codes for the sticky modifiers (Windows VK_SHIFT/VK_CONTROL/VK_MENU)
STICKY_SHIFT = 0x10
STICKY_CTRL = 0x11
STICKY_ALT = 0x12

STICKY_CODES: dict[int, str] = {
    STICKY_SHIFT: "shift",
    STICKY_CTRL: "ctrl",
    STICKY_ALT: "alt",
}

BACKSPACE_CODES = frozenset({BACKSPACE, DELETE})

MAX_CODE = 255


def is_valid(code: int) -> bool:
    """Return True if *code* fits the 8-bit key code domain."""
    return isinstance(code, int) and 0 <= code <= MAX_CODE


def is_printable(code: int) -> bool:
    return 0x20 <= code <= 0x7E
