"""evdev keycode → engine key code mapping helpers."""

from __future__ import annotations

import string

from evdev import ecodes

from halfqwerty.core import keycodes

# Unshifted US QWERTY characters by evdev key name
_KEY_NAME_TO_CHAR: dict[str, str] = {
    **{f"KEY_{c.upper()}": c for c in string.ascii_lowercase},
    **{f"KEY_{d}": d for d in string.digits},
    "KEY_MINUS": "-", "KEY_EQUAL": "=",
    "KEY_LEFTBRACE": "[", "KEY_RIGHTBRACE": "]", "KEY_BACKSLASH": "\\",
    "KEY_SEMICOLON": ";", "KEY_APOSTROPHE": "'", "KEY_GRAVE": "`",
    "KEY_COMMA": ",", "KEY_DOT": ".", "KEY_SLASH": "/",
    "KEY_SPACE": " ", "KEY_TAB": "\t", "KEY_ENTER": "\n",
}

_KEY_NAME_TO_CODE: dict[str, int] = {
    "KEY_BACKSPACE": keycodes.BACKSPACE,
    "KEY_DELETE": keycodes.DELETE,
    "KEY_LEFTSHIFT": keycodes.STICKY_SHIFT,
    "KEY_RIGHTSHIFT": keycodes.STICKY_SHIFT,
    "KEY_LEFTCTRL": keycodes.STICKY_CTRL,
    "KEY_RIGHTCTRL": keycodes.STICKY_CTRL,
    "KEY_LEFTALT": keycodes.STICKY_ALT,
    "KEY_RIGHTALT": keycodes.STICKY_ALT,
}

KEYCODE_TO_CODE: dict[int, int] = {
    **{getattr(ecodes, name): ord(ch) for name, ch in _KEY_NAME_TO_CHAR.items()},
    **{getattr(ecodes, name): code for name, code in _KEY_NAME_TO_CODE.items()},
}


def keycode_to_code(keycode: int) -> int | None:
    """Return the engine code for an evdev keycode, or None if it has none."""
    return KEYCODE_TO_CODE.get(keycode)
