"""Half-QWERTY mirror maps.

Each left-hand key is paired with the key in the same position on the
right half of the keyboard.  No key appears on both sides, so the
pairing is its own inverse.
"""

from __future__ import annotations

from types import MappingProxyType

MIRROR_PAIRS: tuple[tuple[str, str], ...] = (
    # Top row: qwert ↔ poiuy
    ("q", "p"), ("w", "o"), ("e", "i"), ("r", "u"), ("t", "y"),
    # Home row: asdfg ↔ ;lkjh
    ("a", ";"), ("s", "l"), ("d", "k"), ("f", "j"), ("g", "h"),
    # Bottom row: zxcvb ↔ /.,mn
    ("z", "/"), ("x", "."), ("c", ","), ("v", "m"), ("b", "n"),
    # Uppercase
    ("Q", "P"), ("W", "O"), ("E", "I"), ("R", "U"), ("T", "Y"),
    ("A", ":"), ("S", "L"), ("D", "K"), ("F", "J"), ("G", "H"),
    ("Z", "?"), ("X", ">"), ("C", "<"), ("V", "M"), ("B", "N"),
    # Digit row: 12345 ↔ 09876
    ("1", "0"), ("2", "9"), ("3", "8"), ("4", "7"), ("5", "6"),
)

LEFT_TO_RIGHT = MappingProxyType({ord(left): ord(right) for left, right in MIRROR_PAIRS})
RIGHT_TO_LEFT = MappingProxyType({ord(right): ord(left) for left, right in MIRROR_PAIRS})

LEFT_HAND_KEYS = frozenset(LEFT_TO_RIGHT)
RIGHT_HAND_KEYS = frozenset(RIGHT_TO_LEFT)

# US layout: what Shift turns an unshifted symbol or digit into
SHIFT_SYMBOLS = MappingProxyType({
    "1": "!", "2": "@", "3": "#", "4": "$", "5": "%",
    "6": "^", "7": "&", "8": "*", "9": "(", "0": ")",
    "-": "_", "=": "+", "[": "{", "]": "}", "\\": "|",
    ";": ":", "'": '"', ",": "<", ".": ">", "/": "?", "`": "~",
})
