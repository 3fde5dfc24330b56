"""Layout variants and the pure mirror lookup."""

from __future__ import annotations

from enum import Enum

from halfqwerty.core.maps import LEFT_HAND_KEYS, LEFT_TO_RIGHT, RIGHT_HAND_KEYS, RIGHT_TO_LEFT


class LayoutVariant(Enum):
    WIDE = "wide"    # both hands, mirror by hand classification
    LEFT = "left"    # left hand only, mirrors toward the right half
    RIGHT = "right"  # right hand only, mirrors toward the left half

    @property
    def always_mirrors(self) -> bool:
        """One-handed variants mirror every ordinary key, chord or not."""
        return self is not LayoutVariant.WIDE


def resolve_mirror(layout: LayoutVariant, code: int) -> int:
    """Return the mirrored key code for *code* under *layout*.

    Keys without a partner resolve to themselves.  Defined for every
    8-bit code and free of side effects.
    """
    if layout is LayoutVariant.LEFT:
        return LEFT_TO_RIGHT.get(code, RIGHT_TO_LEFT.get(code, code))
    if layout is LayoutVariant.RIGHT:
        return RIGHT_TO_LEFT.get(code, LEFT_TO_RIGHT.get(code, code))
    if code in LEFT_HAND_KEYS:
        return LEFT_TO_RIGHT[code]
    if code in RIGHT_HAND_KEYS:
        return RIGHT_TO_LEFT[code]
    return code


def mirror_text(layout: LayoutVariant, text: str) -> str:
    """Mirror every character of *text*, preserving unmapped ones."""
    return "".join(
        chr(resolve_mirror(layout, ord(ch))) if ord(ch) < 256 else ch
        for ch in text
    )
