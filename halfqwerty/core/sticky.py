"""Sticky (latched) modifiers: shift, ctrl and alt."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import halfqwerty.log  # registers TRACE level and logger.trace()
from halfqwerty.core.maps import SHIFT_SYMBOLS

logger = logging.getLogger(__name__)

MODIFIERS = ("shift", "ctrl", "alt")


@dataclass
class StickyModifiers:
    shift: bool = False
    ctrl: bool = False
    alt: bool = False
    enabled: bool = True

    def toggle(self, name: str) -> bool:
        """Flip the latch called *name*; return its new value.

        Returns False without touching anything while sticky keys are disabled.
        """
        if not self.enabled:
            return False
        value = not getattr(self, name)
        setattr(self, name, value)
        logger.debug("Sticky %s %s", name, "latched" if value else "released")
        return value

    def set(self, name: str, value: bool) -> None:
        if name not in MODIFIERS:
            raise ValueError(f"Unknown sticky modifier: {name!r}")
        if not self.enabled:
            return
        setattr(self, name, bool(value))

    def set_enabled(self, enabled: bool) -> None:
        self.enabled = bool(enabled)
        if not self.enabled:
            self.clear()

    def clear(self) -> None:
        self.shift = False
        self.ctrl = False
        self.alt = False

    def apply(self, ch: str) -> str:
        """Apply the shift latch to *ch*.

        The latch is consumed only by a character it transforms: a
        lowercase letter or a shiftable digit/symbol.  Ctrl and alt are
        left for the host to interpret.
        """
        if not self.shift:
            return ch
        if "a" <= ch <= "z":
            self.shift = False
            return ch.upper()
        shifted = SHIFT_SYMBOLS.get(ch)
        if shifted is not None:
            self.shift = False
            return shifted
        logger.trace("Sticky shift kept: %r is not shiftable", ch)  # type: ignore[attr-defined]
        return ch
