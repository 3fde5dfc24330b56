"""Chord state definitions and the StateContext dataclass."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from halfqwerty.core.sticky import StickyModifiers

DEFAULT_SPACE_TIMEOUT_MS = 267
MIN_SPACE_TIMEOUT_MS = 50
MAX_SPACE_TIMEOUT_MS = 1000


class ChordState(Enum):
    IDLE = auto()
    PRESSED = auto()   # space tapped through process(), waiting for a key or timeout
    HELD = auto()      # space physically down (explicit key-down/key-up)


@dataclass
class StateContext:
    chord: ChordState = ChordState.IDLE

    # True once a key has been mirrored inside the current chord
    space_used: bool = False

    # Timing
    space_timeout_ms: int = DEFAULT_SPACE_TIMEOUT_MS
    space_start_ms: float | None = None

    sticky: StickyModifiers = field(default_factory=StickyModifiers)

    @property
    def space_pressed(self) -> bool:
        return self.chord is ChordState.PRESSED

    @property
    def space_down(self) -> bool:
        return self.chord is ChordState.HELD

    @property
    def chord_open(self) -> bool:
        return self.chord is not ChordState.IDLE

    def reset_space(self) -> None:
        """Drop any open chord without emitting anything."""
        self.chord = ChordState.IDLE
        self.space_used = False
        self.space_start_ms = None

    def reset(self) -> None:
        """Clear chord and latch state and restore the default timeout."""
        self.reset_space()
        self.sticky.clear()
        self.space_timeout_ms = DEFAULT_SPACE_TIMEOUT_MS
