"""Chord state transition rules."""

from __future__ import annotations

from halfqwerty.core.states import ChordState


# Allowed transitions: {from_state: {event_name: to_state}}
TRANSITIONS: dict[ChordState, dict[str, ChordState]] = {
    ChordState.IDLE: {
        "space_tap": ChordState.PRESSED,
        "space_down": ChordState.HELD,
    },
    ChordState.PRESSED: {
        "space_tap": ChordState.IDLE,      # second tap emits a space
        "chord_key": ChordState.PRESSED,   # Wide keeps the chord open
        "chord_close": ChordState.IDLE,    # Left/Right consume one key per chord
        "timeout": ChordState.IDLE,
        "space_down": ChordState.HELD,
    },
    ChordState.HELD: {
        "chord_key": ChordState.HELD,
        "space_up": ChordState.IDLE,
    },
}


def can_transition(from_state: ChordState, event_name: str) -> bool:
    return event_name in TRANSITIONS.get(from_state, {})


def next_state(from_state: ChordState, event_name: str) -> ChordState:
    try:
        return TRANSITIONS[from_state][event_name]
    except KeyError:
        raise ValueError(f"No transition from {from_state!r} on event {event_name!r}")
