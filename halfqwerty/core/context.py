"""InputContext: the Half-QWERTY keystroke resolution engine.

One instance per input session.  The host feeds key codes either one
logical keystroke at a time (``process``) or as physical down/up pairs
(``process_key_down`` / ``process_key_up``) and reads the resolved
characters back with ``commit_string`` before the next call.

Both entry points drive the same chord state.  A context is meant to be
used with one of the two protocols for its lifetime; mixing them works
only where the transition table allows it (see ``core/transitions.py``).
"""

from __future__ import annotations

import logging

import halfqwerty.log  # registers TRACE level and logger.trace()
from halfqwerty.core import keycodes
from halfqwerty.core.clock import Clock, monotonic_ms
from halfqwerty.core.layouts import LayoutVariant, resolve_mirror
from halfqwerty.core.states import MAX_SPACE_TIMEOUT_MS, MIN_SPACE_TIMEOUT_MS, ChordState, StateContext
from halfqwerty.core.transitions import can_transition, next_state
from halfqwerty.core.typing_stats import TypingStats, TypingTest
from halfqwerty.utils.buffer import CommitBuffer

logger = logging.getLogger(__name__)


class InputContext:
    """Resolves raw key codes into committed characters."""

    def __init__(
        self,
        layout: LayoutVariant | str = LayoutVariant.WIDE,
        clock: Clock = monotonic_ms,
        debug: bool = False,
    ):
        self.layout = LayoutVariant(layout)
        self.context = StateContext()
        self.commit = CommitBuffer()
        self.typing_test = TypingTest(clock)
        self.debug = debug
        self.closed = False
        self._clock = clock

    @classmethod
    def from_config(cls, conf: dict | None, clock: Clock = monotonic_ms) -> "InputContext":
        """Build a context from a configuration dict (see ``halfqwerty.config``)."""
        from halfqwerty.config import validate_config

        conf = validate_config(conf)
        ic = cls(conf['keyboard_type'], clock=clock, debug=conf['debug'])
        ic.set_space_timeout(conf['space_timeout_ms'])
        ic.set_sticky_keys_enabled(conf['sticky_keys_enabled'])
        return ic

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @property
    def state(self) -> ChordState:
        return self.context.chord

    def _transition(self, event_name: str) -> bool:
        if not can_transition(self.context.chord, event_name):
            logger.trace("Ignored transition %r from %s", event_name, self.context.chord)  # type: ignore[attr-defined]
            return False
        new_state = next_state(self.context.chord, event_name)
        if self.debug and new_state is not self.context.chord:
            logger.debug("Chord: %s → %s (on %r)", self.context.chord, new_state, event_name)
        self.context.chord = new_state
        return True

    def _begin(self, code: int, kind: str) -> bool:
        """Clear the commit buffer and validate *code* for a processing call."""
        self.commit.clear()
        if self.closed:
            return False
        if not keycodes.is_valid(code):
            logger.debug("Rejected key code %r", code)
            return False
        logger.trace("%s code=%d chord=%s", kind, code, self.context.chord)  # type: ignore[attr-defined]
        return True

    def _emit(self, ch: str, mirrored: bool = False) -> None:
        ch = self.context.sticky.apply(ch)
        if self.commit.append(ch) and keycodes.is_printable(ord(ch)):
            self.typing_test.record_char(mirrored)

    def _toggle_sticky(self, code: int) -> bool:
        sticky = self.context.sticky
        if not sticky.enabled:
            logger.trace("Sticky keys disabled, ignoring code %d", code)  # type: ignore[attr-defined]
            return False
        sticky.toggle(keycodes.STICKY_CODES[code])
        return True

    def _backspace(self, code: int) -> bool:
        self.commit.append(chr(code))
        self.typing_test.record_error()
        return True

    def _key(self, code: int, explicit: bool) -> bool:
        """Commit an ordinary key, mirrored if a chord is open or the layout is one-handed."""
        ctx = self.context
        mirror = ctx.chord_open or self.layout.always_mirrors
        out = resolve_mirror(self.layout, code) if mirror else code

        if ctx.space_pressed:
            ctx.space_used = True
            if explicit or self.layout.always_mirrors:
                # One key per legacy chord
                self._transition("chord_close")
                ctx.space_start_ms = None
            else:
                # Wide keeps the chord open until it times out
                self._transition("chord_key")
        elif ctx.space_down:
            ctx.space_used = True
            self._transition("chord_key")

        self._emit(chr(out), mirrored=mirror)
        return True

    # ------------------------------------------------------------------
    # Single-event protocol
    # ------------------------------------------------------------------

    def process(self, code: int) -> bool:
        """Process one logical keystroke.  Code 0 is the host's timeout tick.

        Returns True if the call changed state or committed something.
        """
        if not self._begin(code, "process"):
            return False
        if code in keycodes.STICKY_CODES:
            return self._toggle_sticky(code)
        if code == keycodes.SPACE:
            return self._space_tap()
        if code in keycodes.BACKSPACE_CODES:
            return self._backspace(code)
        if code != keycodes.NUL:
            return self._key(code, explicit=False)
        return self._check_timeout()

    def tick(self) -> bool:
        """Shorthand for ``process(0)``."""
        return self.process(keycodes.NUL)

    def _space_tap(self) -> bool:
        ctx = self.context
        if ctx.space_pressed:
            self._transition("space_tap")
            ctx.space_start_ms = None
            ctx.space_used = False
            self._emit(" ")
            return True
        if not self._transition("space_tap"):
            return False
        ctx.space_used = False
        ctx.space_start_ms = self._clock()
        return True

    def _check_timeout(self) -> bool:
        ctx = self.context
        if not ctx.space_pressed or ctx.space_start_ms is None:
            return False
        elapsed = self._clock() - ctx.space_start_ms
        if elapsed < ctx.space_timeout_ms:
            return False

        self._transition("timeout")
        logger.trace("Chord closed after %.0f ms", elapsed)  # type: ignore[attr-defined]
        ctx.space_start_ms = None
        ctx.space_used = False
        self._emit(" ")
        return True

    # ------------------------------------------------------------------
    # Explicit down/up protocol
    # ------------------------------------------------------------------

    def process_key_down(self, code: int) -> bool:
        if not self._begin(code, "key_down"):
            return False
        ctx = self.context
        if code in keycodes.STICKY_CODES:
            return self._toggle_sticky(code)
        if code == keycodes.SPACE:
            if ctx.space_down:
                # auto-repeat of a held space
                return False
            self._transition("space_down")
            ctx.space_used = False
            ctx.space_start_ms = self._clock()
            return True
        if code in keycodes.BACKSPACE_CODES:
            return self._backspace(code)
        if code == keycodes.NUL:
            return False
        return self._key(code, explicit=True)

    def process_key_up(self, code: int) -> bool:
        if not self._begin(code, "key_up"):
            return False
        ctx = self.context
        if code != keycodes.SPACE or not ctx.space_down:
            return False
        self._transition("space_up")
        ctx.space_start_ms = None
        if not ctx.space_used:
            self._emit(" ")
            return True
        ctx.space_used = False
        return True

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------

    @property
    def commit_string(self) -> str:
        """Characters committed by the last processing call."""
        return self.commit.text

    @property
    def preedit_string(self) -> str:
        return ""

    def is_empty(self) -> bool:
        """True when nothing is pending: no commit and no open tapped chord."""
        return not self.commit and not self.context.space_pressed

    # ------------------------------------------------------------------
    # Session control
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """Drop chord and latch state and the commit buffer, restore the default timeout.

        An open chord is discarded without emitting its space.
        """
        self.context.reset()
        self.commit.clear()

    def close(self) -> None:
        """End the session; every later call is a no-op."""
        self.reset()
        self.typing_test.reset()
        self.closed = True

    def set_keyboard_type(self, layout: LayoutVariant | str) -> bool:
        if self.closed:
            return False
        try:
            self.layout = LayoutVariant(layout)
        except ValueError:
            logger.debug("Unknown keyboard type %r", layout)
            return False
        return True

    def get_keyboard_type(self) -> LayoutVariant:
        return self.layout

    @property
    def space_timeout(self) -> int:
        return self.context.space_timeout_ms

    def set_space_timeout(self, timeout_ms: int) -> bool:
        """Accept *timeout_ms* only within [50, 1000]; otherwise keep the old value."""
        if self.closed:
            return False
        if not isinstance(timeout_ms, int) or not MIN_SPACE_TIMEOUT_MS <= timeout_ms <= MAX_SPACE_TIMEOUT_MS:
            logger.debug("Space timeout %r out of range, keeping %d", timeout_ms, self.context.space_timeout_ms)
            return False
        self.context.space_timeout_ms = timeout_ms
        return True

    def get_space_timeout(self) -> int:
        return self.context.space_timeout_ms

    # -- sticky keys ----------------------------------------------------

    @property
    def sticky_keys_enabled(self) -> bool:
        return self.context.sticky.enabled

    def set_sticky_keys_enabled(self, enabled: bool) -> None:
        if not self.closed:
            self.context.sticky.set_enabled(enabled)

    def set_shift_sticky(self, value: bool) -> None:
        if not self.closed:
            self.context.sticky.set("shift", value)

    def set_ctrl_sticky(self, value: bool) -> None:
        if not self.closed:
            self.context.sticky.set("ctrl", value)

    def set_alt_sticky(self, value: bool) -> None:
        if not self.closed:
            self.context.sticky.set("alt", value)

    @property
    def shift_sticky(self) -> bool:
        return self.context.sticky.shift

    @property
    def ctrl_sticky(self) -> bool:
        return self.context.sticky.ctrl

    @property
    def alt_sticky(self) -> bool:
        return self.context.sticky.alt

    # -- typing test ----------------------------------------------------

    def start_typing_test(self) -> None:
        if not self.closed:
            self.typing_test.start()

    def end_typing_test(self) -> None:
        self.typing_test.end()

    def get_typing_stats(self) -> TypingStats:
        return self.typing_test.stats()

    def reset_typing_stats(self) -> None:
        self.typing_test.reset()

    # -- space state ----------------------------------------------------

    def is_space_down(self) -> bool:
        return self.context.space_down

    def is_space_used(self) -> bool:
        return self.context.space_used

    def reset_space_state(self) -> None:
        self.context.reset_space()
