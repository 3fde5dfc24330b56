"""EvdevEventAdapter: feeds evdev key events into an InputContext."""

from __future__ import annotations

import logging

from evdev import ecodes
from evdev.events import KeyEvent

import halfqwerty.log  # registers TRACE level and logger.trace()
from halfqwerty.core import keycodes
from halfqwerty.core.context import InputContext
from halfqwerty.input.key_mapper import keycode_to_code

logger = logging.getLogger(__name__)


class EvdevEventAdapter:
    """Translates EV_KEY events into the engine's key-down/key-up protocol.

    Only events handed in by the host are processed; the adapter never
    opens or reads input devices itself.
    """

    def __init__(self, context: InputContext, debug: bool = False):
        self.context = context
        self.debug = debug

    def handle_raw_event(self, event) -> str:
        """Process one evdev input event and return the committed text."""
        if getattr(event, "type", None) != ecodes.EV_KEY:
            return ""

        code = keycode_to_code(event.code)
        value = event.value  # 0=release, 1=press, 2=repeat
        if self.debug:
            val_name = {KeyEvent.key_up: 'release', KeyEvent.key_down: 'press',
                        KeyEvent.key_hold: 'repeat'}.get(value, str(value))
            logger.trace("RawEvent: keycode=%d (%s) → %r", event.code, val_name, code)  # type: ignore[attr-defined]
        if code is None:
            return ""

        if code in keycodes.STICKY_CODES:
            # Modifiers latch on press only
            if value != KeyEvent.key_down:
                return ""
            self.context.process_key_down(code)
        elif value == KeyEvent.key_up:
            self.context.process_key_up(code)
        elif value == KeyEvent.key_hold and code == keycodes.SPACE:
            return ""
        elif value in (KeyEvent.key_down, KeyEvent.key_hold):
            self.context.process_key_down(code)
        else:
            return ""
        return self.context.commit_string
