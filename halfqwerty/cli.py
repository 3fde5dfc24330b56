#!/usr/bin/env python3
"""
halfqwerty CLI: replay a keystroke script through the engine
"""

from __future__ import annotations
import sys
import argparse
import os
import traceback

from halfqwerty.__version__ import __version__
from halfqwerty.core import keycodes
from halfqwerty.log import setup_logging

# Script tokens that stand for a single engine code
TOKEN_CODES = {
    'shift': keycodes.STICKY_SHIFT,
    'ctrl': keycodes.STICKY_CTRL,
    'alt': keycodes.STICKY_ALT,
    'bs': keycodes.BACKSPACE,
    'del': keycodes.DELETE,
}


class SimulatedClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start_ms: float = 0.0):
        self.now_ms = start_ms

    def advance(self, ms: float) -> None:
        self.now_ms += ms

    def __call__(self) -> float:
        return self.now_ms


def tokenize(script: str) -> list[tuple[str, int]]:
    """Split a keystroke script into ``(kind, code)`` steps.

    Kinds are ``key`` (a full keystroke), ``down``/``up`` (explicit space
    edges) and ``wait`` (let the chord window run out).
    """
    steps: list[tuple[str, int]] = []
    i = 0
    while i < len(script):
        ch = script[i]
        if ch == '{':
            if script.startswith('{{', i):
                steps.append(('key', ord('{')))
                i += 2
                continue
            end = script.find('}', i)
            if end < 0:
                raise ValueError(f"Unterminated token at position {i}")
            name = script[i + 1:end].strip().lower()
            if name in TOKEN_CODES:
                steps.append(('key', TOKEN_CODES[name]))
            elif name == 'wait':
                steps.append(('wait', 0))
            elif name == 'space-down':
                steps.append(('down', keycodes.SPACE))
            elif name == 'space-up':
                steps.append(('up', keycodes.SPACE))
            else:
                raise ValueError(f"Unknown token {{{name}}}")
            i = end + 1
            continue
        if ord(ch) > 255:
            raise ValueError(f"Character {ch!r} is outside the 8-bit key range")
        steps.append(('key', ord(ch)))
        i += 1
    return steps


def replay(ic, clock: SimulatedClock, steps: list[tuple[str, int]],
           explicit: bool = False, interval_ms: float = 100.0) -> str:
    """Drive *ic* through *steps* and return the resulting text.

    Backspace and delete in the committed output remove the previous character.
    """
    out: list[str] = []

    def collect() -> None:
        for ch in ic.commit_string:
            if ord(ch) in keycodes.BACKSPACE_CODES:
                if out:
                    out.pop()
            else:
                out.append(ch)

    def wait_out() -> None:
        clock.advance(ic.get_space_timeout())
        ic.tick()
        collect()

    for kind, code in steps:
        if kind == 'wait':
            wait_out()
            continue
        clock.advance(interval_ms)
        if not explicit:
            ic.tick()
            collect()
            if kind == 'key':
                ic.process(code)
                collect()
            continue
        if kind in ('key', 'down'):
            ic.process_key_down(code)
            collect()
        if kind in ('key', 'up'):
            ic.process_key_up(code)
            collect()

    if not explicit:
        wait_out()
    return ''.join(out)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='halfqwerty',
        description='Half-QWERTY input engine: replay keystrokes and print the committed text',
    )
    parser.add_argument(
        'text',
        help='Keystroke script; tokens: {shift} {ctrl} {alt} {bs} {del} {wait} {space-down} {space-up}'
    )
    parser.add_argument(
        '--layout',
        choices=['wide', 'left', 'right'],
        default=None,
        help='Keyboard type (overrides config)'
    )
    parser.add_argument(
        '--timeout',
        type=int,
        default=None,
        help='Space chord timeout in ms, 50-1000 (overrides config)'
    )
    parser.add_argument(
        '--explicit',
        action='store_true',
        help='Use the key-down/key-up protocol instead of single keystrokes'
    )
    parser.add_argument(
        '--interval',
        type=float,
        default=100.0,
        help='Simulated time between keystrokes in ms (default: 100)'
    )
    parser.add_argument(
        '--stats',
        action='store_true',
        help='Run the replay as a typing test and print statistics to stderr'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug mode with verbose logging'
    )
    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='Path to config file'
    )
    parser.add_argument(
        '--logfile',
        type=str,
        default=None,
        help='Path to log file (default: ~/.halfqwerty.log)'
    )
    parser.add_argument(
        '--version',
        action='version',
        version='%(prog)s ' + __version__
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for halfqwerty"""
    args = parse_args(argv)

    log = setup_logging(debug=args.debug, log_file=args.logfile)
    log.info(f"halfqwerty {__version__} started (PID {os.getpid()})")

    # Import after args parsing to avoid import-time side effects
    from halfqwerty.config import load_config
    from halfqwerty.core.context import InputContext

    try:
        config = load_config(args.config, args.debug)
        if args.layout is not None:
            config['keyboard_type'] = args.layout
        if args.debug:
            config['debug'] = True

        clock = SimulatedClock()
        ic = InputContext.from_config(config, clock=clock)
        if args.timeout is not None and not ic.set_space_timeout(args.timeout):
            log.warning(f"Ignoring space timeout {args.timeout} ms (must be 50-1000)")

        steps = tokenize(args.text)
        if args.stats:
            ic.start_typing_test()
        text = replay(ic, clock, steps, explicit=args.explicit, interval_ms=args.interval)
        if args.stats:
            ic.end_typing_test()
            st = ic.get_typing_stats()
            print(
                f"chars={st.total_chars} mirrored={st.mirror_chars} errors={st.errors} "
                f"wpm={st.wpm:.1f} accuracy={st.accuracy:.1f}%",
                file=sys.stderr,
            )
        ic.close()
    except ValueError as e:
        log.error(f"❌ {e}")
        log.debug(traceback.format_exc())
        return 1

    print(text)
    return 0


if __name__ == '__main__':
    sys.exit(main())
