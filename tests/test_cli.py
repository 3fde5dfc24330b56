"""Tests for halfqwerty.cli: argument parsing, tokenizer, replay."""

from __future__ import annotations

import json

import pytest

from halfqwerty import cli
from halfqwerty.__version__ import __version__
from halfqwerty.core.context import InputContext
from halfqwerty.log import reset_logging


@pytest.fixture(autouse=True)
def isolated_logging(tmp_path, monkeypatch):
    """Keep CLI logging out of the real home directory."""
    monkeypatch.setenv('HOME', str(tmp_path))
    reset_logging()
    yield
    reset_logging()


class TestParseArgs:
    def test_defaults(self):
        args = cli.parse_args(['abc'])
        assert args.text == 'abc'
        assert args.layout is None
        assert args.explicit is False
        assert args.interval == 100.0

    def test_layout_choice(self):
        assert cli.parse_args(['--layout', 'left', 'x']).layout == 'left'

    def test_bad_layout(self):
        with pytest.raises(SystemExit):
            cli.parse_args(['--layout', 'both', 'x'])

    def test_version_flag(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.parse_args(['--version'])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out


class TestTokenize:
    def test_plain_text(self):
        assert cli.tokenize('ab') == [('key', 97), ('key', 98)]

    def test_tokens(self):
        assert cli.tokenize('{shift}{bs}{wait}{space-down}{space-up}{{') == [
            ('key', 0x10), ('key', 8), ('wait', 0), ('down', 32), ('up', 32), ('key', ord('{')),
        ]

    def test_unknown_token(self):
        with pytest.raises(ValueError):
            cli.tokenize('{meta}')

    def test_unterminated_token(self):
        with pytest.raises(ValueError):
            cli.tokenize('{shift')

    def test_wide_characters_rejected(self):
        with pytest.raises(ValueError):
            cli.tokenize('€')


class TestReplay:
    def run(self, layout, script, explicit=False):
        clock = cli.SimulatedClock()
        ic = InputContext(layout, clock=clock)
        return cli.replay(ic, clock, cli.tokenize(script), explicit=explicit)

    def test_wide_chord_run(self):
        assert self.run('wide', 'as df') == 'askj '

    def test_wait_lets_space_through(self):
        assert self.run('wide', 'a {wait}s') == 'a s'

    def test_trailing_tap_becomes_space(self):
        assert self.run('wide', 'a ') == 'a '

    def test_left_layout(self):
        assert self.run('left', 'qwert') == 'poiuy'

    def test_backspace_edits_output(self):
        assert self.run('wide', 'ab{bs}c') == 'ac'

    def test_sticky_shift(self):
        assert self.run('wide', '{shift}hi') == 'Hi'

    def test_explicit_hold(self):
        assert self.run('wide', 'a{space-down}sd{space-up} b', explicit=True) == 'alk b'


class TestMain:
    def test_prints_committed_text(self, capsys):
        assert cli.main(['--layout', 'right', 'poiuy']) == 0
        assert capsys.readouterr().out == 'qwert\n'

    def test_stats_go_to_stderr(self, capsys):
        assert cli.main(['--stats', 'abc{bs}']) == 0
        captured = capsys.readouterr()
        assert captured.out == 'ab\n'
        assert 'chars=3' in captured.err
        assert 'errors=1' in captured.err

    def test_config_file_used(self, tmp_path, capsys):
        path = tmp_path / 'config.json'
        path.write_text(json.dumps({'keyboard_type': 'left'}), encoding='utf-8')
        assert cli.main(['--config', str(path), 'a']) == 0
        assert capsys.readouterr().out == ';\n'

    def test_out_of_range_timeout_ignored(self, capsys):
        assert cli.main(['--timeout', '5', 'x']) == 0
        assert capsys.readouterr().out == 'x\n'

    def test_bad_script_returns_error(self, capsys):
        assert cli.main(['{nope}']) == 1
        assert capsys.readouterr().out == ''

    def test_log_file_written(self, tmp_path):
        log_file = tmp_path / 'logs' / 'hq.log'
        assert cli.main(['--logfile', str(log_file), 'x']) == 0
        assert log_file.exists()
