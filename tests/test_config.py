"""Tests for halfqwerty.config: configuration loading, validation, ConfigManager."""

from __future__ import annotations

import json

import pytest

from halfqwerty.config import (
    DEFAULT_CONFIG,
    ConfigManager,
    _sanitize_json_text,
    load_config,
    validate_config,
)
from halfqwerty.core.context import InputContext
from halfqwerty.core.layouts import LayoutVariant


# ------------------------------------------------------------------
# DEFAULT_CONFIG
# ------------------------------------------------------------------

class TestDefaultConfig:
    def test_contains_all_expected_keys(self):
        assert set(DEFAULT_CONFIG) == {'keyboard_type', 'space_timeout_ms', 'sticky_keys_enabled', 'debug'}

    def test_defaults(self):
        assert DEFAULT_CONFIG['keyboard_type'] == 'wide'
        assert DEFAULT_CONFIG['space_timeout_ms'] == 267
        assert DEFAULT_CONFIG['sticky_keys_enabled'] is True


# ------------------------------------------------------------------
# validate_config
# ------------------------------------------------------------------

class TestValidateConfig:
    def test_none_gives_defaults(self):
        assert validate_config(None) == DEFAULT_CONFIG

    def test_valid_data_passes(self):
        result = validate_config({
            'keyboard_type': 'Left',
            'space_timeout_ms': '400',
            'sticky_keys_enabled': False,
            'debug': True,
        })
        assert result == {
            'keyboard_type': 'left',
            'space_timeout_ms': 400,
            'sticky_keys_enabled': False,
            'debug': True,
        }

    def test_accepts_layout_enum(self):
        assert validate_config({'keyboard_type': LayoutVariant.RIGHT})['keyboard_type'] == 'right'

    @pytest.mark.parametrize("conf", [
        {'keyboard_type': 'dvorak'},
        {'keyboard_type': 3},
        {'space_timeout_ms': 30},
        {'space_timeout_ms': 1001},
        {'space_timeout_ms': 'soon'},
        {'space_timeout_ms': True},
        {'sticky_keys_enabled': 'yes'},
        {'debug': 1},
    ])
    def test_invalid_values_raise(self, conf):
        with pytest.raises(ValueError):
            validate_config(conf)


# ------------------------------------------------------------------
# load_config
# ------------------------------------------------------------------

class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_config(str(tmp_path / 'nope.json')) == DEFAULT_CONFIG

    def test_overrides_only_present_keys(self, tmp_path):
        path = tmp_path / 'config.json'
        path.write_text(json.dumps({'space_timeout_ms': 500}), encoding='utf-8')
        conf = load_config(str(path))
        assert conf['space_timeout_ms'] == 500
        assert conf['keyboard_type'] == 'wide'

    def test_comments_and_trailing_commas(self, tmp_path):
        path = tmp_path / 'config.json'
        path.write_text(
            '{\n  # layout\n  "keyboard_type": "right", // one hand\n  "debug": true,\n}\n',
            encoding='utf-8',
        )
        conf = load_config(str(path))
        assert conf['keyboard_type'] == 'right'
        assert conf['debug'] is True

    def test_invalid_file_keeps_defaults(self, tmp_path):
        path = tmp_path / 'config.json'
        path.write_text(json.dumps({'space_timeout_ms': 5}), encoding='utf-8')
        assert load_config(str(path)) == DEFAULT_CONFIG

    def test_garbage_keeps_defaults(self, tmp_path):
        path = tmp_path / 'config.json'
        path.write_text('not json at all', encoding='utf-8')
        assert load_config(str(path)) == DEFAULT_CONFIG

    def test_non_object_keeps_defaults(self, tmp_path):
        path = tmp_path / 'config.json'
        path.write_text('[1, 2]', encoding='utf-8')
        assert load_config(str(path)) == DEFAULT_CONFIG

    def test_user_config_fallback(self, tmp_path, monkeypatch):
        monkeypatch.setenv('HOME', str(tmp_path))
        cfg_dir = tmp_path / '.config' / 'halfqwerty'
        cfg_dir.mkdir(parents=True)
        (cfg_dir / 'config.json').write_text(json.dumps({'keyboard_type': 'left'}), encoding='utf-8')
        assert load_config()['keyboard_type'] == 'left'


def test_sanitize_json_text():
    assert json.loads(_sanitize_json_text('{"a": 1, // x\n}')) == {'a': 1}


# ------------------------------------------------------------------
# ConfigManager
# ------------------------------------------------------------------

class TestConfigManager:
    def test_save_and_reload(self, tmp_path):
        path = str(tmp_path / 'sub' / 'config.json')
        cm = ConfigManager(path)
        assert cm.get_all() == DEFAULT_CONFIG
        cm.set('keyboard_type', 'left')
        cm.update({'space_timeout_ms': 300})
        assert cm.save() is True

        other = ConfigManager(path)
        assert other.get('keyboard_type') == 'left'
        assert other.get('space_timeout_ms') == 300

    def test_validate_and_reset(self, tmp_path):
        cm = ConfigManager(str(tmp_path / 'config.json'))
        cm.set('space_timeout_ms', 5000)
        assert cm.validate() is False
        cm.reset_to_defaults()
        assert cm.validate() is True

    def test_reload_discards_unsaved(self, tmp_path):
        cm = ConfigManager(str(tmp_path / 'config.json'))
        cm.set('debug', True)
        cm.reload()
        assert cm.get('debug') is False

    def test_config_path(self, tmp_path):
        path = str(tmp_path / 'config.json')
        assert ConfigManager(path).config_path == path


# ------------------------------------------------------------------
# InputContext.from_config
# ------------------------------------------------------------------

def test_context_from_config(clock):
    ic = InputContext.from_config(
        {'keyboard_type': 'right', 'space_timeout_ms': 400, 'sticky_keys_enabled': False},
        clock=clock,
    )
    assert ic.get_keyboard_type() is LayoutVariant.RIGHT
    assert ic.get_space_timeout() == 400
    assert ic.sticky_keys_enabled is False


def test_context_from_bad_config_raises():
    with pytest.raises(ValueError):
        InputContext.from_config({'keyboard_type': 'both'})
