"""Configuration loader and validator for halfqwerty.

Provides ``load_config(path)`` which reads a JSON config (with
comment and trailing-comma tolerant sanitizer) and merges user
overrides from ``~/.config/halfqwerty/config.json``.

Also provides ``validate_config(conf)`` which normalizes and
validates config keys, raising ``ValueError`` on invalid values.
"""

from __future__ import annotations

import json
import logging
import os
import re
import tempfile

from halfqwerty.core.layouts import LayoutVariant
from halfqwerty.core.states import DEFAULT_SPACE_TIMEOUT_MS, MAX_SPACE_TIMEOUT_MS, MIN_SPACE_TIMEOUT_MS

logger = logging.getLogger(__name__)

USER_CONFIG_PATH = '~/.config/halfqwerty/config.json'

# Single source of truth for default configuration
DEFAULT_CONFIG: dict = {
    'keyboard_type': LayoutVariant.WIDE.value,
    'space_timeout_ms': DEFAULT_SPACE_TIMEOUT_MS,
    'sticky_keys_enabled': True,
    'debug': False,
}


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------

def _sanitize_json_text(s: str) -> str:
    """Remove ``#``/``//`` comments and trailing commas from JSON-like text."""
    # Hash-style line comments
    s = re.sub(r"^[ \t]*#.*$", "", s, flags=re.MULTILINE)
    # C++-style line comments
    s = re.sub(r"//.*$", "", s, flags=re.MULTILINE)
    # Trailing commas before } or ]
    s = re.sub(r",[ \t\r\n]+(\}|\])", r"\1", s)
    return s


def _save_json(path: str, data: dict) -> None:
    """Write *data* to *path* through a temp file in the same directory."""
    dir_path = os.path.dirname(os.path.abspath(path))
    os.makedirs(dir_path, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=dir_path, prefix=".config-", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=4, sort_keys=True)
            f.write("\n")
        os.replace(tmp_path, path)
    except Exception:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise


# ------------------------------------------------------------------
# Validation
# ------------------------------------------------------------------

def validate_config(conf: dict | None) -> dict:
    """Validate and normalize configuration dictionary.

    Returns a normalized dict with all expected keys.
    Raises ``ValueError`` on invalid values.
    """
    if conf is None:
        conf = {}

    defaults = dict(DEFAULT_CONFIG)
    out = dict(defaults)

    # keyboard_type: one of the layout variant names
    kt = conf.get('keyboard_type', defaults['keyboard_type'])
    if isinstance(kt, LayoutVariant):
        kt = kt.value
    if not isinstance(kt, str):
        raise ValueError(f"Invalid 'keyboard_type': {kt!r}")
    try:
        out['keyboard_type'] = LayoutVariant(kt.strip().lower()).value
    except ValueError:
        names = ', '.join(v.value for v in LayoutVariant)
        raise ValueError(f"Invalid 'keyboard_type': {kt!r} (must be one of {names})")

    # space_timeout_ms: int in [50, 1000]
    st = conf.get('space_timeout_ms', defaults['space_timeout_ms'])
    if isinstance(st, bool):
        raise ValueError(f"Invalid 'space_timeout_ms': {st}")
    try:
        st_val = int(st)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid 'space_timeout_ms': {st}")
    if not (MIN_SPACE_TIMEOUT_MS <= st_val <= MAX_SPACE_TIMEOUT_MS):
        raise ValueError(
            f"Invalid 'space_timeout_ms': {st} "
            f"(must be between {MIN_SPACE_TIMEOUT_MS} and {MAX_SPACE_TIMEOUT_MS})"
        )
    out['space_timeout_ms'] = st_val

    # sticky_keys_enabled: boolean
    ske = conf.get('sticky_keys_enabled', defaults['sticky_keys_enabled'])
    if not isinstance(ske, bool):
        raise ValueError("Invalid 'sticky_keys_enabled': must be boolean")
    out['sticky_keys_enabled'] = ske

    # debug: boolean
    dbg = conf.get('debug', defaults['debug'])
    if not isinstance(dbg, bool):
        raise ValueError("Invalid 'debug' flag: must be boolean")
    out['debug'] = dbg

    return out


def _read_and_merge(path: str, target_config: dict, debug: bool = False) -> bool:
    """Read a JSON file, validate, and merge into *target_config*.

    Returns True on success, False on any error.
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw = f.read()
    except OSError as exc:
        logger.warning("Cannot read config %s: %s", path, exc)
        return False

    try:
        cfg = json.loads(raw)
    except json.JSONDecodeError:
        try:
            cfg = json.loads(_sanitize_json_text(raw))
        except json.JSONDecodeError as exc:
            logger.warning("JSON parse error in %s: %s", path, exc)
            return False

    if not isinstance(cfg, dict):
        logger.warning("Invalid config %s: top level must be an object", path)
        return False

    try:
        validated = validate_config(cfg)
    except ValueError as verr:
        logger.warning("Invalid config %s: %s", path, verr)
        return False

    # Only override keys explicitly present in source
    for k in cfg:
        if k in validated:
            target_config[k] = validated[k]
    if debug:
        logger.debug("Config merged from %s", path)
    return True


# ------------------------------------------------------------------
# Top-level loader
# ------------------------------------------------------------------

def load_config(config_path: str | None = None, debug: bool = False) -> dict:
    """Load and merge configuration.

    If *config_path* is given, uses only that file (returns defaults if
    the file does not exist).  Otherwise falls back to
    ``~/.config/halfqwerty/config.json``.

    Returns the effective configuration dict (always has all default keys).
    """
    config = dict(DEFAULT_CONFIG)

    path = config_path if config_path is not None else os.path.expanduser(USER_CONFIG_PATH)
    if os.path.exists(path):
        _read_and_merge(path, config, debug=debug)
    return config


# ------------------------------------------------------------------
# ConfigManager
# ------------------------------------------------------------------

class ConfigManager:
    """Configuration management with load/save/validate."""

    def __init__(self, config_path: str | None = None, debug: bool = False):
        self._config_path = config_path or os.path.expanduser(USER_CONFIG_PATH)
        self._debug = debug
        self._config: dict = dict(DEFAULT_CONFIG)
        self._load_config()

    def _load_config(self) -> None:
        """Reset to defaults, then overlay from file (if exists)."""
        self._config = dict(DEFAULT_CONFIG)
        if os.path.exists(self._config_path):
            _read_and_merge(self._config_path, self._config, debug=self._debug)

    def reload(self) -> None:
        self._load_config()

    def save(self, target_path: str | None = None) -> bool:
        """Atomically save configuration to file. Returns True on success."""
        save_path = target_path or self._config_path
        try:
            _save_json(save_path, self.get_all())
        except OSError as exc:
            logger.warning("Cannot save config to %s: %s", save_path, exc)
            return False
        return True

    def get(self, key: str, default=None):
        return self._config.get(key, default)

    def set(self, key: str, value) -> None:
        self._config[key] = value

    def update(self, updates: dict) -> None:
        self._config.update(updates)

    def get_all(self) -> dict:
        """Return all configuration (excluding internal keys)."""
        return {k: v for k, v in self._config.items() if not k.startswith('_')}

    def reset_to_defaults(self) -> None:
        self._config = dict(DEFAULT_CONFIG)

    def validate(self) -> bool:
        """Validate current configuration. Returns True if valid."""
        try:
            validate_config(self._config)
        except ValueError:
            return False
        return True

    @property
    def config_path(self) -> str:
        return self._config_path
