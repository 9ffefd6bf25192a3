"""Persisted user configuration for the command line tool."""

from __future__ import annotations

import json
from contextlib import suppress
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir

from i18n_keysort.validation import LOG_LEVELS, validate_config

# store configuration in a platform-specific user config directory
CONFIG_PATH = Path(user_config_dir("i18n_keysort")) / "i18n_keysort_config.json"

_LOG_LEVEL_KEY = "log_level"
_LOG_LEVEL_DEFAULT = "INFO"

DEFAULT_CONFIG: dict[str, Any] = {
    "locales_dir": "locales",
    _LOG_LEVEL_KEY: _LOG_LEVEL_DEFAULT,
}


def _normalise_log_level(value: Any) -> Any:
    """Return an upper-case level name, or the default for blanks."""
    if value is None:
        return _LOG_LEVEL_DEFAULT
    if isinstance(value, str):
        key = value.strip().upper()
        if not key:
            return _LOG_LEVEL_DEFAULT
        if key == "WARN":
            return "WARNING"
        return key if key in LOG_LEVELS else value
    return value


def load_config_at(path: Path) -> dict:
    """Load configuration from a specific path.

    Unreadable or malformed files fall back to :data:`DEFAULT_CONFIG`; values
    of the wrong type raise ``ValueError``.
    """
    cfg = DEFAULT_CONFIG.copy()
    if path.exists():
        with suppress(OSError, ValueError):
            data = json.loads(path.read_text(encoding="utf-8"))
            if isinstance(data, dict):
                cfg.update(data)
    cfg[_LOG_LEVEL_KEY] = _normalise_log_level(cfg.get(_LOG_LEVEL_KEY))
    return validate_config(cfg)


def load_config() -> dict:
    """Load configuration using :data:`CONFIG_PATH`."""
    return load_config_at(CONFIG_PATH)


__all__ = [
    "CONFIG_PATH",
    "DEFAULT_CONFIG",
    "load_config",
    "load_config_at",
]
