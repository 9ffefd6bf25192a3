"""Validation helpers for locale inputs and configuration."""

from __future__ import annotations

from pathlib import Path

LOCALE_SUFFIX = ".json"
LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

ERR_CONFIG_OBJECT = "Configuration must be an object"
ERR_CONFIG_TYPE = "Config field {key!r} must be a {kind}"
ERR_CONFIG_EMPTY = "Config field {key!r} must not be empty"
ERR_LOG_LEVEL = "Unknown log level: {level}"

_STRING_FIELDS = ("locales_dir", "log_level")


def is_locale_file(path: str | Path) -> bool:
    """Return ``True`` when *path* names a JSON locale file."""
    return Path(path).name.endswith(LOCALE_SUFFIX)


def validate_log_level(level: str) -> str:
    """Return the canonical upper-case name of *level*."""
    name = level.strip().upper()
    if name not in LOG_LEVELS:
        raise ValueError(ERR_LOG_LEVEL.format(level=level))
    return name


def validate_config(config: dict) -> dict:
    """Validate configuration values and return them unchanged.

    ``locales_dir`` and ``log_level`` must be non-empty strings and the log
    level must name a standard :mod:`logging` level.
    """
    if not isinstance(config, dict):
        raise ValueError(ERR_CONFIG_OBJECT)  # noqa: TRY004  # i18n-keysort: config errors share ValueError | issue:-
    for key in _STRING_FIELDS:
        if key not in config:
            continue
        val = config[key]
        if not isinstance(val, str):
            raise ValueError(ERR_CONFIG_TYPE.format(key=key, kind="string"))  # noqa: TRY004  # i18n-keysort: config errors share ValueError | issue:-
        if not val.strip():
            raise ValueError(ERR_CONFIG_EMPTY.format(key=key))
    if "log_level" in config:
        validate_log_level(config["log_level"])
    return config


__all__ = [
    "LOCALE_SUFFIX",
    "LOG_LEVELS",
    "is_locale_file",
    "validate_config",
    "validate_log_level",
]
