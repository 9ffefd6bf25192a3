"""Logging helpers shared across i18n-keysort modules."""

from __future__ import annotations

import logging

# central logger for the project
logger = logging.getLogger("i18n_keysort")
logger.propagate = False

LOG_FORMAT = "%(levelname)s: %(message)s"


def configure_logging(
    level: str = "INFO", handler: logging.Handler | None = None
) -> logging.Logger:
    """Configure and return the package logger."""
    numeric = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric)
    logger.handlers.clear()
    if handler is None:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    # forward warnings.warn() calls through the logging system
    logging.captureWarnings(True)
    wlog = logging.getLogger("py.warnings")
    wlog.setLevel(numeric)
    wlog.handlers.clear()
    wlog.addHandler(handler)
    wlog.propagate = False
    return logger


# configure default logging on import
configure_logging()


__all__ = ["LOG_FORMAT", "configure_logging", "logger"]
