"""Logging configuration for applications built on time_abstractions.

The library itself only creates module loggers; entry points call
:func:`configure_logging` to attach handlers.
"""

from __future__ import annotations

import logging.config
from typing import Any

from time_abstractions.config import get_settings


def get_logging_config(log_level: str = "INFO", stream: str = "ext://sys.stderr") -> dict[str, Any]:
    """Return a dictionary for :func:`logging.config.dictConfig`.

    Args:
        log_level: Level for the ``time_abstractions`` logger.
        stream:    Stream the console handler writes to.
    """
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": log_level,
                "formatter": "standard",
                "stream": stream,
            },
        },
        "loggers": {
            "time_abstractions": {
                "level": log_level,
                "handlers": ["console"],
                "propagate": False,
            },
        },
    }


def configure_logging(log_level: str | None = None) -> None:
    """Apply :func:`get_logging_config`, defaulting the level from settings."""
    level = (log_level or get_settings().log_level).upper()
    logging.config.dictConfig(get_logging_config(level))
