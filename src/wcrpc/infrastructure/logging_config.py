"""Logging setup, applied once at process start."""

from __future__ import annotations

import logging
import logging.config
from typing import Any


def get_logging_configuration(level: str) -> dict[str, Any]:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            "wcrpc": {"level": level, "handlers": ["console"], "propagate": False},
        },
        "root": {"level": "WARNING", "handlers": ["console"]},
    }


def setup_logging(level: str = "INFO") -> None:
    logging.config.dictConfig(get_logging_configuration(level))
    logging.getLogger(__name__).debug("Logging configured at %s", level)
