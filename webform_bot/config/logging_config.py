from __future__ import annotations

import logging
import os
from logging.config import dictConfig
from typing import Any

# Third-party loggers that flood the console with per-request lines at INFO/DEBUG.
NOISY_LOGGERS = ("selenium", "urllib3", "WDM", "asyncio")


def _default_logging_dict(level: int) -> dict[str, Any]:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s %(levelname)-8s %(name)s - %(message)s",
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": "DEBUG",
                "formatter": "default",
                "stream": "ext://sys.stdout",
            }
        },
        "loggers": {
            name: {"level": "WARNING"} for name in NOISY_LOGGERS
        },
        "root": {
            "level": level,
            "handlers": ["console"],
        },
    }


def resolve_level(level_name: str | int | None) -> int:
    """Turn 'info', 'DEBUG', 10 or None into a numeric logging level.

    Unknown names fall back to INFO.
    """
    if level_name is None:
        return logging.INFO
    if isinstance(level_name, int):
        return level_name
    level = logging.getLevelName(level_name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level_name: str | int | None = None) -> None:
    """Configure logging for the application.

    - If None, tries `LOG_LEVEL` env var, otherwise defaults to INFO.
    Handlers use DEBUG so the root logger alone controls the effective
    output level. Selenium, urllib3 and webdriver-manager are capped at WARNING.
    """
    if level_name is None:
        level_name = os.getenv("LOG_LEVEL", "INFO")

    level = resolve_level(level_name)
    dictConfig(_default_logging_dict(level))
