"""
Observability Module

Logging setup for applications embedding propconf.

propconf only emits records (warnings on invalid property values, debug on
store changes) through module loggers under the ``propconf`` namespace; it
never configures handlers on import.
"""

import logging
from typing import Optional

from propconf.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

ROOT_LOGGER_NAME = "propconf"


def setup_logging(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
) -> None:
    """
    Setup logging configuration for propconf.

    Call this at application startup.
    """
    fmt = format_string or "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

    logging.basicConfig(
        level=level,
        format=fmt,
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    logging.getLogger(ROOT_LOGGER_NAME).setLevel(level)


def setup_logging_from_settings(settings: Optional[Settings] = None) -> None:
    """
    Setup logging from Settings (PROPCONF_LOGGING__* variables).

    Args:
        settings: Settings to use, defaults to the singleton
    """
    settings = settings or get_settings()
    level = logging.getLevelName(settings.logging.level)
    setup_logging(level=level, format_string=settings.logging.format)
    logger.debug(f"Logging configured at {settings.logging.level}")


__all__ = [
    "ROOT_LOGGER_NAME",
    "setup_logging",
    "setup_logging_from_settings",
]
