"""Structured logging setup.

The package only ever calls ``structlog.get_logger()``; applications call
``configure_logging()`` once at startup to pick the renderer and level.
"""

import logging
from typing import Optional

import structlog

from formstate.config import Settings, get_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Install the structlog processor chain for the given settings."""
    settings = settings or get_settings()
    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(level, int):
        level = logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if settings.DEBUG else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False,
    )
