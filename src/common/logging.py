"""
Logging configuration helpers.
Every entrypoint calls `configure_logging` once so modules can log through `logging.getLogger(__name__)`.
"""

from __future__ import annotations

import logging

from src.common.settings import get_settings

_LOGGING_CONFIGURED = False


def configure_logging() -> None:
    """Configure process-wide logging from environment settings."""

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    settings = get_settings()
    level_name = settings.LOG_LEVEL.upper()
    level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    # pymongo's topology chatter drowns request logs at DEBUG.
    logging.getLogger("pymongo").setLevel(max(level, logging.INFO))
    _LOGGING_CONFIGURED = True
