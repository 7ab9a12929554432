"""Logging helpers shared by all modules."""

from __future__ import annotations

import logging

from folio_analytics.config import LOG_DATE_FORMAT, LOG_FORMAT

__all__ = ["get_logger", "setup_logging"]


def get_logger(name: str) -> logging.Logger:
    """Return a module logger. Handlers are configured once by setup_logging()."""
    return logging.getLogger(name)


def setup_logging(level: str | int = logging.WARNING) -> None:
    """Configure the root logger with the project format.

    Args:
        level: Level name ("DEBUG", "INFO", ...) or numeric level.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper())
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
