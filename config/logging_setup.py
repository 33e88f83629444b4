"""Logging bootstrap for callers embedding the projection engine."""

from __future__ import annotations

import logging
import sys

from .settings import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
ROOT_LOGGER_NAMES = ("analytics", "core", "config")


def configure_logging(level: int | str | None = None) -> None:
    """Attach a single stdout handler to the engine loggers.

    Calling this more than once only updates the level; handlers are not
    duplicated. The engine modules themselves never configure logging.
    """

    resolved = level if level is not None else get_settings().log_level
    if isinstance(resolved, str):
        resolved = resolved.upper()

    formatter = logging.Formatter(LOG_FORMAT)
    for name in ROOT_LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(resolved)
        if logger.handlers:
            continue
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
