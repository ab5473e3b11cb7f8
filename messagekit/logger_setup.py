"""loguru configuration for the message catalog."""

from __future__ import annotations

import os
import sys

from loguru import logger

DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def setup_logger(level: str | None = None):
    """Replace loguru's default sink with a stderr sink at the configured level."""

    resolved = (level or os.environ.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
    logger.remove()
    logger.add(sys.stderr, level=resolved, format=LOG_FORMAT)
    return logger


__all__ = ["DEFAULT_LOG_LEVEL", "setup_logger"]
