"""Shared logging utilities for the message catalog."""

from __future__ import annotations

from messagekit.logger_setup import setup_logger

logger = setup_logger()

__all__ = ["logger"]
