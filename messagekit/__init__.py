"""Keyed, localized message catalog with default-file fallback."""

from __future__ import annotations

from messagekit.duration import Duration, TimeUnit
from messagekit.file_handler import MessageFileError, MessageFileHandler
from messagekit.keys import MessageKey
from messagekit.messages import Messages
from messagekit.provider import MessageFileHandlerProvider

__version__ = "0.1.0"

__all__ = [
    "Duration",
    "MessageFileError",
    "MessageFileHandler",
    "MessageFileHandlerProvider",
    "MessageKey",
    "Messages",
    "TimeUnit",
    "__version__",
]
