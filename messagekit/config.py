"""Configuration helpers for the message catalog."""

from __future__ import annotations

import os
from configparser import ConfigParser
from functools import partial
from pathlib import Path
from typing import Any

from messagekit.logging import logger
from messagekit.messages import DEFAULT_PLACEHOLDER, Messages
from messagekit.provider import DEFAULT_LANGUAGE, MessageFileHandlerProvider

DEFAULT_CONFIG_PATH = Path("config.ini")
DEFAULT_MESSAGES_DIR = Path("messages")
CONFIG_SECTION = "messages"


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load catalog settings from an ini file.

    Missing files or sections leave every option at its default. The
    ``MESSAGES_LANGUAGE`` and ``MESSAGES_DIR`` environment variables take
    precedence over the file.
    """

    config_source = path or os.environ.get("CONFIG_PATH") or DEFAULT_CONFIG_PATH
    config_path = Path(config_source).expanduser()
    logger.debug("Loading configuration from {}", config_path)

    parser = ConfigParser(interpolation=None)
    if not parser.read(config_path, encoding="utf-8"):
        logger.debug("Config file {} not found; using defaults", config_path)
    if not parser.has_section(CONFIG_SECTION):
        logger.debug(
            "Section '{}' missing in config file {}; using defaults",
            CONFIG_SECTION,
            config_path,
        )
        parser.add_section(CONFIG_SECTION)

    language = (
        os.environ.get("MESSAGES_LANGUAGE")
        or parser.get(CONFIG_SECTION, "language", fallback="").strip()
        or DEFAULT_LANGUAGE
    )

    raw_dir = (
        os.environ.get("MESSAGES_DIR")
        or parser.get(CONFIG_SECTION, "messages_dir", fallback="").strip()
    )
    messages_dir = Path(raw_dir).expanduser() if raw_dir else DEFAULT_MESSAGES_DIR.resolve()

    placeholder = parser.get(
        CONFIG_SECTION, "placeholder", fallback=DEFAULT_PLACEHOLDER
    ).strip()
    if not placeholder:
        logger.error("Placeholder token is empty in the config file {}", config_path)
        raise RuntimeError("Placeholder token must not be empty.")

    update_command = (
        parser.get(CONFIG_SECTION, "update_command", fallback="").strip() or None
    )

    logger.info(
        "Configuration loaded for language '{}' with messages directory {}",
        language,
        messages_dir,
    )

    return {
        "language": language,
        "messages_dir": str(messages_dir),
        "placeholder": placeholder,
        "update_command": update_command,
    }


def create_messages(settings: dict[str, Any]) -> Messages:
    """Create a :class:`Messages` catalog from loaded configuration settings."""

    provider = MessageFileHandlerProvider(
        settings["messages_dir"], update_command=settings.get("update_command")
    )
    messages = Messages(
        partial(provider.initialize_handler, settings.get("language", DEFAULT_LANGUAGE)),
        placeholder=settings.get("placeholder") or DEFAULT_PLACEHOLDER,
    )
    logger.info("Messages catalog ready from {}", messages.handler.path)
    return messages


__all__ = [
    "CONFIG_SECTION",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_MESSAGES_DIR",
    "create_messages",
    "load_config",
]
