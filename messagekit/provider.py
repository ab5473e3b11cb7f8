"""Locate the locale messages file and build handlers for it."""

from __future__ import annotations

import re
import shutil
from importlib import resources
from pathlib import Path

from messagekit.file_handler import RESOURCE_PACKAGE, MessageFileError, MessageFileHandler
from messagekit.logging import logger

DEFAULT_LANGUAGE = "en"
LOCALES_RESOURCE_DIR = "locales"
DEFAULT_MESSAGES_RESOURCE = f"{LOCALES_RESOURCE_DIR}/messages_{DEFAULT_LANGUAGE}.toml"

_LANGUAGE_PATTERN = re.compile(r"^[a-z_]+$")
_FILE_SUFFIXES = (".yml", ".yaml", ".toml")


def normalize_language(language: str | None) -> str:
    """Lower-case ``language`` and fall back to English for unusable codes."""

    candidate = (language or "").strip().lower()
    if not _LANGUAGE_PATTERN.match(candidate):
        logger.warning(
            "Invalid messages language {!r}; falling back to '{}'",
            language,
            DEFAULT_LANGUAGE,
        )
        return DEFAULT_LANGUAGE
    return candidate


class MessageFileHandlerProvider:
    """Create :class:`MessageFileHandler` instances for a messages directory.

    Locale files are named ``messages_<language>.toml`` (YAML files with the
    same stem are honoured when present). A locale file that does not exist
    yet is seeded from the bundled copy for that language, or from the bundled
    English messages when the language is not bundled.
    """

    def __init__(self, messages_dir: str | Path, update_command: str | None = None) -> None:
        self.messages_dir = Path(messages_dir).expanduser()
        self.update_command = update_command

    def file_path_for(self, language: str) -> Path:
        stem = f"messages_{normalize_language(language)}"
        for suffix in _FILE_SUFFIXES:
            candidate = self.messages_dir / f"{stem}{suffix}"
            if candidate.exists():
                return candidate
        return self.messages_dir / f"{stem}.toml"

    def initialize_handler(self, language: str) -> MessageFileHandler:
        language = normalize_language(language)
        path = self.file_path_for(language)
        if not path.exists():
            self._copy_bundled_file(language, path)
        return MessageFileHandler(path, DEFAULT_MESSAGES_RESOURCE, self.update_command)

    def _copy_bundled_file(self, language: str, target: Path) -> None:
        locales = resources.files(RESOURCE_PACKAGE).joinpath(LOCALES_RESOURCE_DIR)
        source = locales.joinpath(f"messages_{language}.toml")
        if not source.is_file():
            logger.info(
                "No bundled messages for language '{}'; seeding {} from '{}'",
                language,
                target,
                DEFAULT_LANGUAGE,
            )
            source = locales.joinpath(f"messages_{DEFAULT_LANGUAGE}.toml")

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with resources.as_file(source) as source_path:
                shutil.copyfile(source_path, target)
        except OSError as exc:
            logger.error("Could not create messages file {}: {}", target, exc)
            raise MessageFileError(f"Could not create messages file {target}: {exc}") from exc
        logger.info("Created messages file {}", target)


__all__ = [
    "DEFAULT_LANGUAGE",
    "DEFAULT_MESSAGES_RESOURCE",
    "MessageFileHandlerProvider",
    "normalize_language",
]
