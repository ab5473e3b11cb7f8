"""Lookup of raw message text in a locale file backed by a bundled default."""

from __future__ import annotations

from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Any, Iterable

import tomllib
import yaml

from messagekit.logging import logger

RESOURCE_PACKAGE = "messagekit"
YAML_SUFFIXES = {".yml", ".yaml"}


class MessageFileError(RuntimeError):
    """Raised when a messages file cannot be read or parsed."""


def flatten_messages(data: dict[str, Any], prefix: str = "") -> dict[str, str]:
    """Flatten nested tables into dot-separated keys with string values.

    Only string leaves are kept. Other non-null scalars, such as the booleans
    YAML reads from an unquoted ``yes``, are skipped with a warning and the
    default text applies to them.
    """

    items: dict[str, str] = {}
    for key, value in data.items():
        full_key = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, dict):
            items.update(flatten_messages(value, full_key))
        elif isinstance(value, str):
            items[full_key] = value
        elif value is not None:
            logger.warning(
                "Ignoring message '{}': expected text but found {} {!r}; quote the value",
                full_key,
                type(value).__name__,
                value,
            )
    return items


def _parse(raw: bytes, name: str) -> dict[str, Any]:
    if Path(name).suffix.lower() in YAML_SUFFIXES:
        try:
            data = yaml.safe_load(raw.decode("utf-8"))
        except (yaml.YAMLError, UnicodeDecodeError) as exc:
            raise MessageFileError(f"Failed to parse messages file {name}: {exc}") from exc
    else:
        try:
            data = tomllib.loads(raw.decode("utf-8"))
        except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
            raise MessageFileError(f"Failed to parse messages file {name}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise MessageFileError(f"Messages file {name} must contain a mapping at top level")
    return data


def load_messages_file(source: Path | Traversable) -> dict[str, str]:
    """Read a TOML or YAML messages file into a flat ``{dotted.key: text}`` mapping."""

    try:
        raw = source.read_bytes()
    except FileNotFoundError as exc:
        raise MessageFileError(f"Messages file not found: {source}") from exc
    except OSError as exc:
        raise MessageFileError(f"Messages file unreadable: {source}: {exc}") from exc
    return flatten_messages(_parse(raw, source.name))


def resolve_default_file(default_file: str | Path) -> Path | Traversable:
    """Return a readable handle for the bundled default file.

    Strings name a resource inside the ``messagekit`` package, paths are used
    as they are.
    """

    if isinstance(default_file, Path):
        return default_file
    return resources.files(RESOURCE_PACKAGE).joinpath(default_file)


class MessageFileHandler:
    """Resolve message text from a primary file, falling back to a default file."""

    def __init__(
        self,
        path: str | Path,
        default_file: str | Path,
        update_command: str | None = None,
    ) -> None:
        self._path = Path(path).expanduser()
        self._default_source = resolve_default_file(default_file)
        self._update_command = update_command
        self._reported_fallbacks: set[str] = set()

        if self._path.is_file():
            self._messages = load_messages_file(self._path)
        else:
            logger.warning(
                "Messages file {} does not exist; using default messages only",
                self._path,
            )
            self._messages = {}
        self._defaults = load_messages_file(self._default_source)
        logger.debug(
            "Loaded {} messages from {} and {} defaults from {}",
            len(self._messages),
            self._path,
            len(self._defaults),
            self._default_source,
        )

    @property
    def path(self) -> Path:
        return self._path

    def has_message(self, key: str) -> bool:
        """Return whether ``key`` is defined in the primary file."""

        return key in self._messages

    def get_message(self, key: str) -> str | None:
        """Return the raw text for ``key`` or ``None`` when no file defines it.

        An empty string in the primary file is returned as-is; it is how a
        locale suppresses a message.
        """

        message = self._messages.get(key)
        if message is not None:
            return message

        default = self._defaults.get(key)
        if default is not None and key not in self._reported_fallbacks:
            self._reported_fallbacks.add(key)
            if self._update_command:
                logger.warning(
                    "Message '{}' missing in {}; using default. Run {} to update it",
                    key,
                    self._path,
                    self._update_command,
                )
            else:
                logger.warning(
                    "Message '{}' missing in {}; using default", key, self._path
                )
        return default

    def missing_keys(self, keys: Iterable[str]) -> list[str]:
        """Return the keys of ``keys`` that the primary file does not define."""

        return [key for key in keys if key not in self._messages]


__all__ = [
    "MessageFileError",
    "MessageFileHandler",
    "flatten_messages",
    "load_messages_file",
    "resolve_default_file",
]
