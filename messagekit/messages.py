"""Message catalog: retrieval, placeholder substitution and delivery."""

from __future__ import annotations

from typing import Any, Callable, Sequence

from messagekit.duration import Duration, TimeUnit, format_duration
from messagekit.file_handler import MessageFileError, MessageFileHandler
from messagekit.keys import MessageKey
from messagekit.logging import logger
from messagekit.recipients import AsyncRecipient, Recipient

DEFAULT_PLACEHOLDER = "%s"
NEWLINE_ESCAPE = "\\n"

UNIT_KEYS: dict[TimeUnit, tuple[MessageKey, MessageKey]] = {
    TimeUnit.SECONDS: (MessageKey.SECOND, MessageKey.SECONDS),
    TimeUnit.MINUTES: (MessageKey.MINUTE, MessageKey.MINUTES),
    TimeUnit.HOURS: (MessageKey.HOUR, MessageKey.HOURS),
    TimeUnit.DAYS: (MessageKey.DAY, MessageKey.DAYS),
}


def split_lines(raw: str) -> list[str]:
    """Split raw message text into lines.

    Both the two-character ``\\n`` escape and physical line breaks end a line.
    Empty lines are kept and an empty message yields a single empty line.
    """

    normalized = raw.replace("\r\n", "\n").replace("\r", "\n")
    return normalized.replace(NEWLINE_ESCAPE, "\n").split("\n")


def substitute(
    lines: Sequence[str], placeholder: str, replacements: Sequence[Any]
) -> list[str]:
    """Replace placeholders in reading order with ``replacements``.

    Each placeholder consumes the next pending replacement. Once they run out
    the remaining placeholders stay literal; surplus replacements are ignored.
    """

    pending = iter(replacements)
    exhausted = False
    result: list[str] = []
    for line in lines:
        if exhausted or placeholder not in line:
            result.append(line)
            continue
        parts: list[str] = []
        position = 0
        while True:
            index = line.find(placeholder, position)
            if index < 0:
                break
            try:
                value = next(pending)
            except StopIteration:
                exhausted = True
                break
            parts.append(line[position:index])
            parts.append(str(value))
            position = index + len(placeholder)
        parts.append(line[position:])
        result.append("".join(parts))
    return result


class Messages:
    """Keyed catalog of user-facing messages.

    ``handler_factory`` builds the :class:`MessageFileHandler` backing the
    catalog; it is called once on construction and again on :meth:`reload`.
    """

    def __init__(
        self,
        handler_factory: Callable[[], MessageFileHandler],
        placeholder: str = DEFAULT_PLACEHOLDER,
    ) -> None:
        if not placeholder:
            raise ValueError("Placeholder token must not be empty")
        self._handler_factory = handler_factory
        self._placeholder = placeholder
        self._handler = handler_factory()

    @property
    def handler(self) -> MessageFileHandler:
        return self._handler

    @property
    def placeholder(self) -> str:
        return self._placeholder

    def reload(self) -> bool:
        """Rebuild the file handler, keeping the current one if loading fails."""

        try:
            handler = self._handler_factory()
        except MessageFileError as exc:
            logger.error("Reloading messages failed, keeping previous messages: {}", exc)
            return False
        self._handler = handler
        logger.info("Messages reloaded from {}", handler.path)
        return True

    def retrieve(self, key: MessageKey, *replacements: Any) -> list[str]:
        """Return the lines of the message for ``key`` with placeholders filled."""

        lines = split_lines(self._raw_message(key))
        if not replacements:
            return lines

        if len(replacements) != key.arity:
            logger.warning(
                "Invalid number of replacements for message key '{}': expected {}, got {}",
                key.key,
                key.arity,
                len(replacements),
            )
            if key.arity == 0:
                return lines
        return substitute(lines, self._placeholder, replacements)

    def retrieve_single(self, key: MessageKey, *replacements: Any) -> str:
        """Return the message for ``key`` as one newline-joined string."""

        return "\n".join(self.retrieve(key, *replacements))

    def send(self, recipient: Recipient, key: MessageKey, *replacements: Any) -> None:
        """Deliver the message for ``key`` to ``recipient`` one line at a time."""

        lines = self.retrieve(key, *replacements)
        if _is_suppressed(lines):
            logger.debug("Message '{}' is empty; nothing sent", key.key)
            return
        for line in lines:
            recipient.send_message(line)

    async def send_async(
        self, recipient: AsyncRecipient, key: MessageKey, *replacements: Any
    ) -> None:
        """Awaitable variant of :meth:`send` for coroutine-based recipients."""

        lines = self.retrieve(key, *replacements)
        if _is_suppressed(lines):
            logger.debug("Message '{}' is empty; nothing sent", key.key)
            return
        for line in lines:
            await recipient.send_message(line)

    def format_duration(self, duration: Duration) -> str:
        """Render ``duration`` using the unit labels of the active locale."""

        singular, plural = UNIT_KEYS[duration.unit]
        labels = {
            duration.unit: (self.retrieve_single(singular), self.retrieve_single(plural))
        }
        return format_duration(duration, labels)

    def _raw_message(self, key: MessageKey) -> str:
        message = self._handler.get_message(key.key)
        if message is None:
            logger.error(
                "Message '{}' ({}) is missing from {} and from the default messages",
                key.key,
                key.name,
                self._handler.path,
            )
            return f"Error retrieving message '{key.key}'"
        return message


def _is_suppressed(lines: list[str]) -> bool:
    return len(lines) == 1 and not lines[0]


__all__ = [
    "DEFAULT_PLACEHOLDER",
    "Messages",
    "split_lines",
    "substitute",
]
