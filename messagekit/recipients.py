"""Line-oriented sinks that catalog messages are delivered to."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Protocol, TextIO, runtime_checkable

if TYPE_CHECKING:
    from telegram import Bot


@runtime_checkable
class Recipient(Protocol):
    """Anything that accepts one line of text at a time."""

    def send_message(self, text: str) -> None: ...


@runtime_checkable
class AsyncRecipient(Protocol):
    """Coroutine-based counterpart of :class:`Recipient`."""

    async def send_message(self, text: str) -> None: ...


class ConsoleRecipient:
    """Write each line to a text stream, stdout unless told otherwise."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def send_message(self, text: str) -> None:
        stream = self._stream or sys.stdout
        stream.write(text + "\n")
        stream.flush()


class ChatRecipient:
    """Deliver lines to a Telegram chat through the bot API."""

    def __init__(self, bot: Bot, chat_id: int, parse_mode: str | None = None) -> None:
        self.bot = bot
        self.chat_id = chat_id
        self.parse_mode = parse_mode

    async def send_message(self, text: str) -> None:
        await self.bot.send_message(
            chat_id=self.chat_id, text=text, parse_mode=self.parse_mode
        )


__all__ = ["AsyncRecipient", "ChatRecipient", "ConsoleRecipient", "Recipient"]
