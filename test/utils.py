from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator

RESOURCES_DIR = Path(__file__).resolve().parent / "resources"
TEST_MESSAGES_FILE = RESOURCES_DIR / "messages_test.toml"
DEFAULT_MESSAGES_FILE = RESOURCES_DIR / "messages_default.toml"


class RecordingRecipient:
    """Recipient that remembers every line it was handed."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def send_message(self, text: str) -> None:
        self.lines.append(text)


class AsyncRecordingRecipient:
    def __init__(self) -> None:
        self.lines: list[str] = []

    async def send_message(self, text: str) -> None:
        self.lines.append(text)


def extract_messages(records: list[dict[str, Any]], level: str | None = None) -> list[str]:
    """Return the formatted text of captured records, optionally for one level."""

    return [
        str(record["message"])
        for record in records
        if level is None or record["level"].name == level
    ]


@contextmanager
def capture_logs(logger: Any, level: str = "DEBUG") -> Iterator[list[dict[str, Any]]]:
    records: list[dict[str, Any]] = []

    def sink(message: Any) -> None:
        records.append(message.record)

    handler_id = logger.add(sink, level=level)
    try:
        yield records
    finally:
        logger.remove(handler_id)
