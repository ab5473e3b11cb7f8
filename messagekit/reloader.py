"""Reload the catalog whenever its locale file changes on disk."""

from __future__ import annotations

import threading
from pathlib import Path

from watchfiles import watch

from messagekit.logging import logger
from messagekit.messages import Messages


def watch_messages(
    messages: Messages,
    path: str | Path | None = None,
    stop_event: threading.Event | None = None,
) -> int:
    """Block until ``stop_event`` is set, reloading ``messages`` after each change.

    Returns the number of successful reloads.
    """

    target = (Path(path) if path is not None else messages.handler.path).resolve()
    logger.info("Watching {} for message changes", target)
    reloads = 0
    for changes in watch(
        target.parent,
        watch_filter=lambda _change, changed: Path(changed) == target,
        stop_event=stop_event,
    ):
        logger.debug("Detected {} change(s) in {}", len(changes), target)
        if messages.reload():
            reloads += 1
    logger.info("Stopped watching {} after {} reload(s)", target, reloads)
    return reloads


__all__ = ["watch_messages"]
