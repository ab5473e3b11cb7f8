from __future__ import annotations

import importlib
from types import SimpleNamespace

import pytest

from utils import DEFAULT_MESSAGES_FILE, TEST_MESSAGES_FILE, RecordingRecipient


@pytest.fixture(scope="module")
def catalog_modules() -> SimpleNamespace:
    return SimpleNamespace(
        logging=importlib.import_module("messagekit.logging"),
        keys=importlib.import_module("messagekit.keys"),
        duration=importlib.import_module("messagekit.duration"),
        file_handler=importlib.import_module("messagekit.file_handler"),
        provider=importlib.import_module("messagekit.provider"),
        messages=importlib.import_module("messagekit.messages"),
        recipients=importlib.import_module("messagekit.recipients"),
        config=importlib.import_module("messagekit.config"),
        reloader=importlib.import_module("messagekit.reloader"),
        main=importlib.import_module("messagekit.main"),
    )


@pytest.fixture
def messages(catalog_modules: SimpleNamespace):
    """Catalog over the test resources.

    The test file deliberately covers only a few keys; the default file plays
    the role of the bundled messages and is incomplete as well.
    """

    handler_cls = catalog_modules.file_handler.MessageFileHandler
    return catalog_modules.messages.Messages(
        lambda: handler_cls(TEST_MESSAGES_FILE, DEFAULT_MESSAGES_FILE)
    )


@pytest.fixture
def recipient() -> RecordingRecipient:
    return RecordingRecipient()


@pytest.fixture(autouse=True)
def clear_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("CONFIG_PATH", "MESSAGES_DIR", "MESSAGES_LANGUAGE"):
        monkeypatch.delenv(name, raising=False)
