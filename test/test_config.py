from __future__ import annotations

from pathlib import Path

import pytest

from utils import capture_logs, extract_messages


def test_load_config_logs_and_parses(tmp_path: Path, catalog_modules) -> None:
    locales_dir = tmp_path / "locales"
    config_path = tmp_path / "config.ini"
    config_path.write_text(
        f"""
[messages]
language = ru
messages_dir = {locales_dir}
placeholder = %s
update_command = messagekit check
""".strip()
    )

    with capture_logs(catalog_modules.logging.logger, level="INFO") as records:
        config = catalog_modules.config.load_config(config_path)

    assert config["language"] == "ru"
    assert config["messages_dir"] == str(locales_dir)
    assert config["placeholder"] == "%s"
    assert config["update_command"] == "messagekit check"

    messages = extract_messages(records)
    assert any("Configuration loaded for language 'ru'" in message for message in messages)


def test_load_config_defaults_without_file(tmp_path: Path, catalog_modules) -> None:
    config = catalog_modules.config.load_config(tmp_path / "missing.ini")

    assert config["language"] == "en"
    assert config["messages_dir"] == str(Path("messages").resolve())
    assert config["placeholder"] == "%s"
    assert config["update_command"] is None


def test_environment_overrides_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, catalog_modules
) -> None:
    config_path = tmp_path / "config.ini"
    config_path.write_text("[messages]\nlanguage = en\nmessages_dir = /nowhere\n")
    monkeypatch.setenv("CONFIG_PATH", str(config_path))
    monkeypatch.setenv("MESSAGES_LANGUAGE", "ru")
    monkeypatch.setenv("MESSAGES_DIR", str(tmp_path / "override"))

    config = catalog_modules.config.load_config()

    assert config["language"] == "ru"
    assert config["messages_dir"] == str(tmp_path / "override")


def test_empty_placeholder_is_rejected(tmp_path: Path, catalog_modules) -> None:
    config_path = tmp_path / "config.ini"
    config_path.write_text("[messages]\nplaceholder =\n")

    with pytest.raises(RuntimeError):
        catalog_modules.config.load_config(config_path)


def test_create_messages_builds_catalog(tmp_path: Path, catalog_modules) -> None:
    settings = {
        "language": "ru",
        "messages_dir": str(tmp_path),
        "placeholder": "%s",
        "update_command": None,
    }

    catalog = catalog_modules.config.create_messages(settings)

    assert catalog.handler.path == tmp_path / "messages_ru.toml"
    assert catalog.retrieve_single(
        catalog_modules.keys.MessageKey.CAPTCHA_WRONG_ERROR, "42"
    ) == "Неверная капча, введите /captcha 42 в чат!"


def test_default_paths_resolve_against_working_directory(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, catalog_modules
) -> None:
    monkeypatch.chdir(tmp_path)
    package_dir = Path(catalog_modules.config.__file__).resolve().parent

    config = catalog_modules.config.load_config()
    catalog = catalog_modules.config.create_messages(config)

    messages_dir = Path(config["messages_dir"])
    assert messages_dir == tmp_path.resolve() / "messages"
    assert not messages_dir.is_relative_to(package_dir.parent)
    assert catalog.handler.path == messages_dir / "messages_en.toml"
    assert catalog.handler.path.is_file()
