"""Command line entry point for inspecting and watching the message catalog."""

from __future__ import annotations

import click

from messagekit.config import create_messages, load_config
from messagekit.keys import MessageKey
from messagekit.logging import logger
from messagekit.messages import Messages
from messagekit.recipients import ConsoleRecipient
from messagekit.reloader import watch_messages


def resolve_key(name: str) -> MessageKey:
    """Accept either an enum member name or a dotted message path."""

    try:
        return MessageKey[name.upper()]
    except KeyError:
        pass
    try:
        return MessageKey.from_path(name)
    except KeyError as exc:
        raise click.BadParameter(f"Unknown message key: {name}") from exc


def _load_messages(ctx: click.Context) -> Messages:
    options = ctx.obj
    try:
        settings = load_config(options["config"])
    except RuntimeError as exc:
        raise click.ClickException(f"Failed to load configuration: {exc}") from exc
    if options["language"]:
        settings["language"] = options["language"]
    return create_messages(settings)


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to the ini configuration file.",
)
@click.option("--language", default=None, help="Override the configured language.")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, language: str | None) -> None:
    """Inspect the message catalog."""
    ctx.obj = {"config": config_path, "language": language}


@cli.command("show")
@click.argument("key")
@click.argument("values", nargs=-1)
@click.pass_context
def show_command(ctx: click.Context, key: str, values: tuple[str, ...]) -> None:
    """Print the message for KEY, filling its placeholders with VALUES."""
    message_key = resolve_key(key)
    messages = _load_messages(ctx)
    messages.send(ConsoleRecipient(), message_key, *values)


@cli.command("check")
@click.pass_context
def check_command(ctx: click.Context) -> None:
    """List message keys missing from the active locale file."""
    messages = _load_messages(ctx)
    missing = messages.handler.missing_keys(key.key for key in MessageKey)
    if not missing:
        click.echo(f"All {len(MessageKey)} messages present in {messages.handler.path}")
        return
    click.echo(f"{len(missing)} message(s) missing in {messages.handler.path}:")
    for key in missing:
        click.echo(f"  {key}")
    ctx.exit(1)


@cli.command("watch")
@click.pass_context
def watch_command(ctx: click.Context) -> None:
    """Reload the catalog whenever the locale file changes."""
    messages = _load_messages(ctx)
    try:
        watch_messages(messages)
    except KeyboardInterrupt:
        logger.info("Watch interrupted")


def main() -> None:
    """Entry point used by ``python -m messagekit.main``."""

    cli()


if __name__ == "__main__":
    main()
