"""jotbot say / jotbot extract — one-shot commands with JSON output."""

from __future__ import annotations

import json

import click

from jotbot.cli.common import create_assistant


@click.command()
@click.argument("messages", nargs=-1, required=True)
@click.pass_obj
def say(config, messages: tuple[str, ...]) -> None:
    """Handle each MESSAGE in order against one journal and print replies as JSON."""
    assistant = create_assistant(config)
    for message in messages:
        try:
            reply = assistant.handle(message)
        except ValueError as e:
            click.echo(json.dumps({"error": str(e)}))
            continue
        click.echo(json.dumps(reply.to_dict()))


@click.command()
@click.argument("text")
@click.pass_obj
def extract(config, text: str) -> None:
    """Print the pattern-extracted items for TEXT, one per line."""
    from jotbot.journal import ExtractionConfig, fallback_extract_items

    for item in fallback_extract_items(text, ExtractionConfig.from_config(config)):
        click.echo(item)
