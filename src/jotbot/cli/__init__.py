"""jotbot CLI — entry point for chat, say, and extract commands."""

import click

from jotbot import __version__


@click.group()
@click.version_option(version=__version__, package_name="jotbot")
@click.option("--config", "config_file", type=click.Path(dir_okay=False), default=None, help="YAML or JSON config file.")
@click.option("--log-level", default=None, help="Override logging.level (DEBUG, INFO, WARNING...).")
@click.pass_context
def main(ctx: click.Context, config_file: str | None, log_level: str | None) -> None:
    """jotbot — a journaling assistant that keeps your lists."""
    from jotbot.cli.common import load_config

    ctx.obj = load_config(config_file, log_level)


# Register subcommands
from .chat_cmd import chat
from .say_cmd import extract, say

main.add_command(chat)
main.add_command(say)
main.add_command(extract)
