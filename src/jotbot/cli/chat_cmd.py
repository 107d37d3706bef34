"""jotbot chat — interactive journal in the terminal."""

from __future__ import annotations

import click

from jotbot.cli.common import create_assistant

HELP_TEXT = (
    "Just type naturally.\n\n"
    "  Add eggs and milk to my shopping list\n"
    "  What's on my shopping list?\n\n"
    "Commands:\n"
    "  /list — Show recent entries\n"
    "  /exit — Quit"
)


def render_reply(console, reply) -> None:
    """Print an AssistantReply with rich markup."""
    console.print(f"[bold green]jotbot:[/] {reply.message}")
    if reply.items:
        for item in reply.items:
            console.print(f"  • {item}")
    if reply.warning:
        console.print(f"[yellow]{reply.warning}[/yellow]")
    console.print()


@click.command()
@click.option("--recent", default=10, show_default=True, help="Entries shown by /list.")
@click.pass_obj
def chat(config, recent: int) -> None:
    """Chat with your journal in the terminal."""
    from rich.console import Console
    from rich.panel import Panel
    from rich.table import Table

    assistant = create_assistant(config)
    console = Console()
    console.print(Panel(HELP_TEXT, title="jotbot"))

    while True:
        try:
            user_input = console.input("[bold cyan]You:[/] ").strip()
        except (EOFError, KeyboardInterrupt):
            console.print("\nGoodbye!")
            break

        if not user_input:
            continue
        command = user_input.lower()
        if command == "/exit":
            console.print("Goodbye!")
            break
        if command == "/help":
            console.print(Panel(HELP_TEXT, title="Help"))
            continue
        if command == "/list":
            table = Table("id", "content", "items")
            for entry in assistant.store.recent(recent):
                table.add_row(entry.id, entry.content, ", ".join(entry.items))
            console.print(table)
            continue

        render_reply(console, assistant.handle(user_input))
