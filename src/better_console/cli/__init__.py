"""CLI entry point for better-console.

Builds a menu from NAME=COMMAND pairs; selecting an entry runs its shell
command and comes back to the menu.
"""

from typing import Optional

import typer

__all__ = ["app", "main"]

app = typer.Typer(
    name="better-console",
    help="Arrow-key selection menu for shell commands",
    add_completion=False,
)


@app.command()
def main(
    option: Optional[list[str]] = typer.Option(
        None,
        "--option",
        "-o",
        help="Menu entry as NAME=COMMAND (repeatable)",
    ),
    question: Optional[str] = typer.Option(
        None, "--question", "-q", help="Prompt shown above the options"
    ),
) -> None:
    """Show a menu and run the selected command."""
    from better_console.cli.commands import cmd_menu

    cmd_menu(question, option or [])


if __name__ == "__main__":
    app()
