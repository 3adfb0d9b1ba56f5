"""CLI command implementations."""

import subprocess
from typing import Callable, Optional

import typer
from rich.console import Console
from rich.markup import escape

from better_console.menu import BetterConsole, Option
from better_console.utils.debug import debug
from better_console.utils.exceptions import BetterConsoleError

console = Console()


def parse_option_spec(spec: str) -> tuple[str, str]:
    """Split a NAME=COMMAND spec.

    Raises:
        typer.BadParameter: If the name or command is missing
    """
    name, sep, command = spec.partition("=")
    name, command = name.strip(), command.strip()
    if not sep or not name or not command:
        raise typer.BadParameter(f"expected NAME=COMMAND, got {spec!r}")
    return name, command


def _run_command(menu: BetterConsole, command: str) -> Callable[[], None]:
    """Build the callback for one menu entry."""

    def callback() -> None:
        console.clear()
        debug("menu", "Running command", command=command)
        result = subprocess.run(command, shell=True)
        if result.returncode != 0:
            console.print(f"[red]Exited with status {result.returncode}[/red]")
        input("\nPress Enter to continue...")
        menu.resume()

    return callback


def _fail(error: Exception) -> typer.Exit:
    console.print(f"[red]Error:[/red] {escape(str(error))}")
    return typer.Exit(2)


def cmd_menu(question: Optional[str], specs: list[str]) -> None:
    """Run an interactive menu of shell commands."""
    try:
        parsed = [parse_option_spec(spec) for spec in specs]
        menu = BetterConsole(question=question, console=console)
    except (typer.BadParameter, BetterConsoleError) as e:
        raise _fail(e)

    try:
        menu.set_options(
            [Option(name, _run_command(menu, command)) for name, command in parsed]
        )
        menu.start()
    except BetterConsoleError as e:
        raise _fail(e)
    finally:
        menu.dispose()
