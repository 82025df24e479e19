"""CLI utility functions shared across commands."""

from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

console = Console()
err_console = Console(stderr=True)

# compact format: level + message, no timestamps
CLI_LOG_FORMAT = "<level>{level: <8}</level> | <level>{message}</level>"


def fail(message: str) -> NoReturn:
    """Print an error message and exit with status 1.

    Raises:
        typer.Exit: Always
    """
    err_console.print(f"[red]Error: {escape(message)}[/red]", soft_wrap=True)
    raise typer.Exit(1)
