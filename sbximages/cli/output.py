"""Shared Rich consoles and the one-line failure path for CLI commands."""

from __future__ import annotations

from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

console = Console()

# soft_wrap keeps each diagnostic on a single line regardless of width.
err_console = Console(stderr=True, soft_wrap=True, highlight=False)


def fail(message: object, *, context: str = "", code: int = 1) -> NoReturn:
    """Print ``error: [context: ]message`` as one line on stderr and exit with *code*."""
    text = f"{context}: {message}" if context else str(message)
    text = " ".join(text.split())
    err_console.print(f"[bold red]error:[/bold red] {escape(text)}")
    raise typer.Exit(code=code)
