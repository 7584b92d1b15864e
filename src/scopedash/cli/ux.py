"""
CLI output helpers built on rich.

Environment handling:
- Respects NO_COLOR and FORCE_COLOR environment variables
- Falls back to plain text when stdout is not a terminal
- Status lines can go to stderr so stdout stays machine-readable
"""

from __future__ import annotations

import os

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

# Nord color palette (https://www.nordtheme.com/)
SCOPEDASH_THEME = Theme(
    {
        "info": "#88C0D0",  # Nord frost - light blue
        "success": "#A3BE8C",  # Nord aurora - green
        "error": "#BF616A bold",  # Nord aurora - red
    }
)


def _console(stderr: bool = False) -> Console:
    return Console(
        theme=SCOPEDASH_THEME,
        stderr=stderr,
        force_terminal=os.environ.get("FORCE_COLOR") is not None,
        no_color=os.environ.get("NO_COLOR") is not None,
        highlight=False,
    )


console = _console()
err_console = _console(stderr=True)


def _target(err: bool) -> Console:
    return err_console if err else console


def success(message: str, *, err: bool = False) -> None:
    """Print a success message."""
    _target(err).print(f"[success]✓ {escape(message)}[/success]")


def error(message: str, *, err: bool = False) -> None:
    """Print an error message."""
    _target(err).print(f"[error]✗ {escape(message)}[/error]")


def info(message: str, *, err: bool = False) -> None:
    """Print an info message."""
    _target(err).print(f"[info]ℹ {escape(message)}[/info]")


def print_key_value(items: dict[str, str], title: str | None = None) -> None:
    """Print key-value pairs in a nice format."""
    if title:
        console.print(f"\n[bold]{escape(title)}[/bold]")

    for key, value in items.items():
        console.print(f"  [cyan]{key}:[/cyan] {escape(str(value))}")
