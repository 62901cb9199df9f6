"""Rich console formatting utilities.

Regular output goes to stdout; warnings and errors go to stderr so that
``archsetup classify --json`` stays machine-readable.
"""

import sys
from typing import TextIO

from rich.console import Console

from archsetup.core.theme import get_theme


def _color_system_for(stream: TextIO) -> str | None:
    """Return "truecolor" when the stream is a terminal, None otherwise.

    None lets Rich auto-detect, which disables color for pipes and log
    captures.
    """
    if stream.isatty():
        return "truecolor"
    return None


console = Console(theme=get_theme(), color_system=_color_system_for(sys.stdout))
err_console = Console(
    theme=get_theme(),
    stderr=True,
    color_system=_color_system_for(sys.stderr),
)


def print_heading(title: str) -> None:
    """Print a section banner such as ``=== Arch Setup ===``."""
    console.print(f"[bold]=== {title} ===[/bold]", highlight=False)


def print_info(message: str) -> None:
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning to stderr."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error to stderr."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    console.print(f"[success]{message}[/]")
