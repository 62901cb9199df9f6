"""CLI package for archsetup.

This package contains the Typer application and all subcommands.
"""

from archsetup.cli.main import app

__all__ = ["app"]
