"""Shared helpers for CLI commands.

This module provides settings access, the privilege guard and error
reporting used by several command modules.
"""

from pathlib import Path
from typing import NoReturn

import typer

from archsetup.core.config import SetupConfig, load_config
from archsetup.core.errors import ArchSetupError, CommandError
from archsetup.core.privileges import check_privileges
from archsetup.utils.formatting import print_error


def get_config_path(ctx: typer.Context) -> Path | None:
    """Return the settings file passed with ``--config``, if any."""
    obj = ctx.find_root().obj or {}
    path = obj.get("config_path")
    return Path(path) if path is not None else None


def get_config(ctx: typer.Context) -> SetupConfig:
    """Load the settings for this invocation.

    Exits with status 1 if the settings file is invalid.
    """
    try:
        return load_config(get_config_path(ctx))
    except ArchSetupError as e:
        fail(e)


def get_flag(ctx: typer.Context, name: str) -> bool:
    """Return a global boolean option stored by the main callback."""
    obj = ctx.find_root().obj or {}
    return bool(obj.get(name, False))


def require_unprivileged() -> None:
    """Exit with status 1 when running as root."""
    try:
        check_privileges()
    except ArchSetupError as e:
        fail(e)


def exit_code_for(error: ArchSetupError) -> int:
    """Map an error to a process exit status.

    Command failures propagate the failing command's own exit status
    when it is known; everything else exits with 1.
    """
    if isinstance(error, CommandError) and error.returncode and error.returncode > 0:
        return error.returncode
    return 1


def fail(error: ArchSetupError) -> NoReturn:
    """Report an error and terminate the command."""
    print_error(str(error))
    raise typer.Exit(code=exit_code_for(error)) from error
