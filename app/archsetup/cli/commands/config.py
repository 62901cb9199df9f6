"""Config command implementation.

Shows the effective settings or writes a settings file with defaults.
"""

from typing import Annotated

import tomli_w
import typer

from archsetup.cli.types import fail, get_config, get_config_path
from archsetup.core.config import SetupConfig, config_to_dict, save_config
from archsetup.core.errors import ArchSetupError
from archsetup.core.paths import get_config_path as get_default_config_path
from archsetup.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or create the settings file.",
    no_args_is_help=True,
)


@app.command("show")
def show_config(ctx: typer.Context) -> None:
    """Print the effective settings as TOML.

    Values missing from the settings file are shown with their defaults.
    """
    path = get_config_path(ctx) or get_default_config_path()
    config = get_config(ctx)

    print_info(f"Settings: {path}")
    if not path.exists():
        print_info("File not found, using defaults.")
    console.print(tomli_w.dumps(config_to_dict(config)), markup=False, highlight=False)


@app.command("init")
def init_config(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite an existing settings file.",
        ),
    ] = False,
) -> None:
    """Write a settings file with the default values.

    Examples:
        archsetup config init
        archsetup -c ./archsetup.toml config init --force
    """
    path = get_config_path(ctx) or get_default_config_path()

    if path.exists() and not force:
        print_error(f"Settings file already exists: {path}")
        print_info("Use --force to overwrite.")
        raise typer.Exit(code=1)

    try:
        saved = save_config(SetupConfig(), path)
    except ArchSetupError as e:
        fail(e)

    print_success(f"Settings written to {saved}")
