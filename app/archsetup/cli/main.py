"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from pathlib import Path
from typing import Annotated

import typer

from archsetup import __version__
from archsetup.cli.commands import bootstrap, classify, config, install, services

app = typer.Typer(
    name="archsetup",
    help="Provision an Arch Linux desktop from a package list.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"archsetup version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show debug messages (every pacman/yay query).",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only show warnings, errors and the summary.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Settings file (default: $XDG_CONFIG_HOME/archsetup/config.toml).",
            show_default=False,
        ),
    ] = None,
) -> None:
    """archsetup - Provision an Arch Linux desktop from a package list.

    Packages from the official repositories are installed with pacman,
    everything else is built from the AUR with yay. yay itself is built
    from source first if it is missing.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = config_path


app.add_typer(install.app, name="install")
app.add_typer(classify.app, name="classify")
app.add_typer(bootstrap.app, name="bootstrap")
app.add_typer(services.app, name="services")
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
