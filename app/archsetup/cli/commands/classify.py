"""Classify command implementation.

Shows which source each package of a list would be installed from,
without installing anything.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from archsetup.cli.display import create_classification_table
from archsetup.cli.types import fail, get_config, get_flag, require_unprivileged
from archsetup.core.classifier import classify
from archsetup.core.errors import ArchSetupError
from archsetup.core.installer import build_operators
from archsetup.core.package_list import load_package_list
from archsetup.utils.formatting import console
from archsetup.utils.logging import configure_logging, reset_logging

app = typer.Typer(
    help="Show the source each package would be installed from.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def classify_packages(
    ctx: typer.Context,
    package_file: Annotated[
        Path | None,
        typer.Argument(
            help="Package list (one name per line). Defaults to the configured package_file.",
            show_default=False,
        ),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the queues as JSON."),
    ] = False,
) -> None:
    """Classify packages into official and AUR queues.

    Queries pacman's sync databases only; nothing is installed and the
    AUR helper is not required.

    Examples:
        archsetup classify
        archsetup classify desktop.txt --json
    """
    if ctx.invoked_subcommand is not None:
        return

    require_unprivileged()
    config = get_config(ctx)
    path = package_file or Path(config.package_file)

    configure_logging(verbose=get_flag(ctx, "verbose"), quiet=True)
    try:
        packages = load_package_list(path)
        official, _ = build_operators(config)
        official.require_available()
        classified = classify(packages, official)
    except ArchSetupError as e:
        fail(e)
    finally:
        reset_logging()

    if as_json:
        data = {
            "official": list(classified.official),
            "community": list(classified.community),
        }
        console.print_json(json.dumps(data))
        return

    console.print(create_classification_table(classified, packages))
    console.print(f"\nClassified packages: {classified.total}")
    console.print(f"Official packages: {len(classified.official)}")
    console.print(f"Community packages: {len(classified.community)}")
