"""Bootstrap command implementation.

Builds and installs the AUR helper if it is not on PATH yet.
"""

import typer

from archsetup.cli.types import fail, get_config, get_flag, require_unprivileged
from archsetup.core.bootstrap import ensure_helper_tool
from archsetup.core.errors import ArchSetupError
from archsetup.core.installer import build_operators
from archsetup.utils.formatting import print_success
from archsetup.utils.logging import configure_logging, reset_logging

app = typer.Typer(
    help="Install the AUR helper if it is missing.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def bootstrap_helper(ctx: typer.Context) -> None:
    """Install the AUR helper if it is missing.

    Clones the helper's PKGBUILD from the AUR into a temporary directory
    and builds it with makepkg. The temporary directory is always removed.
    """
    if ctx.invoked_subcommand is not None:
        return

    require_unprivileged()
    config = get_config(ctx)

    configure_logging(verbose=get_flag(ctx, "verbose"), quiet=get_flag(ctx, "quiet"))
    try:
        official, _ = build_operators(config)
        built = ensure_helper_tool(
            config.helper,
            official,
            timeout=config.timeouts.bootstrap_limit,
        )
    except ArchSetupError as e:
        fail(e)
    finally:
        reset_logging()

    if built:
        print_success(f"{config.helper.name} installed.")
    else:
        print_success(f"{config.helper.name} is already installed. Nothing to do.")
