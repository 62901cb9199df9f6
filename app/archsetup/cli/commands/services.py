"""Services command implementation.

Enables the systemd units listed in the settings file.
"""

from typing import Annotated

import typer

from archsetup.cli.display import create_services_table
from archsetup.cli.types import fail, get_config, get_flag, require_unprivileged
from archsetup.core.errors import ArchSetupError
from archsetup.core.services import enable_services
from archsetup.models.service import ServiceResult
from archsetup.utils.formatting import console, print_info, print_success, print_warning
from archsetup.utils.logging import configure_logging, reset_logging

app = typer.Typer(
    help="Enable configured systemd services.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def enable_configured_services(
    ctx: typer.Context,
    units: Annotated[
        list[str] | None,
        typer.Argument(help="System units to enable instead of the configured ones."),
    ] = None,
    user: Annotated[
        bool,
        typer.Option("--user", help="With UNITS: enable them in the user manager."),
    ] = False,
) -> None:
    """Enable systemd units that are not enabled yet.

    Without arguments, enables the ``services`` and ``user_services``
    lists from the settings file.

    Examples:
        archsetup services
        archsetup services sddm docker
        archsetup services --user pipewire wireplumber
    """
    if ctx.invoked_subcommand is not None:
        return

    require_unprivileged()
    config = get_config(ctx)
    timeout = config.timeouts.query_limit

    if units:
        system_units = [] if user else units
        user_units = units if user else []
    else:
        system_units = config.services
        user_units = config.user_services

    if not system_units and not user_units:
        print_info("No services configured. Nothing to do.")
        return

    configure_logging(verbose=get_flag(ctx, "verbose"), quiet=get_flag(ctx, "quiet"))
    results: list[ServiceResult] = []
    try:
        results.extend(enable_services(system_units, timeout=timeout))
        results.extend(enable_services(user_units, user=True, timeout=timeout))
    except ArchSetupError as e:
        if results:
            console.print(create_services_table(results))
        fail(e)
    finally:
        reset_logging()

    console.print(create_services_table(results))
    if any(r.failed for r in results):
        print_warning("Some user services may need to be enabled manually.")
    else:
        print_success("Services configured.")
