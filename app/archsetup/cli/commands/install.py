"""Install command implementation.

Classifies the package list and installs every package that is not
installed yet, official repositories first, then the AUR.
"""

from pathlib import Path
from typing import Annotated

import typer

from archsetup.cli.display import print_summary
from archsetup.cli.types import exit_code_for, get_config, get_flag, require_unprivileged
from archsetup.core.config import FailurePolicy
from archsetup.core.errors import ArchSetupError
from archsetup.core.installer import build_operators, run_provisioning
from archsetup.models.summary import RunSummary
from archsetup.utils.formatting import (
    print_error,
    print_heading,
    print_info,
    print_warning,
)
from archsetup.utils.logging import configure_logging, reset_logging

app = typer.Typer(
    help="Install packages from a package list.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def install_packages(
    ctx: typer.Context,
    package_file: Annotated[
        Path | None,
        typer.Argument(
            help="Package list (one name per line). Defaults to the configured package_file.",
            show_default=False,
        ),
    ] = None,
    continue_on_error: Annotated[
        bool,
        typer.Option(
            "--continue-on-error",
            "-k",
            help="Record failed packages and keep going instead of aborting.",
        ),
    ] = False,
    no_update: Annotated[
        bool,
        typer.Option("--no-update", help="Skip the full system upgrade."),
    ] = False,
    no_verify: Annotated[
        bool,
        typer.Option(
            "--no-verify",
            help="Do not check the AUR index before building community packages.",
        ),
    ] = False,
    keep_build_cache: Annotated[
        bool,
        typer.Option(
            "--keep-build-cache",
            help="Reuse the AUR helper's cached sources instead of purging them.",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", "-l", help="Run log path (truncated each run)."),
    ] = None,
    no_log: Annotated[
        bool,
        typer.Option("--no-log", help="Do not write a run log."),
    ] = False,
) -> None:
    """Install packages from a package list.

    Each name is looked up in the official repositories; names pacman
    does not know are built from the AUR. Packages that are already
    installed are skipped, so re-running is safe.

    Steps:
      1. Classify packages (pacman -Si)
      2. Upgrade the system (pacman -Syu)
      3. Install the AUR helper if it is missing
      4. Install official packages, then AUR packages
      5. Enable configured services

    Examples:
        archsetup install                        # Use packages.txt
        archsetup install desktop.txt --no-update
        archsetup install -k                     # Keep going on failures
    """
    if ctx.invoked_subcommand is not None:
        return

    require_unprivileged()
    config = get_config(ctx)

    updates: dict[str, object] = {}
    if continue_on_error:
        updates["on_error"] = FailurePolicy.CONTINUE
    if no_update:
        updates["update_system"] = False
    if no_verify:
        updates["verify_community"] = False
    if keep_build_cache:
        updates["purge_build_cache"] = False
    if updates:
        config = config.model_copy(update=updates)

    path = package_file or Path(config.package_file)
    log_path = None if no_log else (log_file or config.effective_log_path)

    try:
        configure_logging(
            verbose=get_flag(ctx, "verbose"),
            quiet=get_flag(ctx, "quiet"),
            log_file=log_path,
        )
    except OSError as e:
        print_warning(f"Cannot write run log {log_path}: {e}")
        configure_logging(verbose=get_flag(ctx, "verbose"), quiet=get_flag(ctx, "quiet"))
        log_path = None

    print_heading("Arch Setup")
    official, community = build_operators(config)
    summary = RunSummary()

    try:
        run_provisioning(
            path,
            config,
            official=official,
            community=community,
            summary=summary,
        )
    except ArchSetupError as e:
        print_error(str(e))
        if summary.classified:
            print_summary(summary)
        if log_path is not None:
            print_info(f"Run log: {log_path}")
        raise typer.Exit(code=exit_code_for(e)) from e
    finally:
        reset_logging()

    print_summary(summary)
    if log_path is not None:
        print_info(f"Run log: {log_path}")

    if summary.has_failures:
        raise typer.Exit(code=1)
