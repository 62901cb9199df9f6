"""Install orchestration.

Turns a package list into installed system state:

    package list -> classify -> {official queue, community queue}
    -> system upgrade -> ensure AUR helper -> install official queue
    -> community prerequisites -> install community queue -> services

Every step is idempotent: packages already in the local database are
skipped without issuing an install command, so a second run over the
same list is a no-op. Nothing is rolled back on failure; packages
installed before the failure stay installed.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from archsetup.core.bootstrap import ensure_helper_tool
from archsetup.core.classifier import classify
from archsetup.core.config import FailurePolicy, SetupConfig
from archsetup.core.errors import CommandError
from archsetup.core.package_list import load_package_list
from archsetup.core.services import enable_services
from archsetup.models.package import InstallOutcome, PackageRecord, PackageSource
from archsetup.models.summary import RunSummary
from archsetup.operators.pacman import PacmanOperator
from archsetup.operators.yay import YayOperator

if TYPE_CHECKING:
    from pathlib import Path

    from archsetup.operators.base import Operator

logger = logging.getLogger(__name__)


def build_operators(config: SetupConfig) -> tuple[PacmanOperator, YayOperator]:
    """Create the official and community operators for a configuration.

    Args:
        config: Run settings.

    Returns:
        Tuple of (official operator, community operator).
    """
    timeouts = config.timeouts
    official = PacmanOperator(
        query_timeout=timeouts.query_limit,
        install_timeout=timeouts.install_limit,
    )
    community = YayOperator(
        helper=config.helper.name,
        cache_dir=config.helper.effective_cache_dir if config.purge_build_cache else None,
        query_timeout=timeouts.query_limit,
        install_timeout=timeouts.install_limit,
    )
    return official, community


def _process_package(name: str, operator: Operator, verify: bool) -> PackageRecord:
    """Skip, reject or install a single package."""
    source = operator.source

    if operator.is_installed(name):
        logger.info("[SKIP] %s already installed", name)
        return PackageRecord(name=name, source=source, outcome=InstallOutcome.ALREADY_INSTALLED)

    if verify and not operator.exists(name):
        logger.warning("[MISSING] %s not found (skipped)", name)
        return PackageRecord(
            name=name,
            source=source,
            outcome=InstallOutcome.NOT_FOUND,
            detail=f"not found in the {source.label} index",
        )

    suffix = " (AUR)" if source is PackageSource.COMMUNITY else ""
    logger.info("[INSTALL] %s%s", name, suffix)
    result = operator.install(name)

    if result.success:
        return PackageRecord(name=name, source=source, outcome=InstallOutcome.INSTALLED)
    return PackageRecord(
        name=name,
        source=source,
        outcome=InstallOutcome.FAILED,
        detail=result.error,
        returncode=result.returncode,
    )


def install_queue(
    queue: Iterable[str],
    operator: Operator,
    *,
    policy: FailurePolicy = FailurePolicy.ABORT,
    verify: bool = False,
    summary: RunSummary | None = None,
) -> list[PackageRecord]:
    """Install the packages of one source queue in order.

    Under ``FailurePolicy.ABORT`` the first failure raises, so no install
    command is issued for any later package in the queue. Under
    ``FailurePolicy.CONTINUE`` failures are recorded and processing goes on.

    Args:
        queue: Package names in install order.
        operator: Operator of the queue's source.
        policy: Failure policy.
        verify: Check the source index before installing; names it does not
            know are recorded as NOT_FOUND and never installed.
        summary: If given, every record is added to it as soon as it exists,
            so the summary reflects partial progress after an abort.

    Returns:
        PackageRecord for each processed package.

    Raises:
        CommandError: On the first failure under the abort policy.
    """
    records: list[PackageRecord] = []

    for name in queue:
        error: CommandError | None = None
        try:
            record = _process_package(name, operator, verify)
        except CommandError as e:
            record = PackageRecord(
                name=name,
                source=operator.source,
                outcome=InstallOutcome.FAILED,
                detail=str(e),
            )
            error = e

        records.append(record)
        if summary is not None:
            summary.add(record)

        if not record.failed:
            continue

        if policy is FailurePolicy.ABORT:
            if error is not None:
                raise error
            msg = f"Failed to install {name} ({operator.source.label}): {record.detail}"
            raise CommandError(msg, command=[operator.command], returncode=record.returncode)

        logger.error("[FAILED] %s: %s", name, record.detail)

    return records


def run_provisioning(
    packages_path: Path,
    config: SetupConfig,
    *,
    official: PacmanOperator,
    community: Operator,
    summary: RunSummary,
) -> RunSummary:
    """Provision the system from a package list.

    The package list is loaded before any command runs, so a missing or
    unreadable list aborts without touching the system.

    Args:
        packages_path: Path to the package list.
        config: Run settings.
        official: Operator for the official repositories.
        community: Operator for the AUR.
        summary: Summary filled in as the run progresses.

    Returns:
        The finalized summary.

    Raises:
        ConfigurationError: If the package list cannot be loaded.
        BootstrapError: If the AUR helper cannot be built.
        CommandError: On the first failure under the abort policy, or
            when an upgrade, a prerequisite or a system unit fails.
    """
    packages = load_package_list(packages_path)

    official.require_available()
    classified = classify(packages, official)
    summary.set_classification(classified)
    logger.info("Official packages: %d", len(classified.official))
    logger.info("AUR packages: %d", len(classified.community))

    if config.update_system:
        official.upgrade_system()

    ensure_helper_tool(config.helper, official, timeout=config.timeouts.bootstrap_limit)

    if classified.official:
        logger.info("Installing official packages...")
        install_queue(
            classified.official,
            official,
            policy=config.on_error,
            summary=summary,
        )

    if classified.community:
        if config.community_prerequisites:
            logger.info("Installing AUR build prerequisites...")
            install_queue(config.community_prerequisites, official)

        logger.info("Installing AUR packages...")
        install_queue(
            classified.community,
            community,
            policy=config.on_error,
            verify=config.verify_community,
            summary=summary,
        )

    if config.services or config.user_services:
        logger.info("Enabling services...")
        summary.services.extend(
            enable_services(config.services, timeout=config.timeouts.query_limit)
        )
        summary.services.extend(
            enable_services(config.user_services, user=True, timeout=config.timeouts.query_limit)
        )

    summary.finalize()
    logger.info("Installation complete")
    return summary
