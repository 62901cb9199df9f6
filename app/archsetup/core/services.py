"""systemd unit enablement.

Enables the units a provisioned desktop needs (display manager, docker,
PipeWire user units) unless they are already enabled.
"""

import logging
from collections.abc import Iterable

from archsetup.core.errors import CommandError
from archsetup.models.service import ServiceOutcome, ServiceResult, ServiceScope
from archsetup.utils.shell import run_command, run_interactive

logger = logging.getLogger(__name__)


def _systemctl(scope: ServiceScope) -> list[str]:
    if scope is ServiceScope.USER:
        return ["systemctl", "--user"]
    return ["systemctl"]


def is_enabled(
    unit: str,
    scope: ServiceScope = ServiceScope.SYSTEM,
    *,
    timeout: float | None = 60.0,
) -> bool:
    """Check if a unit is enabled with ``systemctl is-enabled``."""
    result = run_command([*_systemctl(scope), "is-enabled", unit], timeout=timeout)
    return result.success


def enable_service(
    unit: str,
    scope: ServiceScope = ServiceScope.SYSTEM,
    *,
    timeout: float | None = 60.0,
) -> ServiceResult:
    """Enable a single unit unless it is already enabled.

    System units are enabled through sudo; user units run against the
    calling user's manager.

    Args:
        unit: Unit name.
        scope: System or user manager.
        timeout: Timeout in seconds for each systemctl call.

    Returns:
        ServiceResult for the unit. A failed enable is reported, not raised.

    Raises:
        CommandError: If systemctl cannot be executed or times out.
    """
    if is_enabled(unit, scope, timeout=timeout):
        logger.info("[SKIP] %s already enabled", unit)
        return ServiceResult(unit=unit, scope=scope, outcome=ServiceOutcome.ALREADY_ENABLED)

    args = [*_systemctl(scope), "enable", unit]
    if scope is ServiceScope.SYSTEM:
        args.insert(0, "sudo")

    logger.info("[ENABLE] %s", unit)
    returncode = run_interactive(args, timeout=timeout)
    if returncode != 0:
        return ServiceResult(
            unit=unit,
            scope=scope,
            outcome=ServiceOutcome.FAILED,
            error=f"systemctl exited with status {returncode}",
        )
    return ServiceResult(unit=unit, scope=scope, outcome=ServiceOutcome.ENABLED)


def enable_services(
    units: Iterable[str],
    *,
    user: bool = False,
    timeout: float | None = 60.0,
) -> list[ServiceResult]:
    """Enable a list of units in order.

    A system unit that fails to enable aborts with CommandError. User
    units often fail outside a graphical session (no user bus), so their
    failures are logged as warnings and recorded instead.

    Args:
        units: Unit names.
        user: If True, target the user manager instead of the system one.
        timeout: Timeout in seconds for each systemctl call.

    Returns:
        ServiceResult for each processed unit.

    Raises:
        CommandError: If a system unit cannot be enabled.
    """
    scope = ServiceScope.USER if user else ServiceScope.SYSTEM
    results: list[ServiceResult] = []

    for unit in units:
        try:
            result = enable_service(unit, scope, timeout=timeout)
        except CommandError as e:
            if scope is ServiceScope.SYSTEM:
                raise
            result = ServiceResult(
                unit=unit, scope=scope, outcome=ServiceOutcome.FAILED, error=str(e)
            )

        results.append(result)
        if not result.failed:
            continue

        if scope is ServiceScope.SYSTEM:
            msg = f"Failed to enable {unit}: {result.error}"
            raise CommandError(msg, command=["systemctl", "enable", unit])
        logger.warning("%s may need to be enabled manually: %s", unit, result.error)

    return results
