"""pacman package operator implementation.

Queries and installs packages from the official Arch repositories.
"""

import logging

from archsetup.core.errors import CommandError
from archsetup.models.package import InstallResult, PackageSource
from archsetup.operators.base import Operator
from archsetup.utils.shell import command_exists, run_command, run_interactive

logger = logging.getLogger(__name__)


class PacmanOperator(Operator):
    """Operator for the official repositories.

    Lookups run unprivileged; installs and upgrades go through sudo so
    the tool itself can run as an ordinary user.
    """

    # Install flags: skip up-to-date packages, never prompt
    INSTALL_FLAGS: tuple[str, ...] = ("--needed", "--noconfirm")

    @property
    def source(self) -> PackageSource:
        """Return OFFICIAL as the package source."""
        return PackageSource.OFFICIAL

    @property
    def command(self) -> str:
        """Return the pacman executable name."""
        return "pacman"

    def is_available(self) -> bool:
        """Check if pacman is available."""
        return command_exists("pacman")

    def exists(self, package: str) -> bool:
        """Check the sync databases with ``pacman -Si``."""
        result = run_command(["pacman", "-Si", package], timeout=self.query_timeout)
        return result.success

    def is_installed(self, package: str) -> bool:
        """Check the local database with ``pacman -Qi``."""
        result = run_command(["pacman", "-Qi", package], timeout=self.query_timeout)
        return result.success

    def install(self, package: str) -> InstallResult:
        """Install a package with ``sudo pacman -S --needed --noconfirm``.

        Args:
            package: Package name to install.

        Returns:
            InstallResult for the package.

        Raises:
            CommandError: If pacman is not available or cannot be executed.
        """
        self.require_available()

        args = ["sudo", "pacman", "-S", *self.INSTALL_FLAGS, package]
        logger.debug("Executing: %s", " ".join(args))
        returncode = run_interactive(args, timeout=self.install_timeout)

        if returncode == 0:
            return InstallResult(package=package, source=self.source, success=True)
        return InstallResult(
            package=package,
            source=self.source,
            success=False,
            returncode=returncode,
            error=f"pacman exited with status {returncode}",
        )

    def upgrade_system(self) -> None:
        """Synchronize databases and upgrade all packages.

        Raises:
            CommandError: If the upgrade fails.
        """
        self.require_available()

        args = ["sudo", "pacman", "-Syu", "--noconfirm"]
        logger.info("Updating system...")
        returncode = run_interactive(args, timeout=self.install_timeout)
        if returncode != 0:
            msg = f"System upgrade failed: pacman exited with status {returncode}"
            raise CommandError(msg, command=args, returncode=returncode)
