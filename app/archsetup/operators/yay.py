"""yay package operator implementation.

Queries and builds packages from the Arch User Repository through the
yay AUR helper.
"""

import logging
import shutil
from pathlib import Path

from archsetup.core.errors import CommandError
from archsetup.models.package import InstallResult, PackageSource
from archsetup.operators.base import Operator
from archsetup.utils.shell import command_exists, run_command, run_interactive

logger = logging.getLogger(__name__)


class YayOperator(Operator):
    """Operator for AUR packages.

    yay refuses to run as root and elevates with sudo by itself when it
    installs built packages, so commands are issued without sudo.

    Attributes:
        helper: Helper executable name.
        cache_dir: Helper build cache directory, or None to never purge.
    """

    # Install flags: skip up-to-date, never prompt, prefer -git packages,
    # drop make dependencies after the build, skip PKGBUILD edit prompts
    INSTALL_FLAGS: tuple[str, ...] = (
        "--needed",
        "--noconfirm",
        "--devel",
        "--removemake",
        "--noedit",
    )

    def __init__(
        self,
        helper: str = "yay",
        cache_dir: Path | None = None,
        query_timeout: float | None = 60.0,
        install_timeout: float | None = 3600.0,
    ) -> None:
        """Initialize the operator.

        Args:
            helper: Helper executable name.
            cache_dir: Build cache to purge per package before building.
                None disables purging.
            query_timeout: Timeout for queries. None disables it.
            install_timeout: Timeout for builds. None disables it.
        """
        super().__init__(query_timeout=query_timeout, install_timeout=install_timeout)
        self._helper = helper
        self._cache_dir = cache_dir

    @property
    def source(self) -> PackageSource:
        """Return COMMUNITY as the package source."""
        return PackageSource.COMMUNITY

    @property
    def command(self) -> str:
        """Return the helper executable name."""
        return self._helper

    @property
    def cache_dir(self) -> Path | None:
        """Return the build cache directory purged before each build."""
        return self._cache_dir

    def is_available(self) -> bool:
        """Check if the helper is available."""
        return command_exists(self._helper)

    def exists(self, package: str) -> bool:
        """Check the repositories and the AUR with ``yay -Si``."""
        self.require_available()
        result = run_command([self._helper, "-Si", package], timeout=self.query_timeout)
        return result.success

    def is_installed(self, package: str) -> bool:
        """Check the local database with ``yay -Qi``."""
        self.require_available()
        result = run_command([self._helper, "-Qi", package], timeout=self.query_timeout)
        return result.success

    def install(self, package: str) -> InstallResult:
        """Build and install an AUR package.

        The package's build cache is purged first so a stale clone or
        half-finished build from an earlier run is never reused.

        Args:
            package: Package name to install.

        Returns:
            InstallResult for the package.

        Raises:
            CommandError: If the helper is not available or cannot be executed.
        """
        self.require_available()

        if self._cache_dir is not None:
            self.purge_build_cache(package)

        args = [self._helper, "-S", *self.INSTALL_FLAGS, package]
        logger.debug("Executing: %s", " ".join(args))
        returncode = run_interactive(args, timeout=self.install_timeout)

        if returncode == 0:
            return InstallResult(package=package, source=self.source, success=True)
        return InstallResult(
            package=package,
            source=self.source,
            success=False,
            returncode=returncode,
            error=f"{self._helper} exited with status {returncode}",
        )

    def purge_build_cache(self, package: str) -> bool:
        """Remove the helper's cached sources for a package.

        Args:
            package: Package whose cache directory should be removed.

        Returns:
            True if a cache directory was removed, False if none existed.

        Raises:
            CommandError: If the directory exists but cannot be removed.
        """
        if self._cache_dir is None:
            return False

        cache_dir = self._cache_dir.resolve()
        target = (cache_dir / package).resolve()
        # Only a real directory directly inside the cache is removed
        if target.parent != cache_dir or not target.is_dir():
            return False

        logger.debug("Removing build cache %s", target)
        try:
            shutil.rmtree(target)
        except OSError as e:
            msg = f"Cannot remove build cache {target}: {e}"
            raise CommandError(msg) from e
        return True
