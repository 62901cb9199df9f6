"""Abstract base class for package source operators.

This module defines the Operator interface that every package source
(official repositories, AUR) must implement. An operator exposes the
three capabilities the installer consumes: index lookup, local database
lookup, and installation of a single package.
"""

from abc import ABC, abstractmethod

from archsetup.core.errors import CommandError
from archsetup.models.package import InstallResult, PackageSource


class Operator(ABC):
    """Abstract base class for all package source operators.

    Attributes:
        query_timeout: Timeout in seconds for index/database queries.
        install_timeout: Timeout in seconds for install commands.

    Example:
        >>> operator = PacmanOperator()
        >>> if operator.is_available() and operator.exists("htop"):
        ...     if not operator.is_installed("htop"):
        ...         result = operator.install("htop")
        ...         print(f"{result.package}: {result.success}")
    """

    def __init__(
        self,
        query_timeout: float | None = 60.0,
        install_timeout: float | None = 3600.0,
    ) -> None:
        """Initialize the operator.

        Args:
            query_timeout: Timeout for queries. None disables it.
            install_timeout: Timeout for installs. None disables it.
        """
        self._query_timeout = query_timeout
        self._install_timeout = install_timeout

    @property
    def query_timeout(self) -> float | None:
        """Return the query timeout in seconds."""
        return self._query_timeout

    @property
    def install_timeout(self) -> float | None:
        """Return the install timeout in seconds."""
        return self._install_timeout

    @property
    @abstractmethod
    def source(self) -> PackageSource:
        """Return the package source this operator handles.

        Returns:
            PackageSource enum value (OFFICIAL or COMMUNITY).
        """

    @property
    @abstractmethod
    def command(self) -> str:
        """Return the executable this operator drives."""

    @abstractmethod
    def exists(self, package: str) -> bool:
        """Check if the source's package index contains a package.

        Args:
            package: Package name to look up.

        Returns:
            True if the index knows the package, False otherwise.

        Raises:
            CommandError: If the query cannot be executed.
        """

    @abstractmethod
    def is_installed(self, package: str) -> bool:
        """Check if a package is present in the local package database.

        Args:
            package: Package name to look up.

        Returns:
            True if the package is installed, False otherwise.

        Raises:
            CommandError: If the query cannot be executed.
        """

    @abstractmethod
    def install(self, package: str) -> InstallResult:
        """Install a single package non-interactively.

        A non-zero exit status of the install command is reported through
        the returned result, not raised.

        Args:
            package: Package name to install.

        Returns:
            InstallResult describing the outcome.

        Raises:
            CommandError: If the install command cannot be executed.
        """

    @abstractmethod
    def is_available(self) -> bool:
        """Check if this package manager is available on the system.

        Returns:
            True if the package manager can be used, False otherwise.
        """

    def require_available(self) -> None:
        """Ensure the package manager is available.

        Raises:
            CommandError: If the executable is not on PATH.
        """
        if not self.is_available():
            msg = f"{self.command} is not available on this system"
            raise CommandError(msg, command=[self.command])
