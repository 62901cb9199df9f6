"""Package models for classification and installation.

This module defines the core data structures describing where a package
comes from and what happened to it during a provisioning run.
"""

from dataclasses import dataclass, field
from enum import Enum


class PackageSource(Enum):
    """Package source a name is classified into.

    Attributes:
        OFFICIAL: The official Arch repositories, managed by pacman.
        COMMUNITY: The Arch User Repository, managed by an AUR helper.
    """

    OFFICIAL = "official"
    COMMUNITY = "community"

    @property
    def label(self) -> str:
        """Return a human-readable label for display."""
        return "AUR" if self is PackageSource.COMMUNITY else "Official"


# Names that resolve to a directory rather than an entry inside it
_RESERVED_NAMES = frozenset({".", ".."})


def validate_package_name(name: str) -> str:
    """Check that a string can be passed to pacman or the AUR helper as a target.

    Args:
        name: Candidate package name.

    Returns:
        The name unchanged.

    Raises:
        ValueError: If the name is empty, contains whitespace, starts with
            a dash, or is "." or "..".
    """
    if not name:
        msg = "package name cannot be empty"
        raise ValueError(msg)
    if any(c.isspace() for c in name):
        msg = f"package name {name!r} contains whitespace"
        raise ValueError(msg)
    if name.startswith("-"):
        msg = f"package name {name!r} looks like a command-line option"
        raise ValueError(msg)
    if name in _RESERVED_NAMES:
        msg = f"package name {name!r} is not a valid name"
        raise ValueError(msg)
    return name


class InstallOutcome(Enum):
    """Outcome of processing a single package.

    Attributes:
        ALREADY_INSTALLED: Package was present in the local database; no command issued.
        INSTALLED: The install command completed successfully.
        NOT_FOUND: Community package absent from the AUR index; skipped.
        FAILED: The install command failed.
    """

    ALREADY_INSTALLED = "already_installed"
    INSTALLED = "installed"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class ClassifiedPackages:
    """Package names split into per-source install queues.

    Both queues preserve the order of the original package list and keep
    duplicates.

    Attributes:
        official: Names found in the official repositories.
        community: Names not found in the official repositories.
    """

    official: tuple[str, ...] = field(default=())
    community: tuple[str, ...] = field(default=())

    @property
    def total(self) -> int:
        """Return the number of classified names."""
        return len(self.official) + len(self.community)

    def source_of(self, name: str) -> PackageSource | None:
        """Return the source a name was classified into, if any."""
        if name in self.official:
            return PackageSource.OFFICIAL
        if name in self.community:
            return PackageSource.COMMUNITY
        return None


@dataclass(frozen=True, slots=True)
class PackageRecord:
    """Per-package decision recorded for the run summary.

    Attributes:
        name: Package name.
        source: Source the package was installed from.
        outcome: What happened to the package.
        detail: Optional error or informational message.
        returncode: Exit status of a failed install command, if known.
    """

    name: str
    source: PackageSource
    outcome: InstallOutcome
    detail: str | None = None
    returncode: int | None = None

    def __post_init__(self) -> None:
        """Validate record data after initialization."""
        if not self.name:
            msg = "Package name cannot be empty"
            raise ValueError(msg)

    @property
    def failed(self) -> bool:
        """Check if the package failed to install."""
        return self.outcome == InstallOutcome.FAILED


@dataclass(frozen=True, slots=True)
class InstallResult:
    """Result of a single install command issued by an operator.

    Attributes:
        package: Name of the package.
        source: Source the install command targeted.
        success: Whether the command exited successfully.
        returncode: Exit status of the command.
        error: Optional error message if the command failed.
    """

    package: str
    source: PackageSource
    success: bool
    returncode: int = 0
    error: str | None = None

    @property
    def failed(self) -> bool:
        """Check if the install failed."""
        return not self.success
