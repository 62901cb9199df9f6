"""Exception hierarchy for archsetup.

Core modules raise these exceptions and never recover from them locally.
The CLI layer catches :class:`ArchSetupError`, reports the message and
terminates with a non-zero exit status.
"""


class ArchSetupError(Exception):
    """Base exception for all archsetup errors."""


class ConfigurationError(ArchSetupError):
    """Raised when a required input file or the settings file is unusable."""


class PrivilegeError(ArchSetupError):
    """Raised when archsetup is invoked with a disallowed privilege level."""


class BootstrapError(ArchSetupError):
    """Raised when the AUR helper cannot be cloned or built."""


class CommandError(ArchSetupError):
    """Raised when an external command fails or cannot be executed.

    Attributes:
        command: The argument vector that was executed.
        returncode: Exit status of the command, or None if it never ran
            to completion.
    """

    def __init__(
        self,
        message: str,
        *,
        command: list[str] | None = None,
        returncode: int | None = None,
    ) -> None:
        super().__init__(message)
        self.command = list(command or [])
        self.returncode = returncode


class CommandTimeoutError(CommandError):
    """Raised when an external command exceeds its timeout."""

    def __init__(
        self,
        message: str,
        *,
        command: list[str] | None = None,
        timeout: float | None = None,
    ) -> None:
        super().__init__(message, command=command, returncode=None)
        self.timeout = timeout
