"""Shell execution utilities.

Provides subprocess execution with explicit timeouts and uniform
error translation into archsetup exceptions.
"""

import os
import shutil
import subprocess
from dataclasses import dataclass

from archsetup.core.errors import CommandError, CommandTimeoutError


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Result of a shell command execution.

    Attributes:
        stdout: Standard output from the command.
        stderr: Standard error from the command.
        returncode: Exit code of the command.
    """

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        """Check if command executed successfully."""
        return self.returncode == 0


def _format_command(args: list[str]) -> str:
    return " ".join(args)


def run_command(
    args: list[str],
    *,
    timeout: float | None = 60.0,
    cwd: str | None = None,
) -> CommandResult:
    """Execute a command with captured output and return the result.

    A non-zero exit status is not an error here; callers inspect
    :attr:`CommandResult.success` because several queries (``pacman -Si``,
    ``systemctl is-enabled``) answer "no" through their exit status.

    Args:
        args: Command and arguments to execute.
        timeout: Maximum time in seconds to wait for command. None disables it.
        cwd: Working directory for the command. If None, uses current directory.

    Returns:
        CommandResult with stdout, stderr, and returncode.

    Raises:
        CommandTimeoutError: If command exceeds timeout.
        CommandError: If the command executable cannot be run.
    """
    try:
        result = subprocess.run(
            args,
            capture_output=True,
            text=True,
            check=False,
            timeout=timeout,
            cwd=cwd,
        )
    except subprocess.TimeoutExpired as e:
        msg = f"Command timed out after {timeout}s: {_format_command(args)}"
        raise CommandTimeoutError(msg, command=args, timeout=timeout) from e
    except OSError as e:
        msg = f"Cannot execute {args[0]}: {e}"
        raise CommandError(msg, command=args) from e

    return CommandResult(
        stdout=result.stdout,
        stderr=result.stderr,
        returncode=result.returncode,
    )


def run_interactive(
    args: list[str],
    *,
    timeout: float | None = None,
    cwd: str | None = None,
    env: dict[str, str] | None = None,
) -> int:
    """Execute a command interactively, inheriting the terminal.

    Unlike run_command(), this does NOT capture stdout/stderr, so package
    manager progress output and sudo password prompts reach the user's
    terminal directly.

    Args:
        args: Command and arguments to execute.
        timeout: Maximum time in seconds to wait for command. None disables it.
        cwd: Working directory for the command.
        env: Additional environment variables (merged with current env).

    Returns:
        Exit code of the command.

    Raises:
        CommandTimeoutError: If command exceeds timeout.
        CommandError: If the command executable cannot be run.
    """
    full_env = {**os.environ, **(env or {})}
    try:
        result = subprocess.run(
            args,
            check=False,
            timeout=timeout,
            cwd=cwd,
            env=full_env,
        )
    except subprocess.TimeoutExpired as e:
        msg = f"Command timed out after {timeout}s: {_format_command(args)}"
        raise CommandTimeoutError(msg, command=args, timeout=timeout) from e
    except OSError as e:
        msg = f"Cannot execute {args[0]}: {e}"
        raise CommandError(msg, command=args) from e
    return result.returncode


def command_exists(name: str) -> bool:
    """Check if a command exists in the system PATH.

    Args:
        name: Command name to check.

    Returns:
        True if command exists, False otherwise.
    """
    return shutil.which(name) is not None
