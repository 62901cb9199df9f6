"""Privilege level checks.

archsetup runs as an ordinary user and elevates individual pacman and
systemctl invocations through sudo. makepkg and AUR helpers refuse to
build as root, so a root run is rejected before any action is taken.
"""

import os

from archsetup.core.errors import PrivilegeError


def is_root() -> bool:
    """Check if the current process runs with effective UID 0."""
    return os.geteuid() == 0


def check_privileges() -> None:
    """Reject execution as the privileged user.

    Raises:
        PrivilegeError: If running as root.
    """
    if is_root():
        msg = "Do not run archsetup as root. Only pacman and systemctl commands use sudo internally."
        raise PrivilegeError(msg)
