"""Unit tests for privilege checks."""

from unittest.mock import patch

import pytest

from archsetup.core.errors import PrivilegeError
from archsetup.core.privileges import check_privileges, is_root


class TestPrivileges:
    """Tests for is_root and check_privileges."""

    def test_is_root(self) -> None:
        """is_root compares the effective UID with 0."""
        with patch("archsetup.core.privileges.os.geteuid", return_value=0):
            assert is_root() is True
        with patch("archsetup.core.privileges.os.geteuid", return_value=1000):
            assert is_root() is False

    def test_root_is_rejected(self) -> None:
        """Running as root raises PrivilegeError."""
        with (
            patch("archsetup.core.privileges.os.geteuid", return_value=0),
            pytest.raises(PrivilegeError, match="Do not run archsetup as root"),
        ):
            check_privileges()

    def test_regular_user_passes(self) -> None:
        """A regular user passes the check."""
        with patch("archsetup.core.privileges.os.geteuid", return_value=1000):
            check_privileges()
