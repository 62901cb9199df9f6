"""Unit tests for the abstract Operator base class."""

import pytest

from archsetup.core.errors import CommandError
from archsetup.models.package import InstallResult, PackageSource
from archsetup.operators.base import Operator


class _StubOperator(Operator):
    def __init__(self, available: bool) -> None:
        super().__init__(query_timeout=None, install_timeout=None)
        self._available = available

    @property
    def source(self) -> PackageSource:
        return PackageSource.OFFICIAL

    @property
    def command(self) -> str:
        return "stub"

    def exists(self, package: str) -> bool:
        return True

    def is_installed(self, package: str) -> bool:
        return False

    def install(self, package: str) -> InstallResult:
        return InstallResult(package=package, source=self.source, success=True)

    def is_available(self) -> bool:
        return self._available


class TestOperator:
    """Tests for Operator base class."""

    def test_cannot_instantiate_abstract(self) -> None:
        """Operator itself cannot be instantiated."""
        with pytest.raises(TypeError):
            Operator()  # type: ignore[abstract]

    def test_timeouts_passed_through(self) -> None:
        """Timeouts given to the constructor are exposed unchanged."""
        operator = _StubOperator(available=True)
        assert operator.query_timeout is None
        assert operator.install_timeout is None

    def test_require_available_passes(self) -> None:
        """require_available() returns when the executable exists."""
        _StubOperator(available=True).require_available()

    def test_require_available_raises(self) -> None:
        """require_available() raises CommandError naming the executable."""
        with pytest.raises(CommandError, match="stub is not available") as exc_info:
            _StubOperator(available=False).require_available()

        assert exc_info.value.command == ["stub"]
