"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules. The fake
operators keep the package index and the local database in memory and
record every install command they would have issued.
"""

from collections.abc import Callable, Iterable
from pathlib import Path

import pytest

from archsetup.models.package import InstallResult, PackageSource
from archsetup.operators.base import Operator
from archsetup.operators.pacman import PacmanOperator


class _FakeMixin:
    """In-memory index, database and install log shared by the fakes."""

    def _setup(
        self,
        index: Iterable[str],
        installed: Iterable[str],
        failing: dict[str, int] | None,
        log: list[str] | None,
    ) -> None:
        self.index = set(index)
        self.installed = set(installed)
        self.failing = dict(failing or {})
        self.calls: list[str] = []
        self.queries: list[str] = []
        self.log = log if log is not None else []

    def exists(self, package: str) -> bool:
        self.queries.append(package)
        return package in self.index

    def is_installed(self, package: str) -> bool:
        return package in self.installed

    def install(self, package: str) -> InstallResult:
        self.calls.append(package)
        self.log.append(f"{self.command}:{package}")
        if package in self.failing:
            code = self.failing[package]
            return InstallResult(
                package=package,
                source=self.source,
                success=False,
                returncode=code,
                error=f"{self.command} exited with status {code}",
            )
        self.installed.add(package)
        return InstallResult(package=package, source=self.source, success=True)

    def is_available(self) -> bool:
        return True


class FakePacman(_FakeMixin, PacmanOperator):
    """PacmanOperator that never runs a command."""

    def __init__(
        self,
        index: Iterable[str] = (),
        installed: Iterable[str] = (),
        failing: dict[str, int] | None = None,
        log: list[str] | None = None,
    ) -> None:
        super().__init__()
        self._setup(index, installed, failing, log)
        self.upgrades = 0

    def upgrade_system(self) -> None:
        self.upgrades += 1
        self.log.append("pacman:-Syu")


class FakeYay(_FakeMixin, Operator):
    """AUR operator that never runs a command."""

    def __init__(
        self,
        index: Iterable[str] = (),
        installed: Iterable[str] = (),
        failing: dict[str, int] | None = None,
        log: list[str] | None = None,
    ) -> None:
        super().__init__()
        self._setup(index, installed, failing, log)

    @property
    def source(self) -> PackageSource:
        return PackageSource.COMMUNITY

    @property
    def command(self) -> str:
        return "yay"


@pytest.fixture
def make_pacman() -> Callable[..., FakePacman]:
    """Factory for in-memory official operators."""
    return FakePacman


@pytest.fixture
def make_yay() -> Callable[..., FakeYay]:
    """Factory for in-memory AUR operators."""
    return FakeYay


@pytest.fixture
def package_list_text() -> str:
    """Sample package list with comments and blank lines."""
    return """# Base
vim
google-chrome

  # indented comment
  neovim
htop
"""


@pytest.fixture
def package_file(tmp_path: Path) -> Path:
    """Package list file with two official and one AUR package."""
    path = tmp_path / "packages.txt"
    path.write_text("# desktop\nvim\ngoogle-chrome\n\nhtop\n", encoding="utf-8")
    return path


@pytest.fixture
def xdg_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point every XDG base directory into the test's temporary directory."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path / "state"))
    monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path / "cache"))
    return tmp_path
