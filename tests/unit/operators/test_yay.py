"""Unit tests for YayOperator.

Tests for the AUR helper operator implementation.
"""

from pathlib import Path
from unittest.mock import patch

import pytest

from archsetup.core.errors import CommandError
from archsetup.models.package import PackageSource
from archsetup.operators.yay import YayOperator
from archsetup.utils.shell import CommandResult


class TestYayOperator:
    """Tests for YayOperator class."""

    @pytest.fixture
    def operator(self) -> YayOperator:
        """Create YayOperator instance without cache purging."""
        return YayOperator()

    def test_source_is_community(self, operator: YayOperator) -> None:
        """Operator returns COMMUNITY as source."""
        assert operator.source == PackageSource.COMMUNITY
        assert operator.command == "yay"
        assert operator.cache_dir is None

    def test_custom_helper_name(self) -> None:
        """The helper executable is configurable."""
        operator = YayOperator(helper="paru")

        with patch("archsetup.operators.yay.command_exists", return_value=True) as mock_exists:
            assert operator.is_available() is True

        mock_exists.assert_called_once_with("paru")

    def test_exists_queries_aur(self, operator: YayOperator) -> None:
        """exists() runs yay -Si."""
        with (
            patch("archsetup.operators.yay.command_exists", return_value=True),
            patch("archsetup.operators.yay.run_command") as mock_run,
        ):
            mock_run.return_value = CommandResult(stdout="", stderr="", returncode=0)

            assert operator.exists("google-chrome") is True

        mock_run.assert_called_once_with(["yay", "-Si", "google-chrome"], timeout=60.0)

    def test_is_installed(self, operator: YayOperator) -> None:
        """is_installed() runs yay -Qi."""
        with (
            patch("archsetup.operators.yay.command_exists", return_value=True),
            patch("archsetup.operators.yay.run_command") as mock_run,
        ):
            mock_run.return_value = CommandResult(stdout="", stderr="", returncode=1)

            assert operator.is_installed("google-chrome") is False

        assert mock_run.call_args[0][0] == ["yay", "-Qi", "google-chrome"]

    def test_queries_require_helper(self, operator: YayOperator) -> None:
        """Queries raise CommandError when the helper is missing."""
        with (
            patch("archsetup.operators.yay.command_exists", return_value=False),
            pytest.raises(CommandError, match="yay is not available"),
        ):
            operator.exists("google-chrome")

    def test_install_runs_without_sudo(self, operator: YayOperator) -> None:
        """install() runs the helper as the calling user."""
        with (
            patch("archsetup.operators.yay.command_exists", return_value=True),
            patch("archsetup.operators.yay.run_interactive", return_value=0) as mock_run,
        ):
            result = operator.install("google-chrome")

        assert result.success is True
        args = mock_run.call_args[0][0]
        assert args[0] == "yay"
        assert "sudo" not in args
        assert args[-1] == "google-chrome"
        for flag in ("--needed", "--noconfirm", "--devel", "--removemake"):
            assert flag in args

    def test_install_failure(self, operator: YayOperator) -> None:
        """install() reports a failed build in the result."""
        with (
            patch("archsetup.operators.yay.command_exists", return_value=True),
            patch("archsetup.operators.yay.run_interactive", return_value=1),
        ):
            result = operator.install("google-chrome")

        assert result.success is False
        assert result.error == "yay exited with status 1"


class TestBuildCache:
    """Tests for build cache purging."""

    def test_install_purges_package_cache(self, tmp_path: Path) -> None:
        """install() removes stale cached sources before building."""
        stale = tmp_path / "google-chrome"
        (stale / "src").mkdir(parents=True)
        other = tmp_path / "visual-studio-code-bin"
        other.mkdir()
        operator = YayOperator(cache_dir=tmp_path)

        with (
            patch("archsetup.operators.yay.command_exists", return_value=True),
            patch("archsetup.operators.yay.run_interactive", return_value=0),
        ):
            operator.install("google-chrome")

        assert not stale.exists()
        assert other.exists()

    def test_install_parent_name_keeps_cache_siblings(self, tmp_path: Path) -> None:
        """install("..") does not purge the directory holding the cache."""
        cache = tmp_path / "cache" / "yay"
        cache.mkdir(parents=True)
        sibling = tmp_path / "cache" / "other-app"
        sibling.mkdir()
        operator = YayOperator(cache_dir=cache)

        with (
            patch("archsetup.operators.yay.command_exists", return_value=True),
            patch("archsetup.operators.yay.run_interactive", return_value=1),
        ):
            result = operator.install("..")

        assert result.failed
        assert sibling.exists()

    def test_purge_without_cache_entry(self, tmp_path: Path) -> None:
        """purge_build_cache() is a no-op when nothing is cached."""
        operator = YayOperator(cache_dir=tmp_path)

        assert operator.purge_build_cache("google-chrome") is False

    def test_purge_refuses_paths_outside_cache(self, tmp_path: Path) -> None:
        """Names that would escape the cache directory are never removed."""
        cache = tmp_path / "cache"
        cache.mkdir()
        victim = tmp_path / "victim"
        victim.mkdir()
        operator = YayOperator(cache_dir=cache)

        assert operator.purge_build_cache("../victim") is False
        assert victim.exists()

    @pytest.mark.parametrize("name", [".", ".."])
    def test_purge_refuses_cache_and_its_parent(self, tmp_path: Path, name: str) -> None:
        """The cache directory itself and its parent are never removed."""
        cache = tmp_path / "cache" / "yay"
        cache.mkdir(parents=True)
        sibling = tmp_path / "cache" / "other-app"
        sibling.mkdir()
        operator = YayOperator(cache_dir=cache)

        assert operator.purge_build_cache(name) is False
        assert cache.exists()
        assert sibling.exists()

    def test_purge_refuses_symlink_out_of_cache(self, tmp_path: Path) -> None:
        """A cache entry linking elsewhere is not followed."""
        cache = tmp_path / "cache"
        cache.mkdir()
        victim = tmp_path / "victim"
        victim.mkdir()
        (cache / "google-chrome").symlink_to(victim, target_is_directory=True)
        operator = YayOperator(cache_dir=cache)

        assert operator.purge_build_cache("google-chrome") is False
        assert victim.exists()

    def test_purge_disabled(self) -> None:
        """Without a cache directory nothing is purged."""
        assert YayOperator().purge_build_cache("google-chrome") is False
