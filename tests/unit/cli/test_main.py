"""Unit tests for the main CLI application."""

from pathlib import Path
from unittest.mock import patch

from typer.testing import CliRunner

from archsetup import __version__
from archsetup.cli.main import app
from archsetup.utils.shell import CommandResult

runner = CliRunner()


class TestMainApp:
    """Tests for global options and command registration."""

    def test_version(self) -> None:
        """--version prints the version and exits."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"archsetup version {__version__}" in result.stdout

    def test_help_lists_commands(self) -> None:
        """--help lists every command."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        for command in ("install", "classify", "bootstrap", "services", "config"):
            assert command in result.stdout


class TestBootstrapCommand:
    """Tests for archsetup bootstrap command."""

    def test_bootstrap_present_helper(self, xdg_home: Path) -> None:
        """bootstrap does nothing when the helper is on PATH."""
        with (
            patch("archsetup.core.privileges.is_root", return_value=False),
            patch("archsetup.core.bootstrap.command_exists", return_value=True),
        ):
            result = runner.invoke(app, ["bootstrap"])

        assert result.exit_code == 0, result.output
        assert "already installed" in result.stdout

    def test_bootstrap_clone_failure(self, xdg_home: Path) -> None:
        """A failed clone exits with 1."""
        failed = CommandResult(stdout="", stderr="fatal: repository not found", returncode=128)
        with (
            patch("archsetup.core.privileges.is_root", return_value=False),
            patch("archsetup.core.bootstrap.command_exists", return_value=False),
            patch("archsetup.core.bootstrap.run_command", return_value=failed),
            patch("archsetup.operators.pacman.run_command", return_value=CommandResult("", "", 0)),
        ):
            result = runner.invoke(app, ["bootstrap"])

        assert result.exit_code == 1
        assert "Failed to clone" in result.output


class TestServicesCommand:
    """Tests for archsetup services command."""

    def test_no_services_configured(self, xdg_home: Path) -> None:
        """Without configured units there is nothing to do."""
        with patch("archsetup.core.privileges.is_root", return_value=False):
            result = runner.invoke(app, ["services"])

        assert result.exit_code == 0
        assert "Nothing to do" in result.stdout

    def test_enable_given_units(self, xdg_home: Path) -> None:
        """Units given on the command line are enabled."""
        disabled = CommandResult(stdout="disabled", stderr="", returncode=1)
        with (
            patch("archsetup.core.privileges.is_root", return_value=False),
            patch("archsetup.core.services.run_command", return_value=disabled),
            patch("archsetup.core.services.run_interactive", return_value=0) as mock_enable,
        ):
            result = runner.invoke(app, ["services", "sddm"])

        assert result.exit_code == 0, result.output
        assert mock_enable.call_args[0][0] == ["sudo", "systemctl", "enable", "sddm"]
        assert "Services configured" in result.stdout
