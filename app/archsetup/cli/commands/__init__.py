"""CLI commands for archsetup.

This package contains all subcommand implementations.
"""

from archsetup.cli.commands import bootstrap, classify, config, install, services

__all__ = ["bootstrap", "classify", "config", "install", "services"]
