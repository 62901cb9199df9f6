"""XDG-compliant path management for archsetup.

This module provides standardized paths following the XDG Base Directory
Specification for configuration and state storage, plus the location of
the AUR helper's build cache.

XDG defaults:
- Config: ~/.config/archsetup/
- State: ~/.local/state/archsetup/
- Cache: ~/.cache/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "archsetup"


def _get_xdg_base(env_var: str, default_subdir: str) -> Path:
    """Get an XDG base directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CACHE_HOME").
        default_subdir: Default subdirectory under home (e.g., ".cache").

    Returns:
        Path to the XDG base directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base)
    return Path.home() / default_subdir


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get the application-specific XDG directory."""
    return _get_xdg_base(env_var, default_subdir) / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/archsetup/ (or XDG_CONFIG_HOME/archsetup/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_state_dir() -> Path:
    """Get the state directory path.

    State data includes the run log, which is recreated on every run.

    Returns:
        Path to ~/.local/state/archsetup/ (or XDG_STATE_HOME/archsetup/).
    """
    return _get_xdg_dir("XDG_STATE_HOME", ".local/state")


def get_config_path() -> Path:
    """Get the default settings file path.

    Returns:
        Path to ~/.config/archsetup/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_log_path() -> Path:
    """Get the default run log path.

    Returns:
        Path to ~/.local/state/archsetup/install.log.
    """
    return get_state_dir() / "install.log"


def get_helper_cache_dir(helper: str) -> Path:
    """Get the build cache directory of an AUR helper.

    AUR helpers keep cloned PKGBUILDs and build artifacts per package
    under their own cache directory (``~/.cache/yay/<pkg>`` for yay).

    Args:
        helper: Helper executable name (e.g., "yay").

    Returns:
        Path to ~/.cache/<helper>/ (or XDG_CACHE_HOME/<helper>/).
    """
    return _get_xdg_base("XDG_CACHE_HOME", ".cache") / helper
