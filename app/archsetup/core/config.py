"""Settings model and settings file I/O.

Settings are stored in ~/.config/archsetup/config.toml. Every key is
optional; a missing file yields the defaults, which reproduce the
behavior of a plain ``pacman``/``yay`` provisioning script.
"""

import os
import tomllib
from enum import Enum
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from archsetup.core.errors import ConfigurationError
from archsetup.core.paths import get_config_path, get_helper_cache_dir, get_log_path
from archsetup.models.package import validate_package_name

DEFAULT_HELPER_REPO = "https://aur.archlinux.org/yay.git"


class FailurePolicy(str, Enum):
    """What to do when a single package fails to install.

    Attributes:
        ABORT: Stop the whole run at the first failure.
        CONTINUE: Record the failure and move on to the next package.
    """

    ABORT = "abort"
    CONTINUE = "continue"


def _validate_package_names(names: list[str]) -> list[str]:
    for name in names:
        validate_package_name(name)
    return names


class HelperConfig(BaseModel):
    """AUR helper settings.

    Attributes:
        name: Helper executable name, also the AUR package that provides it.
        repo_url: Git URL of the helper's AUR build recipe.
        build_dependencies: Official packages required to build the helper.
        cache_dir: Helper build cache. None uses ~/.cache/<name>.
    """

    model_config = ConfigDict(extra="forbid")

    name: Annotated[str, Field(min_length=1, description="Helper executable")] = "yay"
    repo_url: Annotated[str, Field(min_length=1)] = DEFAULT_HELPER_REPO
    build_dependencies: list[str] = Field(default_factory=lambda: ["git", "base-devel"])
    cache_dir: str | None = None

    @field_validator("build_dependencies")
    @classmethod
    def validate_build_dependencies(cls, v: list[str]) -> list[str]:
        """Reject names pacman would not accept as targets."""
        return _validate_package_names(v)

    @property
    def effective_cache_dir(self) -> Path:
        """Return the configured cache directory or the helper default."""
        if self.cache_dir:
            return Path(self.cache_dir).expanduser()
        return get_helper_cache_dir(self.name)


class TimeoutConfig(BaseModel):
    """Per-category subprocess timeouts in seconds. Zero disables a limit."""

    model_config = ConfigDict(extra="forbid")

    query: Annotated[float, Field(ge=0)] = 60.0
    install: Annotated[float, Field(ge=0)] = 3600.0
    bootstrap: Annotated[float, Field(ge=0)] = 1800.0

    @property
    def query_limit(self) -> float | None:
        """Return the query timeout, or None when disabled."""
        return self.query or None

    @property
    def install_limit(self) -> float | None:
        """Return the install timeout, or None when disabled."""
        return self.install or None

    @property
    def bootstrap_limit(self) -> float | None:
        """Return the bootstrap timeout, or None when disabled."""
        return self.bootstrap or None


class SetupConfig(BaseModel):
    """Settings for a provisioning run.

    Attributes:
        package_file: Default package list path, relative to the working directory.
        on_error: Failure policy for individual package installs.
        update_system: Run a full system upgrade before installing.
        verify_community: Check the AUR index before installing community packages.
        purge_build_cache: Remove a package's helper cache before building it.
        community_prerequisites: Official packages installed before AUR builds.
        services: systemd system units to enable after installation.
        user_services: systemd user units to enable after installation.
        log_file: Run log path. None uses ~/.local/state/archsetup/install.log.
        helper: AUR helper settings.
        timeouts: Subprocess timeouts.
    """

    model_config = ConfigDict(extra="forbid")

    package_file: str = "packages.txt"
    on_error: FailurePolicy = FailurePolicy.ABORT
    update_system: bool = True
    verify_community: bool = True
    purge_build_cache: bool = True
    community_prerequisites: list[str] = Field(default_factory=lambda: ["nodejs", "npm"])
    services: list[str] = Field(default_factory=lambda: [])
    user_services: list[str] = Field(default_factory=lambda: [])
    log_file: str | None = None
    helper: HelperConfig = Field(default_factory=HelperConfig)
    timeouts: TimeoutConfig = Field(default_factory=TimeoutConfig)

    @field_validator("community_prerequisites")
    @classmethod
    def validate_prerequisites(cls, v: list[str]) -> list[str]:
        """Reject names pacman would not accept as targets."""
        return _validate_package_names(v)

    @property
    def effective_log_path(self) -> Path:
        """Return the configured log path or the default state log."""
        if self.log_file:
            return Path(self.log_file).expanduser()
        return get_log_path()


def load_config(path: Path | None = None) -> SetupConfig:
    """Load settings from a TOML file.

    A missing file is not an error: the defaults are returned.

    Args:
        path: Path to the settings file. If None, uses the default config path.

    Returns:
        Validated SetupConfig object.

    Raises:
        ConfigurationError: If the file cannot be read, parsed or validated.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        return SetupConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Failed to read settings file {config_path}: {e}") from e

    try:
        return SetupConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid settings in {config_path}: {e}") from e


def save_config(config: SetupConfig, path: Path | None = None) -> Path:
    """Save settings to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The SetupConfig object to save.
        path: Path to save the settings. If None, uses the default config path.

    Returns:
        Path where the settings were saved.

    Raises:
        ConfigurationError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    data = config_to_dict(config)

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigurationError(f"Failed to write settings file: {e}") from e

    return config_path


def config_to_dict(config: SetupConfig) -> dict[str, object]:
    """Convert SetupConfig to a dictionary for TOML serialization.

    TOML has no null value, so unset optional keys are omitted.

    Args:
        config: The SetupConfig to convert.

    Returns:
        Dictionary ready for TOML serialization.
    """
    return config.model_dump(mode="json", exclude_none=True)
