"""AUR helper bootstrap.

The AUR helper is itself an AUR package, so it has to be built from its
PKGBUILD before it can install anything else. The build runs inside a
temporary directory that is removed whether the build succeeds or not;
commands receive absolute paths and an explicit working directory, the
process-wide current directory is never changed.
"""

import logging
import tempfile
from pathlib import Path

from archsetup.core.config import HelperConfig
from archsetup.core.errors import BootstrapError, CommandError
from archsetup.operators.base import Operator
from archsetup.utils.shell import command_exists, run_command, run_interactive

logger = logging.getLogger(__name__)

# Temporary build directories are recognisable in /tmp
TEMP_PREFIX = "archsetup-helper-"


def _install_build_dependencies(helper: HelperConfig, official: Operator) -> None:
    """Install the official packages needed to build the helper.

    Raises:
        BootstrapError: If a dependency cannot be installed.
    """
    for package in helper.build_dependencies:
        try:
            if official.is_installed(package):
                continue
            logger.info("[INSTALL] %s (helper build dependency)", package)
            result = official.install(package)
        except CommandError as e:
            msg = f"Cannot install {helper.name} build dependency {package}: {e}"
            raise BootstrapError(msg) from e
        if result.failed:
            msg = f"Cannot install {helper.name} build dependency {package}: {result.error}"
            raise BootstrapError(msg)


def clone_recipe(repo_url: str, dest: Path, *, timeout: float | None = None) -> None:
    """Clone a build recipe repository.

    Args:
        repo_url: Git URL of the recipe.
        dest: Absolute destination directory (must not exist).
        timeout: Timeout in seconds. None disables it.

    Raises:
        BootstrapError: If git fails, times out or cannot be executed.
    """
    args = ["git", "clone", "--depth=1", repo_url, str(dest)]
    try:
        result = run_command(args, timeout=timeout)
    except CommandError as e:
        raise BootstrapError(f"Failed to clone {repo_url}: {e}") from e

    if not result.success:
        detail = result.stderr.strip() or f"git exited with status {result.returncode}"
        raise BootstrapError(f"Failed to clone {repo_url}: {detail}")


def build_and_install(recipe_dir: Path, *, timeout: float | None = None) -> None:
    """Build and install a package from a PKGBUILD directory.

    Runs ``makepkg -si --noconfirm`` inside ``recipe_dir``; makepkg pulls
    missing dependencies and installs the result through sudo itself.

    Args:
        recipe_dir: Absolute path of the directory holding the PKGBUILD.
        timeout: Timeout in seconds. None disables it.

    Raises:
        BootstrapError: If makepkg fails, times out or cannot be executed.
    """
    args = ["makepkg", "-si", "--noconfirm"]
    try:
        returncode = run_interactive(args, cwd=str(recipe_dir), timeout=timeout)
    except CommandError as e:
        raise BootstrapError(f"Failed to build {recipe_dir.name}: {e}") from e

    if returncode != 0:
        msg = f"Failed to build {recipe_dir.name}: makepkg exited with status {returncode}"
        raise BootstrapError(msg)


def ensure_helper_tool(
    helper: HelperConfig,
    official: Operator | None = None,
    *,
    timeout: float | None = None,
) -> bool:
    """Make sure the AUR helper is on PATH, building it if necessary.

    Args:
        helper: Helper settings (executable name, recipe URL, build deps).
        official: Operator used to install build dependencies. None skips them.
        timeout: Timeout in seconds for each of clone and build.

    Returns:
        True if the helper was built now, False if it was already present.

    Raises:
        BootstrapError: If the helper cannot be built.
    """
    if command_exists(helper.name):
        logger.debug("%s already available", helper.name)
        return False

    logger.info("%s not found. Installing %s...", helper.name, helper.name)

    if official is not None:
        _install_build_dependencies(helper, official)

    with tempfile.TemporaryDirectory(prefix=TEMP_PREFIX) as tmp:
        recipe_dir = Path(tmp).resolve() / helper.name
        logger.debug("Building %s in %s", helper.name, recipe_dir)
        clone_recipe(helper.repo_url, recipe_dir, timeout=timeout)
        build_and_install(recipe_dir, timeout=timeout)

    if not command_exists(helper.name):
        msg = f"{helper.name} was built but is still not on PATH"
        raise BootstrapError(msg)

    logger.info("%s installed", helper.name)
    return True
