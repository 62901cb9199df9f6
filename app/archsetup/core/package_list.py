"""Package list file loading.

A package list is a UTF-8 text file with one package name per line.
Lines beginning with ``#`` are comments and blank lines are ignored;
there is no other syntax. Every remaining line must be a single valid
package name.
"""

import logging
from pathlib import Path

from archsetup.core.errors import ConfigurationError
from archsetup.models.package import validate_package_name

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "#"


def parse_package_list(text: str, source: str = "package list") -> list[str]:
    """Extract package names from package list text.

    Args:
        text: File contents.
        source: Name of the list used in error messages.

    Returns:
        Package names in file order, duplicates kept.

    Raises:
        ConfigurationError: If a line is not a valid package name.
    """
    packages: list[str] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        name = line.strip()
        if not name or name.startswith(COMMENT_PREFIX):
            continue
        try:
            validate_package_name(name)
        except ValueError as e:
            raise ConfigurationError(f"{source}, line {lineno}: {e}") from e
        packages.append(name)
    return packages


def load_package_list(path: Path) -> list[str]:
    """Load package names from a package list file.

    Args:
        path: Path to the package list.

    Returns:
        Package names in file order.

    Raises:
        ConfigurationError: If the file doesn't exist, cannot be read or
            holds an invalid package name.
    """
    if not path.is_file():
        raise ConfigurationError(f"Package list not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Failed to read package list {path}: {e}") from e

    packages = parse_package_list(text, source=str(path))
    logger.debug("Loaded %d package(s) from %s", len(packages), path)
    return packages
