"""Console color theme for archsetup.

Colors come from the bundled ``theme.toml``; a user file at
~/.config/archsetup/theme.toml may override any subset of them.
"""

import logging
import tomllib
from importlib import resources
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

from archsetup.core.paths import get_config_dir

logger = logging.getLogger(__name__)


class ThemeColors(BaseModel):
    """Color configuration for archsetup output.

    All colors must be hex codes (#RRGGBB or #RGB).
    """

    model_config = ConfigDict(extra="forbid")

    text: str = "#ffffff"
    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    border: str = "#29526d"

    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"

    # Package sources
    official: str = "#1793d1"
    community: str = "#c1ff62"

    # Install outcomes
    installed: str = "#03b971"
    skipped: str = "#b2bec3"
    missing: str = "#f5b332"
    failed: str = "#f53263"

    @field_validator("*", mode="before")
    @classmethod
    def validate_hex_color(cls, v: object, info: Any) -> str:
        """Validate that all color values are valid hex codes."""
        if not isinstance(v, str):
            msg = f"{info.field_name}: color must be a string"
            raise ValueError(msg)
        color = v.strip()
        digits = color[1:]
        if not color.startswith("#") or len(digits) not in (3, 6):
            msg = f"{info.field_name}: color must be #RGB or #RRGGBB, got '{color}'"
            raise ValueError(msg)
        try:
            int(digits, 16)
        except ValueError:
            msg = f"{info.field_name}: invalid hex color '{color}'"
            raise ValueError(msg) from None
        return color


def get_user_theme_path() -> Path:
    """Return the path of the user theme override file."""
    return get_config_dir() / "theme.toml"


def get_bundled_theme_path() -> Path:
    """Return the path of the bundled default theme."""
    return Path(str(resources.files("archsetup.data").joinpath("theme.toml")))


def _load_toml_colors(path: Path) -> dict[str, str] | None:
    """Load the ``[colors]`` table of a TOML file.

    Returns:
        Mapping of color name to value, or None if the file is missing or unusable.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return None
    except (tomllib.TOMLDecodeError, OSError) as e:
        logger.warning("Failed to load theme file %s: %s", path, e)
        return None

    colors = data.get("colors", {})
    if not isinstance(colors, dict):
        logger.warning("Invalid 'colors' section in %s", path)
        return None
    return {str(k): v for k, v in colors.items() if isinstance(v, str)}


def load_theme() -> ThemeColors:
    """Load theme colors, applying user overrides on top of the bundled theme.

    An invalid user theme falls back to the built-in defaults.
    """
    colors = _load_toml_colors(get_bundled_theme_path()) or {}

    user_colors = _load_toml_colors(get_user_theme_path())
    if user_colors:
        logger.debug("Loaded user theme overrides from %s", get_user_theme_path())
        colors = {**colors, **user_colors}

    try:
        return ThemeColors(**colors)
    except ValidationError as e:
        logger.warning("Invalid theme configuration, using defaults: %s", e)
        return ThemeColors()


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Convert ThemeColors to a Rich Theme.

    Args:
        colors: ThemeColors instance to convert. If None, loads the theme.

    Returns:
        Rich Theme with one style per color plus composite styles.
    """
    if colors is None:
        colors = load_theme()

    styles: dict[str, str] = {name: str(value) for name, value in colors.model_dump().items()}
    styles.update(
        {
            "error": f"bold {colors.error}",
            "failed": f"bold {colors.failed}",
            "bold_header": f"bold {colors.header}",
        }
    )
    return Theme(styles)


_cached_theme: Theme | None = None


def get_theme() -> Theme:
    """Get the Rich theme, loading and caching it on first use."""
    global _cached_theme
    if _cached_theme is None:
        _cached_theme = get_rich_theme()
    return _cached_theme
