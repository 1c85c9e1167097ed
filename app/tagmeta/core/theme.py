"""Console colours for tagmeta.

The bundled ``data/theme.toml`` defines every colour. A user file at
``~/.config/tagmeta/theme.toml`` may override any subset of them under
a ``[colors]`` table.
"""

import logging
import tomllib
from importlib import resources
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from rich.theme import Theme

from tagmeta.core.paths import get_user_theme_path

logger = logging.getLogger(__name__)

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class ThemeColors(BaseModel):
    """Hex colours used by the console styles."""

    model_config = ConfigDict(extra="forbid")

    text: str = "#ffffff"
    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    border: str = "#29526d"

    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"

    # Records
    path: str = "#69B9A1"
    keyword: str = "#c1ff62"
    shortcut: str = "#0e8ac8"

    @field_validator("*", mode="before")
    @classmethod
    def check_hex(cls, value: object, info: Any) -> str:
        """Accept ``#RGB`` and ``#RRGGBB`` strings only."""
        field = info.field_name
        if not isinstance(value, str):
            raise ValueError(f"{field}: color must be a string")
        color = value.strip()
        if not color.startswith("#"):
            raise ValueError(f"{field}: color must start with '#'")
        digits = color[1:]
        if len(digits) not in (3, 6):
            raise ValueError(f"{field}: color must be #RGB or #RRGGBB format")
        if not set(digits) <= _HEX_DIGITS:
            raise ValueError(f"{field}: invalid hex color '{color}'")
        return color


def get_bundled_theme_path() -> Path:
    """Return the path of the theme shipped with the package."""
    return Path(str(resources.files("tagmeta.data").joinpath("theme.toml")))


def _load_toml_colors(path: Path) -> dict[str, str] | None:
    """Read the ``[colors]`` table of a theme file.

    Returns:
        Colour names mapped to their string values, or None when the file
        is missing or unreadable.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return None
    except (tomllib.TOMLDecodeError, OSError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return None

    table = data.get("colors", {})
    if not isinstance(table, dict):
        logger.warning("Ignoring theme file %s: [colors] is not a table", path)
        return None
    return {name: value for name, value in table.items() if isinstance(value, str)}


def load_theme() -> ThemeColors:
    """Merge the bundled colours with the user's overrides.

    Falls back to the model defaults if the merged colours are invalid.
    """
    colors = _load_toml_colors(get_bundled_theme_path())
    if colors is None:
        logger.error("Bundled theme is missing; the installation may be broken")
        colors = {}

    user_path = get_user_theme_path()
    overrides = _load_toml_colors(user_path)
    if overrides:
        logger.debug("Applying theme overrides from %s", user_path)
        colors = {**colors, **overrides}

    try:
        return ThemeColors(**colors)
    except ValueError as e:
        logger.warning("Invalid theme colors, using defaults: %s", e)
        return ThemeColors()


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Build the Rich styles referenced by console markup and tables."""
    c = colors or load_theme()
    return Theme(
        {
            "text": c.text,
            "muted": c.muted,
            "dim": c.muted,
            "header": c.header,
            "bold_header": f"bold {c.header}",
            "border": c.border,
            "success": c.success,
            "warning": c.warning,
            "error": f"bold {c.error}",
            "info": c.info,
            "path": f"bold {c.path}",
            "keyword": c.keyword,
            "shortcut": c.shortcut,
        }
    )


_cached_theme: Theme | None = None


def get_theme() -> Theme:
    """Return the Rich theme, building it on first use."""
    global _cached_theme
    if _cached_theme is None:
        _cached_theme = get_rich_theme()
    return _cached_theme


def reload_theme() -> Theme:
    """Rebuild the cached Rich theme from the theme files."""
    global _cached_theme
    _cached_theme = get_rich_theme()
    return _cached_theme
