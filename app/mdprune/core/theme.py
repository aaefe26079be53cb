"""Console color theme.

The bundled data/theme.toml defines every color. A user theme at
~/.config/mdprune/theme.toml may override any subset of them; keys it
does not set keep their bundled values.
"""

import logging
import re
import tomllib
from functools import cache
from importlib import resources
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, ValidationError
from rich.theme import Theme

from mdprune.core.paths import get_user_theme_path

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})")


def parse_hex_color(value: object) -> str:
    """Normalize and check a ``#RGB`` or ``#RRGGBB`` color string.

    Raises:
        ValueError: If the value is not a string or not a hex color.
    """
    if not isinstance(value, str):
        raise ValueError("color must be a string")
    color = value.strip()
    if not color.startswith("#"):
        raise ValueError(f"color {color!r} must start with '#'")
    if len(color) not in (4, 7):
        raise ValueError(f"color {color!r} must be #RGB or #RRGGBB")
    if not _HEX_COLOR.fullmatch(color):
        raise ValueError(f"color {color!r} is not a valid hex color")
    return color


HexColor = Annotated[str, BeforeValidator(parse_hex_color)]


class ThemeColors(BaseModel):
    """Hex colors for each role in CLI output."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    muted: HexColor = "#b2bec3"
    header: HexColor = "#69B9A1"
    border: HexColor = "#29526d"

    success: HexColor = "#03b971"
    warning: HexColor = "#f5b332"
    error: HexColor = "#f53263"
    info: HexColor = "#0ec1c8"

    orphan: HexColor = "#faf870"
    removed: HexColor = "#f53263"
    recycled: HexColor = "#d44ebc"
    moved: HexColor = "#0e8ac8"

    def to_rich_theme(self) -> Theme:
        """Build the Rich theme; style names match the color roles."""
        styles = self.model_dump()
        for emphasized in ("header", "error", "removed", "recycled", "moved"):
            styles[emphasized] = f"bold {styles[emphasized]}"
        return Theme(styles)


def get_bundled_theme_path() -> Path:
    """Get the bundled default theme path."""
    return Path(str(resources.files("mdprune.data").joinpath("theme.toml")))


def read_color_table(path: Path) -> dict[str, str]:
    """Read the ``[colors]`` table of a theme file.

    A missing file, a file that cannot be parsed, or a ``colors`` entry
    that is not a table yields an empty mapping. Non-string values are
    dropped.
    """
    try:
        with path.open("rb") as f:
            document = tomllib.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return {}

    table = document.get("colors", {})
    if not isinstance(table, dict):
        logger.warning("Ignoring theme file %s: 'colors' is not a table", path)
        return {}
    return {name: value for name, value in table.items() if isinstance(value, str)}


def load_theme() -> ThemeColors:
    """Merge the user theme over the bundled one.

    Falls back to the built-in defaults when the merged colors do not
    validate.
    """
    colors = read_color_table(get_bundled_theme_path())
    if not colors:
        logger.error("Bundled theme is missing or empty; using built-in colors")

    user_path = get_user_theme_path()
    overrides = read_color_table(user_path)
    if overrides:
        logger.debug("Applying %d theme override(s) from %s", len(overrides), user_path)
        colors |= overrides

    try:
        return ThemeColors.model_validate(colors)
    except ValidationError as e:
        logger.warning("Invalid theme colors, using defaults: %s", e)
        return ThemeColors()


@cache
def get_theme() -> Theme:
    """Rich theme for the shared consoles, loaded on first use."""
    return load_theme().to_rich_theme()
