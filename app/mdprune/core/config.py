"""User settings for mdprune.

Settings are read from an optional TOML file
(``~/.config/mdprune/config.toml`` by default) and validated with
Pydantic. Command-line options always take precedence over the file.

Example file::

    [prune]
    extensions = ["png", "jpg", "svg"]
    action = "move"
    move_to = "~/orphaned-images"
"""

import re
import tomllib
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from mdprune.core.errors import (
    ConfigError,
    ConfigParseError,
    ConfigValidationError,
    InvalidExtensionsError,
)
from mdprune.core.paths import get_settings_path
from mdprune.orphans.models import DEFAULT_IMAGE_EXTENSIONS, ActionKind

_EXTENSION_PATTERN = re.compile(r"^[a-z0-9][a-z0-9_+-]*$")


def parse_extensions(value: str | Iterable[str]) -> tuple[str, ...]:
    """Normalize an image extension list.

    Accepts a comma-separated string or an iterable of strings. Entries
    are trimmed, lowercased, stripped of a leading dot, and de-duplicated
    in first-seen order. Empty entries are ignored.

    Args:
        value: Extensions, e.g. ``"png, JPG,.svg"``.

    Returns:
        Tuple of normalized extensions.

    Raises:
        InvalidExtensionsError: If no extension remains or one is malformed.
    """
    raw = value.split(",") if isinstance(value, str) else list(value)

    extensions: list[str] = []
    for item in raw:
        if not isinstance(item, str):
            msg = f"Extension must be a string, got {type(item).__name__}"
            raise InvalidExtensionsError(msg)
        ext = item.strip().lower().removeprefix(".")
        if not ext:
            continue
        if not _EXTENSION_PATTERN.match(ext):
            msg = f"Invalid image extension: '{item.strip()}'"
            raise InvalidExtensionsError(msg)
        if ext not in extensions:
            extensions.append(ext)

    if not extensions:
        msg = "At least one image extension is required"
        raise InvalidExtensionsError(msg)
    return tuple(extensions)


class PruneSettings(BaseModel):
    """Settings consumed by the scan and prune commands.

    Attributes:
        extensions: Image extensions to consider (lowercase, no dot).
        action: Default action when no action option is given.
        move_to: Default holding directory for the move action.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    extensions: tuple[str, ...] = Field(default=DEFAULT_IMAGE_EXTENSIONS)
    action: ActionKind = ActionKind.RECYCLE
    move_to: Path | None = None

    @field_validator("extensions", mode="before")
    @classmethod
    def normalize_extensions(cls, v: Any) -> tuple[str, ...]:
        """Normalize extensions given as a string or a list."""
        if not isinstance(v, str | list | tuple):
            msg = "extensions must be a string or a list of strings"
            raise ValueError(msg)
        return parse_extensions(v)

    @field_validator("move_to", mode="after")
    @classmethod
    def expand_move_to(cls, v: Path | None) -> Path | None:
        """Expand a leading ``~`` in the holding directory."""
        return v.expanduser() if v is not None else None

    @model_validator(mode="after")
    def check_move_destination(self) -> "PruneSettings":
        """Require a holding directory when move is the default action."""
        if self.action == ActionKind.MOVE and self.move_to is None:
            msg = "action 'move' requires move_to to be set"
            raise ValueError(msg)
        return self


def load_settings(path: Path | None = None) -> PruneSettings:
    """Load settings from a TOML file.

    A missing file at the default location yields default settings. A
    missing file at an explicitly given path is an error.

    Args:
        path: Settings file path. If None, uses the default settings path.

    Returns:
        Validated PruneSettings.

    Raises:
        ConfigError: If an explicit settings file does not exist or cannot be read.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigValidationError: If the content doesn't match the schema.
    """
    settings_path = path or get_settings_path()

    if not settings_path.exists():
        if path is not None:
            raise ConfigError(f"Settings file not found: {settings_path}")
        return PruneSettings()

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {settings_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read settings {settings_path}: {e}") from e

    section = data.get("prune", {})
    if not isinstance(section, dict):
        raise ConfigValidationError(f"Invalid [prune] section in {settings_path}")

    try:
        return PruneSettings.model_validate(section)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid settings in {settings_path}: {e}") from e
