"""Shared types and utilities for CLI commands.

This module provides common enums and helper functions used by both
the scan and prune commands.
"""

from enum import Enum
from pathlib import Path

import typer

from mdprune.core.config import PruneSettings, load_settings, parse_extensions
from mdprune.core.errors import ConfigError, InvalidExtensionsError, ScanRootError
from mdprune.orphans.scanner import validate_scan_root
from mdprune.utils.formatting import print_error


class OutputFormat(str, Enum):
    """Output format options for orphan listings."""

    PLAIN = "plain"
    TABLE = "table"
    JSON = "json"


def get_settings(ctx: typer.Context) -> PruneSettings:
    """Load settings from the file selected by the global --config option.

    Raises:
        typer.Exit: If the settings file is invalid.
    """
    obj = ctx.obj or {}
    try:
        return load_settings(obj.get("config"))
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def get_extensions(settings: PruneSettings, override: str | None) -> tuple[str, ...]:
    """Pick image extensions from the command line, falling back to settings.

    Raises:
        typer.Exit: If the command-line extension list is malformed.
    """
    if override is None:
        return settings.extensions
    try:
        return parse_extensions(override)
    except InvalidExtensionsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def open_scan_root(directory: Path) -> Path:
    """Validate the target directory and return its canonical path.

    Raises:
        typer.Exit: If the directory is missing, not a directory, or unresolvable.
    """
    try:
        return validate_scan_root(directory)
    except ScanRootError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def is_quiet(ctx: typer.Context) -> bool:
    """Check whether the global --quiet option was given."""
    return bool((ctx.obj or {}).get("quiet", False))
