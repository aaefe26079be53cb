"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import sys
from pathlib import PurePath

from rich.console import Console
from rich.markup import escape

from mdprune.core.theme import get_theme


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def display_relative_path(path: PurePath, root: PurePath) -> str:
    """Render a path relative to a root, always with forward slashes.

    Falls back to the full path when ``path`` is not under ``root``.

    Args:
        path: Path to render.
        root: Directory to render it relative to.

    Returns:
        Forward-slash path string.
    """
    try:
        shown = path.relative_to(root)
    except ValueError:
        shown = path
    return str(shown).replace("\\", "/")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{escape(message)}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{escape(message)}[/]")
