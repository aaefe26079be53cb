"""Shared Rich display functions for orphan listings and action results.

Provides the plain, table, and JSON renderings of a scan and the
summary line printed after an action batch.
"""

import json
from pathlib import Path

import typer
from rich.markup import escape
from rich.table import Table

from mdprune.orphans.models import ActionKind, ActionSummary, ScanResult
from mdprune.utils.formatting import console, display_relative_path, print_info

# Past-tense label and theme style for each action
_ACTION_STYLES: dict[ActionKind, tuple[str, str]] = {
    ActionKind.DELETE: ("Deleted", "removed"),
    ActionKind.RECYCLE: ("Recycled", "recycled"),
    ActionKind.MOVE: ("Moved", "moved"),
}


def root_label(directory: Path) -> str:
    """Name used as the prefix of listed orphans, e.g. ``docs`` for ``./docs``."""
    return directory.name or "."


def orphan_line(path: Path, root: Path, label: str) -> str:
    """Format one orphan as ``<label>/<path relative to root>``."""
    return f"{label}/{display_relative_path(path, root)}"


def _file_size(path: Path) -> int | None:
    try:
        return path.stat().st_size
    except OSError:
        return None


def format_size(size_bytes: int | None) -> str:
    """Format byte count as human-readable string."""
    if size_bytes is None or size_bytes == 0:
        return "0 B"
    size = float(size_bytes)
    for unit in ("B", "KB", "MB", "GB"):
        if abs(size) < 1024:
            return f"{size:.1f} {unit}" if unit != "B" else f"{int(size)} B"
        size /= 1024
    return f"{size:.1f} TB"


def print_plain(result: ScanResult, label: str) -> None:
    """Print one orphan per line, unstyled, for piping into other tools."""
    for path in result.orphans:
        typer.echo(orphan_line(path, result.root, label))


def create_orphans_table(result: ScanResult, label: str) -> Table:
    """Create a Rich table listing orphaned images with their sizes.

    Args:
        result: Scan result to display.
        label: Prefix for relative paths.

    Returns:
        Rich Table configured for orphan display.
    """
    table = Table(
        title="Orphaned Images",
        show_header=True,
        header_style="header",
        border_style="border",
    )
    table.add_column("Image", style="orphan", no_wrap=True)
    table.add_column("Size", style="info", justify="right", width=10)

    for path in result.orphans:
        size = _file_size(path)
        table.add_row(
            escape(orphan_line(path, result.root, label)),
            format_size(size) if size is not None else "-",
        )

    return table


def print_json(result: ScanResult) -> None:
    """Print orphans as a JSON array."""
    data = [
        {
            "path": str(path),
            "relative_path": display_relative_path(path, result.root),
            "size_bytes": _file_size(path),
        }
        for path in result.orphans
    ]
    typer.echo(json.dumps(data, indent=2))


def print_scan_summary(result: ScanResult) -> None:
    """Print counts of orphans, images, and markdown files."""
    total_size = sum(_file_size(p) or 0 for p in result.orphans)
    console.print(
        f"\n[muted]Found {len(result.orphans)} orphaned image(s) "
        f"({format_size(total_size)}) among {len(result.images)} image(s) "
        f"and {result.markdown_files} markdown file(s)[/muted]"
    )


def print_action_summary(summary: ActionSummary) -> None:
    """Print the outcome of an action batch.

    Real runs print ``Deleted: N image(s)`` (or Recycled/Moved); dry runs
    list planned move destinations and report what would have happened.
    """
    done, style = _ACTION_STYLES[summary.kind]

    if summary.dry_run:
        if summary.kind == ActionKind.MOVE:
            for outcome in summary.outcomes:
                console.print(
                    f"[muted]{escape(str(outcome.source))} -> "
                    f"{escape(str(outcome.destination))}[/muted]"
                )
        print_info(f"Dry-run: {summary.count} image(s) would be {done.lower()}.")
        return

    console.print(f"[{style}]{done}:[/] {summary.count} image(s)")
