"""Scan command implementation.

Lists orphaned images without modifying anything.
"""

from pathlib import Path
from typing import Annotated

import typer

from mdprune.cli.display import (
    create_orphans_table,
    print_json,
    print_plain,
    print_scan_summary,
    root_label,
)
from mdprune.cli.types import OutputFormat, get_extensions, get_settings, is_quiet, open_scan_root
from mdprune.orphans.scanner import OrphanScanner
from mdprune.utils.formatting import console, print_success, print_warning


def scan_orphans(
    ctx: typer.Context,
    directory: Annotated[
        Path,
        typer.Argument(help="Directory to scan for orphaned images."),
    ],
    extensions: Annotated[
        str | None,
        typer.Option(
            "--extensions",
            "-x",
            help="Image extensions to consider (comma-separated).",
            show_default="jpg,jpeg,png,gif,bmp,svg,webp",
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format: plain, table, or json.",
            case_sensitive=False,
        ),
    ] = OutputFormat.PLAIN,
) -> None:
    """List images that no markdown file in DIRECTORY references.

    Examples:
        md-prune-image scan docs                   # One orphan per line
        md-prune-image scan docs --format table    # Table with sizes
        md-prune-image scan docs -x png,svg        # Only PNG and SVG files
    """
    settings = get_settings(ctx)
    image_extensions = get_extensions(settings, extensions)
    root = open_scan_root(directory)

    result = OrphanScanner(root, extensions=image_extensions).scan()

    if not is_quiet(ctx):
        for document in result.unreadable:
            print_warning(f"Skipped unreadable markdown file: {document}")

    if output_format == OutputFormat.JSON:
        print_json(result)
        return

    if not result.has_orphans:
        print_success("No orphaned images found.")
        return

    label = root_label(directory)
    if output_format == OutputFormat.TABLE:
        console.print(create_orphans_table(result, label))
    else:
        print_plain(result, label)

    if not is_quiet(ctx):
        print_scan_summary(result)
