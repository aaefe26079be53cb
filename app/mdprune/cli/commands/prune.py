"""Prune command implementation.

Scans for orphaned images, lists them, then deletes, recycles, or
moves them. Recycling is the default action.
"""

from pathlib import Path
from typing import Annotated

import typer

from mdprune.cli.display import print_action_summary, print_plain, root_label
from mdprune.cli.types import get_extensions, get_settings, is_quiet, open_scan_root
from mdprune.core.config import PruneSettings
from mdprune.core.errors import ImageActionError
from mdprune.orphans.models import ActionKind, PruneAction
from mdprune.orphans.operator import ImageOperator
from mdprune.orphans.scanner import OrphanScanner
from mdprune.utils.formatting import print_error, print_success, print_warning


def _select_action(
    settings: PruneSettings,
    delete: bool,
    recycle: bool,
    move_to: Path | None,
) -> PruneAction:
    """Build the action from mutually exclusive options, falling back to settings.

    Raises:
        typer.BadParameter: If more than one action option is given, or if
            the settings select move without a destination.
    """
    chosen = sum((delete, recycle, move_to is not None))
    if chosen > 1:
        msg = "Options --delete, --recycle and --move are mutually exclusive."
        raise typer.BadParameter(msg)

    if delete:
        return PruneAction.delete()
    if move_to is not None:
        return PruneAction.move(move_to)
    if recycle:
        return PruneAction.recycle()

    if settings.action == ActionKind.MOVE:
        if settings.move_to is None:
            msg = "Settings select the move action but set no move_to directory."
            raise typer.BadParameter(msg)
        return PruneAction.move(settings.move_to)
    if settings.action == ActionKind.DELETE:
        return PruneAction.delete()
    return PruneAction.recycle()


def prune_orphans(
    ctx: typer.Context,
    directory: Annotated[
        Path,
        typer.Argument(help="Directory to prune orphaned images from."),
    ],
    recycle: Annotated[
        bool,
        typer.Option("--recycle", help="Move orphaned images to the system recycle bin (default)."),
    ] = False,
    delete: Annotated[
        bool,
        typer.Option("--delete", help="Permanently delete orphaned images."),
    ] = False,
    move_to: Annotated[
        Path | None,
        typer.Option(
            "--move",
            metavar="DIR",
            help="Move orphaned images to DIR, renaming on name collisions.",
        ),
    ] = None,
    extensions: Annotated[
        str | None,
        typer.Option(
            "--extensions",
            "-x",
            help="Image extensions to consider (comma-separated).",
            show_default="jpg,jpeg,png,gif,bmp,svg,webp",
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be removed without touching files."),
    ] = False,
) -> None:
    """Remove images that no markdown file in DIRECTORY references.

    Examples:
        md-prune-image prune docs                     # Recycle orphans
        md-prune-image prune docs --delete            # Delete permanently
        md-prune-image prune docs --move ./orphans    # Relocate orphans
        md-prune-image prune docs --dry-run           # Preview only
    """
    settings = get_settings(ctx)
    action = _select_action(settings, delete, recycle, move_to)
    image_extensions = get_extensions(settings, extensions)
    root = open_scan_root(directory)

    result = OrphanScanner(root, extensions=image_extensions).scan()

    if not is_quiet(ctx):
        for document in result.unreadable:
            print_warning(f"Skipped unreadable markdown file: {document}")

    if not result.has_orphans:
        if not is_quiet(ctx):
            print_success("No orphaned images found.")
        return

    if not is_quiet(ctx):
        print_plain(result, root_label(directory))

    operator = ImageOperator(dry_run=dry_run)
    try:
        summary = operator.execute(action, result.orphans)
    except ImageActionError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_action_summary(summary)
