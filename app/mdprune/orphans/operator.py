"""Removal of orphaned images.

Applies one action (delete, recycle, or move) to a batch of orphaned
images. The first failing file aborts the batch: destructive batches
are never partially skipped.
"""

import logging
import shutil
from collections.abc import Sequence
from pathlib import Path

from send2trash import send2trash

from mdprune.core.errors import (
    DestinationDirectoryError,
    ImageDeleteError,
    ImageMoveError,
    ImageRecycleError,
)
from mdprune.orphans.models import ActionKind, ActionSummary, ImageOutcome, PruneAction

logger = logging.getLogger(__name__)


def unique_destination(target: Path, reserved: set[Path] | None = None) -> Path:
    """Find a free filename for a move target.

    If ``target`` is taken, appends ``_1``, ``_2``, ... to the stem
    (before the extension) until a name is found that neither exists
    on disk nor appears in ``reserved``.

    Args:
        target: Desired destination path.
        reserved: Paths already claimed by earlier moves in the same batch.

    Returns:
        A destination path that is free to use.
    """
    reserved = reserved or set()
    if not target.exists() and target not in reserved:
        return target

    stem, suffix = target.stem, target.suffix
    counter = 1
    while True:
        candidate = target.with_name(f"{stem}_{counter}{suffix}")
        if not candidate.exists() and candidate not in reserved:
            return candidate
        counter += 1


class ImageOperator:
    """Deletes, recycles, or relocates orphaned images.

    Attributes:
        _dry_run: If True, report what would happen without touching files.
    """

    def __init__(self, dry_run: bool = False) -> None:
        """Initialize the ImageOperator.

        Args:
            dry_run: If True, simulate the action without modifying the filesystem.
        """
        self._dry_run = dry_run

    @property
    def dry_run(self) -> bool:
        """Check if operator is in dry-run mode."""
        return self._dry_run

    def execute(self, action: PruneAction, images: Sequence[Path]) -> ActionSummary:
        """Apply an action to every image, in order.

        Args:
            action: The action selector.
            images: Orphaned images, already in reporting order.

        Returns:
            ActionSummary with one outcome per image.

        Raises:
            ImageActionError: On the first image that cannot be processed.
            ValueError: If a move action carries no destination.
        """
        if action.kind == ActionKind.DELETE:
            outcomes = [self._delete(image) for image in images]
        elif action.kind == ActionKind.RECYCLE:
            outcomes = [self._recycle(image) for image in images]
        elif action.kind == ActionKind.MOVE and action.destination is not None:
            outcomes = self._move_all(images, action.destination)
        else:
            msg = f"Cannot execute {action.kind.value} action without a destination"
            raise ValueError(msg)

        return ActionSummary(kind=action.kind, outcomes=tuple(outcomes), dry_run=self._dry_run)

    def _delete(self, image: Path) -> ImageOutcome:
        if self._dry_run:
            logger.info("Dry-run: would delete %s", image)
            return ImageOutcome(source=image, dry_run=True)

        try:
            image.unlink()
        except OSError as e:
            raise ImageDeleteError(image, str(e)) from e
        logger.info("Deleted %s", image)
        return ImageOutcome(source=image)

    def _recycle(self, image: Path) -> ImageOutcome:
        if self._dry_run:
            logger.info("Dry-run: would recycle %s", image)
            return ImageOutcome(source=image, dry_run=True)

        try:
            send2trash(image)
        except OSError as e:
            raise ImageRecycleError(image, str(e)) from e
        logger.info("Recycled %s", image)
        return ImageOutcome(source=image)

    def _move_all(self, images: Sequence[Path], destination: Path) -> list[ImageOutcome]:
        """Move images into ``destination``, renaming on filename collisions.

        The destination directory is created if it does not exist (skipped
        in dry-run mode, where planned names are tracked in memory instead).
        """
        if not self._dry_run and not destination.exists():
            try:
                destination.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise DestinationDirectoryError(destination, str(e)) from e

        reserved: set[Path] = set()
        outcomes: list[ImageOutcome] = []
        for image in images:
            target = unique_destination(destination / image.name, reserved)
            reserved.add(target)

            if self._dry_run:
                logger.info("Dry-run: would move %s to %s", image, target)
                outcomes.append(ImageOutcome(source=image, destination=target, dry_run=True))
                continue

            try:
                shutil.move(image, target)
            except OSError as e:
                raise ImageMoveError(image, target, str(e)) from e
            logger.info("Moved %s to %s", image, target)
            outcomes.append(ImageOutcome(source=image, destination=target))

        return outcomes
