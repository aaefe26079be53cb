"""Domain models for orphaned image detection and removal.

This module defines the data structures passed between the scanner,
the reconciler, the action operator, and the CLI.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

# Extensions (lowercase, without dot) recognized as markdown documents
MARKDOWN_EXTENSIONS: frozenset[str] = frozenset({"md", "markdown"})

# Extensions (lowercase, without dot) recognized as images by default
DEFAULT_IMAGE_EXTENSIONS: tuple[str, ...] = ("jpg", "jpeg", "png", "gif", "bmp", "svg", "webp")


class ActionKind(str, Enum):
    """What to do with orphaned images.

    Attributes:
        DELETE: Permanently delete the file.
        RECYCLE: Move the file to the system trash.
        MOVE: Relocate the file to a holding directory.
    """

    DELETE = "delete"
    RECYCLE = "recycle"
    MOVE = "move"


@dataclass(frozen=True, slots=True)
class PruneAction:
    """An action selector for the operator.

    Attributes:
        kind: The kind of action to perform.
        destination: Holding directory, required for MOVE and unused otherwise.
    """

    kind: ActionKind
    destination: Path | None = None

    def __post_init__(self) -> None:
        """Validate that MOVE carries a destination and nothing else does."""
        if self.kind == ActionKind.MOVE and self.destination is None:
            msg = "Move action requires a destination directory"
            raise ValueError(msg)
        if self.kind != ActionKind.MOVE and self.destination is not None:
            msg = f"{self.kind.value} action does not take a destination"
            raise ValueError(msg)

    @classmethod
    def delete(cls) -> "PruneAction":
        return cls(ActionKind.DELETE)

    @classmethod
    def recycle(cls) -> "PruneAction":
        return cls(ActionKind.RECYCLE)

    @classmethod
    def move(cls, destination: Path) -> "PruneAction":
        return cls(ActionKind.MOVE, destination)


@dataclass(frozen=True, slots=True)
class ImageOutcome:
    """Outcome of applying an action to one orphaned image.

    Attributes:
        source: Canonical path of the orphaned image.
        destination: Where the image was moved to (MOVE only).
        dry_run: Whether the action was only simulated.
    """

    source: Path
    destination: Path | None = None
    dry_run: bool = False


@dataclass(frozen=True, slots=True)
class ActionSummary:
    """Result of applying one action to a batch of orphaned images.

    Attributes:
        kind: The action that was applied.
        outcomes: One outcome per processed image, in processing order.
        dry_run: Whether the batch was only simulated.
    """

    kind: ActionKind
    outcomes: tuple[ImageOutcome, ...] = ()
    dry_run: bool = False

    @property
    def count(self) -> int:
        """Number of images processed."""
        return len(self.outcomes)


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Everything a single scan learned about a directory tree.

    Attributes:
        root: Canonical scan root.
        images: Canonical paths of every in-scope image file.
        referenced: Canonical paths of every resolved image reference.
        orphans: Images minus references, sorted by canonical path.
        markdown_files: Number of markdown documents found.
        unreadable: Markdown documents skipped because they could not be read.
    """

    root: Path
    images: frozenset[Path]
    referenced: frozenset[Path]
    orphans: tuple[Path, ...]
    markdown_files: int = 0
    unreadable: tuple[Path, ...] = field(default_factory=tuple)

    @property
    def has_orphans(self) -> bool:
        """Check whether any orphaned image was found."""
        return bool(self.orphans)
