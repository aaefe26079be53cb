"""Directory tree scanner for orphaned images.

Walks the scan root once, partitioning regular files into images and
markdown documents, extracts the references from every document, and
reconciles the two sets into the orphan list.
"""

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from mdprune.core.errors import (
    CanonicalizeError,
    MarkdownReadError,
    ScanRootNotADirectoryError,
    ScanRootNotFoundError,
)
from mdprune.orphans.extractor import extract_references
from mdprune.orphans.models import DEFAULT_IMAGE_EXTENSIONS, MARKDOWN_EXTENSIONS, ScanResult
from mdprune.orphans.reconciler import reconcile
from mdprune.orphans.resolver import canonicalize

logger = logging.getLogger(__name__)


def validate_scan_root(directory: Path) -> Path:
    """Check that a target directory is usable and return its canonical form.

    Args:
        directory: Directory given by the user.

    Returns:
        Canonical, absolute path of the directory.

    Raises:
        ScanRootNotFoundError: If the directory does not exist.
        ScanRootNotADirectoryError: If the path is not a directory.
        CanonicalizeError: If the path cannot be canonicalized.
    """
    if not directory.exists():
        raise ScanRootNotFoundError(directory)
    if not directory.is_dir():
        raise ScanRootNotADirectoryError(directory)
    try:
        return directory.resolve(strict=True)
    except (OSError, RuntimeError) as e:
        raise CanonicalizeError(directory, str(e)) from e


def file_extension(path: Path) -> str:
    """Return the lowercase extension of a path without its leading dot."""
    return path.suffix[1:].lower()


class OrphanScanner:
    """Finds images under a scan root that no markdown document references.

    Args:
        root: Canonical scan root, as returned by validate_scan_root.
        extensions: Lowercase image extensions without leading dots.
    """

    def __init__(
        self,
        root: Path,
        *,
        extensions: Iterable[str] = DEFAULT_IMAGE_EXTENSIONS,
    ) -> None:
        self._root = root
        self._extensions = frozenset(extensions)

    @property
    def root(self) -> Path:
        """Canonical scan root."""
        return self._root

    @property
    def extensions(self) -> frozenset[str]:
        """Image extensions considered by this scanner."""
        return self._extensions

    def scan(self) -> ScanResult:
        """Walk the tree and compute the orphaned images.

        Unreadable subdirectories and unreadable markdown documents are
        skipped with a warning; the scan itself never aborts because of them.

        Returns:
            ScanResult with orphans sorted by canonical path.
        """
        images: set[Path] = set()
        documents: list[Path] = []

        for path in self._walk_files():
            # A file may be both an image candidate and a markdown document
            extension = file_extension(path)
            if extension in MARKDOWN_EXTENSIONS:
                documents.append(path)
            if extension in self._extensions:
                canonical = canonicalize(path)
                if canonical is None:
                    logger.debug("Dropping image that cannot be canonicalized: %s", path)
                    continue
                images.add(canonical)

        referenced: set[Path] = set()
        unreadable: list[Path] = []
        for document in documents:
            try:
                referenced |= extract_references(document, self._root)
            except MarkdownReadError as e:
                logger.warning("Skipping unreadable markdown file: %s", e)
                unreadable.append(document)

        logger.debug(
            "Scanned %s: %d image(s), %d markdown file(s), %d reference(s)",
            self._root,
            len(images),
            len(documents),
            len(referenced),
        )

        return ScanResult(
            root=self._root,
            images=frozenset(images),
            referenced=frozenset(referenced),
            orphans=tuple(reconcile(images, referenced)),
            markdown_files=len(documents),
            unreadable=tuple(unreadable),
        )

    def _walk_files(self) -> Iterator[Path]:
        """Yield every regular file under the root without following symlinks."""
        for dirpath, _dirnames, filenames in self._root.walk(
            follow_symlinks=False, on_error=self._on_walk_error
        ):
            for name in sorted(filenames):
                path = dirpath / name
                try:
                    if path.is_symlink() or not path.is_file():
                        continue
                except OSError:
                    logger.warning("Cannot determine type of: %s", path)
                    continue
                yield path

    @staticmethod
    def _on_walk_error(error: OSError) -> None:
        logger.warning("Skipping unreadable directory: %s", error)
