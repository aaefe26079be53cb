"""Orphan reconciliation: images that no document references."""

from collections.abc import Set
from pathlib import Path


def reconcile(images: Set[Path], referenced: Set[Path]) -> list[Path]:
    """Compute orphaned images in a deterministic order.

    Args:
        images: Canonical paths of all in-scope images.
        referenced: Canonical paths of all resolved references.

    Returns:
        ``images - referenced``, sorted lexicographically by path string.
    """
    return sorted(images - referenced, key=str)
