"""Orphaned image detection and removal.

This module provides reference resolution, markdown reference
extraction, tree scanning, orphan reconciliation, and the action
operator that removes orphaned images.
"""

from mdprune.orphans.extractor import extract_references, extract_targets
from mdprune.orphans.models import (
    DEFAULT_IMAGE_EXTENSIONS,
    MARKDOWN_EXTENSIONS,
    ActionKind,
    ActionSummary,
    ImageOutcome,
    PruneAction,
    ScanResult,
)
from mdprune.orphans.operator import ImageOperator, unique_destination
from mdprune.orphans.reconciler import reconcile
from mdprune.orphans.resolver import resolve_reference
from mdprune.orphans.scanner import OrphanScanner, validate_scan_root

__all__ = [
    "DEFAULT_IMAGE_EXTENSIONS",
    "MARKDOWN_EXTENSIONS",
    "ActionKind",
    "ActionSummary",
    "ImageOperator",
    "ImageOutcome",
    "OrphanScanner",
    "PruneAction",
    "ScanResult",
    "extract_references",
    "extract_targets",
    "reconcile",
    "resolve_reference",
    "unique_destination",
    "validate_scan_root",
]
