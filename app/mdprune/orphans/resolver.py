"""Resolution of raw image references to canonical on-disk files.

A raw reference is the href/src text found in a markdown document.
Resolution never raises: a reference that is URL-like, points outside
the scan root, or names a file that does not exist resolves to None.
"""

import logging
from pathlib import Path
from urllib.parse import unquote_to_bytes

logger = logging.getLogger(__name__)

# References with these prefixes are never looked up on disk
URL_PREFIXES: tuple[str, ...] = ("http://", "https://", "//", "data:")


def is_url(reference: str) -> bool:
    """Check whether a reference points at a remote or inline resource."""
    return reference.startswith(URL_PREFIXES)


def percent_decode(reference: str) -> str:
    """Percent-decode a reference, returning it unchanged if decoding fails.

    Invalid escapes such as ``%zz`` are kept literally. If the decoded
    bytes are not valid UTF-8, the raw reference is returned.
    """
    try:
        return unquote_to_bytes(reference).decode("utf-8")
    except UnicodeDecodeError:
        return reference


def strip_query_and_fragment(reference: str) -> str:
    """Drop everything from the first ``#`` and then the first ``?`` onward."""
    return reference.split("#", 1)[0].split("?", 1)[0]


def canonicalize(path: Path) -> Path | None:
    """Resolve a path to its canonical form, or None if it does not exist."""
    try:
        return path.resolve(strict=True)
    except (OSError, RuntimeError, ValueError):
        return None


def resolve_reference(reference: str, markdown_dir: Path, scan_root: Path) -> Path | None:
    """Resolve a raw image reference to a canonical file inside the scan root.

    Attempts, in order, first success wins:

    1. URL-like references resolve to nothing.
    2. The percent-decoded reference, stripped of query and fragment.
    3. The raw reference, stripped of query and fragment, only when
       decoding changed it.

    Each attempt tries the markdown document's directory, then the scan
    root, then the reference itself if it is absolute.

    Args:
        reference: Raw href/src text, already trimmed.
        markdown_dir: Directory of the document containing the reference.
        scan_root: Canonical scan root.

    Returns:
        Canonical path of the referenced file, or None.
    """
    if is_url(reference):
        return None

    decoded = percent_decode(reference)
    attempts = [strip_query_and_fragment(decoded)]
    if decoded != reference:
        attempts.append(strip_query_and_fragment(reference))

    for candidate in attempts:
        resolved = _resolve_candidate(candidate, markdown_dir, scan_root)
        if resolved is not None:
            return resolved

    logger.debug("Unresolved reference %r in %s", reference, markdown_dir)
    return None


def _resolve_candidate(candidate: str, markdown_dir: Path, scan_root: Path) -> Path | None:
    """Try each resolution base in precedence order for one candidate string."""
    bases: list[Path] = [markdown_dir / candidate, scan_root / candidate]
    as_path = Path(candidate)
    if as_path.is_absolute():
        bases.append(as_path)

    for base in bases:
        canonical = canonicalize(base)
        if canonical is not None and canonical.is_relative_to(scan_root):
            return canonical
    return None
