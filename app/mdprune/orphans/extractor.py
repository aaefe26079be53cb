"""Image reference extraction from markdown documents.

Recognizes markdown image syntax (``![alt](target "title")``) and HTML
``<img src="...">`` tags. Link reference definitions, CSS backgrounds
and other embeds are not recognized.
"""

import logging
import re
from pathlib import Path

from mdprune.core.errors import MarkdownReadError
from mdprune.orphans.resolver import resolve_reference

logger = logging.getLogger(__name__)

# ![alt](target) and ![alt](target "title") / ![alt](target 'title')
MARKDOWN_IMAGE_PATTERN = re.compile(r"""!\[.*?\]\(([^)]+?)(?:\s+["'].*?["'])?\)""")

# <img ... src="target"> and <img ... src='target'>
HTML_IMAGE_PATTERN = re.compile(r"""<img[^>]+src=["']([^"']+)["']""", re.IGNORECASE)


def extract_targets(text: str) -> list[str]:
    """Return every raw image target in a markdown text, trimmed.

    Markdown matches come first, then HTML matches, each in document
    order. Duplicates are kept.
    """
    targets = [m.group(1).strip() for m in MARKDOWN_IMAGE_PATTERN.finditer(text)]
    targets.extend(m.group(1).strip() for m in HTML_IMAGE_PATTERN.finditer(text))
    return targets


def extract_references(markdown_path: Path, scan_root: Path) -> set[Path]:
    """Collect the canonical image paths a markdown document references.

    Args:
        markdown_path: Path to the markdown document.
        scan_root: Canonical scan root; references outside it are discarded.

    Returns:
        Set of canonical paths of referenced files inside the scan root.

    Raises:
        MarkdownReadError: If the document cannot be read as UTF-8 text.
    """
    try:
        text = markdown_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MarkdownReadError(markdown_path, str(e)) from e

    markdown_dir = markdown_path.parent
    references: set[Path] = set()
    for target in extract_targets(text):
        resolved = resolve_reference(target, markdown_dir, scan_root)
        if resolved is not None:
            references.add(resolved)

    logger.debug("%s references %d image(s)", markdown_path, len(references))
    return references
