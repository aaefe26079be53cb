"""Unit tests for markdown image reference extraction."""

from pathlib import Path

import pytest
from mdprune.core.errors import MarkdownReadError
from mdprune.orphans.extractor import extract_references, extract_targets


class TestExtractTargets:
    """Tests for raw target extraction from markdown text."""

    def test_markdown_image(self) -> None:
        assert extract_targets("![alt](images/a.png)") == ["images/a.png"]

    def test_empty_alt_text(self) -> None:
        assert extract_targets("![](a.png)") == ["a.png"]

    def test_double_quoted_title_excluded(self) -> None:
        assert extract_targets('![alt](a.png "A title")') == ["a.png"]

    def test_single_quoted_title_excluded(self) -> None:
        assert extract_targets("![alt](a.png 'A title')") == ["a.png"]

    def test_target_trimmed(self) -> None:
        assert extract_targets("![alt](  a.png  )") == ["a.png"]

    def test_multiple_images_on_one_line(self) -> None:
        text = "![a](one.png) and ![b](two.gif)"
        assert extract_targets(text) == ["one.png", "two.gif"]

    def test_plain_link_ignored(self) -> None:
        """Links without the leading ! are not images."""
        assert extract_targets("[doc](a.png)") == []

    def test_html_double_quotes(self) -> None:
        assert extract_targets('<img src="b.png">') == ["b.png"]

    def test_html_single_quotes(self) -> None:
        assert extract_targets("<img src='b.png'>") == ["b.png"]

    def test_html_attributes_before_src(self) -> None:
        text = '<img class="wide" alt="Chart" src="charts/c.svg" width="400" />'
        assert extract_targets(text) == ["charts/c.svg"]

    def test_html_uppercase_tag(self) -> None:
        assert extract_targets('<IMG SRC="b.png">') == ["b.png"]

    def test_both_syntaxes(self) -> None:
        text = '![x](a.png)\n\n<img src="b.png">\n'
        assert sorted(extract_targets(text)) == ["a.png", "b.png"]

    def test_link_reference_definitions_ignored(self) -> None:
        text = "![logo][id]\n\n[id]: images/logo.png\n"
        assert extract_targets(text) == []

    def test_no_images(self) -> None:
        assert extract_targets("# Title\n\nJust text.\n") == []


class TestExtractReferences:
    """Tests for extract_references on real files."""

    def test_resolves_markdown_and_html(self, root: Path) -> None:
        """Both syntaxes protect their images."""
        (root / "a.png").write_bytes(b"")
        (root / "b.png").write_bytes(b"")
        doc = root / "doc.md"
        doc.write_text('![x](a.png)\n<img src="b.png">\n')

        refs = extract_references(doc, root)

        assert refs == {root / "a.png", root / "b.png"}

    def test_duplicates_collapse(self, root: Path) -> None:
        """The same file referenced twice appears once."""
        (root / "a.png").write_bytes(b"")
        doc = root / "doc.md"
        doc.write_text('![x](a.png)\n![y](./a.png)\n<img src="a.png">\n')

        refs = extract_references(doc, root)

        assert refs == {root / "a.png"}

    def test_urls_and_missing_files_skipped(self, root: Path) -> None:
        doc = root / "doc.md"
        doc.write_text("![x](https://example.com/a.png)\n![y](missing.png)\n")

        assert extract_references(doc, root) == set()

    def test_relative_to_document_directory(self, root: Path) -> None:
        (root / "guide").mkdir()
        (root / "guide" / "shot.png").write_bytes(b"")
        doc = root / "guide" / "page.md"
        doc.write_text("![s](shot.png)\n")

        assert extract_references(doc, root) == {root / "guide" / "shot.png"}

    def test_unreadable_file_raises(self, root: Path) -> None:
        with pytest.raises(MarkdownReadError, match="missing.md"):
            extract_references(root / "missing.md", root)

    def test_invalid_utf8_raises(self, root: Path) -> None:
        doc = root / "binary.md"
        doc.write_bytes(b"\xff\xfe\x00garbage")

        with pytest.raises(MarkdownReadError) as exc_info:
            extract_references(doc, root)

        assert exc_info.value.path == doc
