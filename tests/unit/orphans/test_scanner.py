"""Tests for OrphanScanner and scan root validation."""

import os
from pathlib import Path

import pytest
from mdprune.core.errors import ScanRootNotADirectoryError, ScanRootNotFoundError
from mdprune.orphans.scanner import OrphanScanner, file_extension, validate_scan_root


class TestValidateScanRoot:
    """Tests for validate_scan_root."""

    def test_returns_canonical_path(self, root: Path) -> None:
        (root / "sub").mkdir()

        assert validate_scan_root(root / "sub" / "..") == root

    def test_missing_directory(self, tmp_path: Path) -> None:
        missing = tmp_path / "missing"

        with pytest.raises(ScanRootNotFoundError, match="does not exist") as exc_info:
            validate_scan_root(missing)

        assert exc_info.value.path == missing

    def test_not_a_directory(self, tmp_path: Path) -> None:
        file_path = tmp_path / "file.md"
        file_path.write_text("")

        with pytest.raises(ScanRootNotADirectoryError, match="not a directory"):
            validate_scan_root(file_path)


class TestFileExtension:
    """Tests for file_extension."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("a.png", "png"),
            ("A.PNG", "png"),
            ("archive.tar.gz", "gz"),
            ("README", ""),
            (".hidden", ""),
        ],
    )
    def test_extensions(self, name: str, expected: str) -> None:
        assert file_extension(Path(name)) == expected


class TestScan:
    """Tests for OrphanScanner.scan."""

    def test_finds_orphans(self, docs_tree: Path) -> None:
        """Unreferenced images are orphans; referenced ones are not."""
        result = OrphanScanner(docs_tree).scan()

        assert result.orphans == (
            docs_tree / "images" / "unused.png",
            docs_tree / "old" / "stale.JPG",
        )

    def test_collects_images_and_references(self, docs_tree: Path) -> None:
        result = OrphanScanner(docs_tree).scan()

        assert len(result.images) == 5
        assert result.referenced == {
            docs_tree / "images" / "logo.png",
            docs_tree / "images" / "diagram.svg",
            docs_tree / "guide" / "shot.png",
        }
        assert result.markdown_files == 2
        assert result.unreadable == ()
        assert result.root == docs_tree

    def test_idempotent(self, docs_tree: Path) -> None:
        """Scanning twice without changes yields identical orphans."""
        scanner = OrphanScanner(docs_tree)

        assert scanner.scan().orphans == scanner.scan().orphans

    def test_orphans_sorted(self, root: Path) -> None:
        for name in ("c.png", "a.png", "b.png"):
            (root / name).write_bytes(b"")

        result = OrphanScanner(root).scan()

        assert [p.name for p in result.orphans] == ["a.png", "b.png", "c.png"]

    def test_reference_protects_image(self, root: Path) -> None:
        (root / "images").mkdir()
        (root / "images" / "a.png").write_bytes(b"")
        (root / "index.md").write_text("![x](images/a.png)\n")

        result = OrphanScanner(root).scan()

        assert result.orphans == ()
        assert not result.has_orphans

    def test_unreferenced_stays_orphaned(self, root: Path) -> None:
        (root / "images").mkdir()
        (root / "images" / "b.png").write_bytes(b"")

        result = OrphanScanner(root).scan()

        assert result.orphans == (root / "images" / "b.png",)

    def test_url_reference_protects_nothing(self, root: Path) -> None:
        (root / "a.png").write_bytes(b"")
        (root / "index.md").write_text("![x](https://example.com/a.png)\n")

        result = OrphanScanner(root).scan()

        assert result.orphans == (root / "a.png",)

    def test_markdown_extension_case_insensitive(self, root: Path) -> None:
        (root / "a.png").write_bytes(b"")
        (root / "NOTES.Markdown").write_text("![x](a.png)\n")

        result = OrphanScanner(root).scan()

        assert result.orphans == ()
        assert result.markdown_files == 1

    def test_custom_extensions(self, root: Path) -> None:
        """Only files with configured extensions are candidates."""
        (root / "a.png").write_bytes(b"")
        (root / "b.tiff").write_bytes(b"")

        result = OrphanScanner(root, extensions=("tiff",)).scan()

        assert result.orphans == (root / "b.tiff",)

    def test_markdown_extension_in_image_set_still_read(self, root: Path) -> None:
        """Markdown files listed as image extensions are still parsed for references."""
        (root / "a.png").write_bytes(b"")
        (root / "index.md").write_text("![x](a.png)\n")

        result = OrphanScanner(root, extensions=("png", "md")).scan()

        assert result.markdown_files == 1
        assert root / "a.png" in result.referenced
        assert result.orphans == (root / "index.md",)

    def test_reference_outside_root_protects_nothing(self, tmp_path: Path, root: Path) -> None:
        (tmp_path / "pic.png").write_bytes(b"")
        (root / "pic.png").write_bytes(b"")
        (root / "index.md").write_text("![x](../pic.png)\n")

        result = OrphanScanner(root).scan()

        assert result.orphans == (root / "pic.png",)

    def test_reference_from_outside_markdown_ignored(self, tmp_path: Path, root: Path) -> None:
        """Markdown files outside the scan root are never read."""
        (root / "a.png").write_bytes(b"")
        (tmp_path / "outside.md").write_text("![x](docs/a.png)\n")

        result = OrphanScanner(root).scan()

        assert result.orphans == (root / "a.png",)

    def test_symlinks_not_followed(self, tmp_path: Path, root: Path) -> None:
        """Symlinked files and directories are not scanned."""
        external = tmp_path / "external"
        external.mkdir()
        (external / "ext.png").write_bytes(b"")
        (root / "linked").symlink_to(external, target_is_directory=True)
        (root / "real.png").write_bytes(b"")
        (root / "alias.png").symlink_to(root / "real.png")

        result = OrphanScanner(root).scan()

        assert result.images == {root / "real.png"}

    def test_symlink_reference_protects_target(self, root: Path) -> None:
        (root / "real.png").write_bytes(b"")
        (root / "alias.png").symlink_to(root / "real.png")
        (root / "index.md").write_text("![x](alias.png)\n")

        result = OrphanScanner(root).scan()

        assert result.orphans == ()

    def test_unreadable_markdown_skipped(self, root: Path) -> None:
        """A markdown file that cannot be decoded is skipped, not fatal."""
        (root / "a.png").write_bytes(b"")
        (root / "b.png").write_bytes(b"")
        (root / "good.md").write_text("![x](a.png)\n")
        (root / "bad.md").write_bytes(b"\xff\xfe![x](b.png)")

        result = OrphanScanner(root).scan()

        assert result.orphans == (root / "b.png",)
        assert result.unreadable == (root / "bad.md",)

    @pytest.mark.skipif(
        hasattr(os, "geteuid") and os.geteuid() == 0,
        reason="root ignores directory permissions",
    )
    def test_unreadable_directory_skipped(self, root: Path) -> None:
        """Permission-denied subtrees are skipped and the scan continues."""
        locked = root / "locked"
        locked.mkdir()
        (locked / "hidden.png").write_bytes(b"")
        (root / "visible.png").write_bytes(b"")
        locked.chmod(0o000)
        try:
            result = OrphanScanner(root).scan()
        finally:
            locked.chmod(0o755)

        assert result.orphans == (root / "visible.png",)

    def test_empty_directory(self, root: Path) -> None:
        result = OrphanScanner(root).scan()

        assert result.orphans == ()
        assert result.images == frozenset()
        assert result.markdown_files == 0
