"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest


@pytest.fixture
def root(tmp_path: Path) -> Path:
    """Canonical scan root inside the pytest temporary directory."""
    scan_root = tmp_path / "docs"
    scan_root.mkdir()
    return scan_root.resolve()


@pytest.fixture
def docs_tree(root: Path) -> Path:
    """A small documentation tree with referenced and orphaned images.

    Layout::

        docs/
            README.md          -> ![logo](images/logo.png)
            guide/intro.md     -> ../images/diagram.svg, <img src="shot.png">
            guide/shot.png     (referenced via HTML)
            images/logo.png    (referenced)
            images/diagram.svg (referenced)
            images/unused.png  (orphan)
            old/stale.JPG      (orphan, uppercase extension)
            notes.txt          (ignored)
    """
    (root / "images").mkdir()
    (root / "guide").mkdir()
    (root / "old").mkdir()

    for name in ("images/logo.png", "images/diagram.svg", "images/unused.png"):
        (root / name).write_bytes(b"\x89PNG")
    (root / "guide" / "shot.png").write_bytes(b"\x89PNG")
    (root / "old" / "stale.JPG").write_bytes(b"\xff\xd8")
    (root / "notes.txt").write_text("![not markdown](images/unused.png)\n")

    (root / "README.md").write_text("# Docs\n\n![logo](images/logo.png)\n")
    (root / "guide" / "intro.md").write_text(
        "Intro\n\n"
        '![diagram](../images/diagram.svg "Architecture")\n\n'
        '<p><img alt="screenshot" src="shot.png" width="300"></p>\n'
    )
    return root


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep tests away from the real ~/.config/mdprune directory."""
    config_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home
