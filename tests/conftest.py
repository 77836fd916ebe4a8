"""Shared pytest fixtures for the indentkit test suite.

Provides reusable fixtures for:
- Sample scaffold outlines and symbols documents
- Fresh level trackers
- A symbols file laid out under a temporary project root
"""

from __future__ import annotations

from pathlib import Path

import pytest

from indentkit.config import Config
from indentkit.parser.levels import LevelTracker


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------

@pytest.fixture
def scaffold_outline() -> str:
    """Outline with a directory, a file with contents and an empty file."""
    return "src/\n\tfile.txt\n\t\thello\n\t\tworld\nother.txt\n"


@pytest.fixture
def symbols_text() -> str:
    """Two libraries with two symbols each."""
    return "src/lib/fs.ts\n\tisFile isDir\nsrc/lib/str.ts\n\tpad trim\n"


# ---------------------------------------------------------------------------
# Parser state
# ---------------------------------------------------------------------------

@pytest.fixture
def tracker() -> LevelTracker:
    """A level tracker with no unit established."""
    return LevelTracker()


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def project_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary project directory that is also the working directory.

    Contains ``src/.symbols`` plus the library files it names, so loaders
    can be run with ``check_files=True``.
    """
    root = tmp_path / "project"
    lib_dir = root / "src" / "lib"
    lib_dir.mkdir(parents=True)
    (lib_dir / "fs.ts").write_text("export const isFile = 1\n", encoding="utf-8")
    (lib_dir / "str.ts").write_text("export const pad = 1\n", encoding="utf-8")
    (root / "src" / ".symbols").write_text(
        "src/lib/fs.ts\n\tisFile isDir\nsrc/lib/str.ts\n\tpad trim\n",
        encoding="utf-8",
    )
    monkeypatch.chdir(root)
    yield root


@pytest.fixture
def config(project_root: Path) -> Config:
    """Default configuration rooted at ``project_root``."""
    return Config()
