"""Tests for the command-line entry point (indentkit.cli).

Covers:
- scaffold (dry run and live)
- tokens (default and symbols classifiers)
- symbols (lookup table, import statements, unknown names)
- Error exits for missing files and bad indentation
- Config overrides from flags and the environment
"""

from __future__ import annotations

import argparse
from pathlib import Path
from unittest.mock import patch

import pytest

from indentkit.cli import _apply_overrides, main
from indentkit.config import Config


pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "INDENTKIT_SYMBOLS_PATH",
        "INDENTKIT_CHECK_FILES",
        "INDENTKIT_DEBUG",
        "INDENTKIT_CLEAR",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def outline_file(tmp_path: Path, scaffold_outline: str) -> Path:
    path = tmp_path / "outline.txt"
    path.write_text(scaffold_outline, encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# scaffold
# ---------------------------------------------------------------------------


class TestScaffoldCommand:
    def test_dry_run(self, tmp_path: Path, outline_file: Path, capsys):
        root = tmp_path / "out"
        assert main(["scaffold", str(outline_file), str(root), "--dry-run"]) == 0
        assert not root.exists()
        out = capsys.readouterr().out
        assert "mkdir" in out
        assert "file.txt" in out

    def test_live(self, tmp_path: Path, outline_file: Path, capsys):
        root = tmp_path / "out"
        assert main(["scaffold", str(outline_file), str(root)]) == 0
        assert (root / "src" / "file.txt").read_text(encoding="utf-8") == "hello\nworld"
        assert "Built" in capsys.readouterr().out

    def test_clear_flag(self, tmp_path: Path, outline_file: Path):
        root = tmp_path / "out"
        root.mkdir()
        (root / "stale.txt").write_text("x", encoding="utf-8")
        assert main(["scaffold", str(outline_file), str(root), "--clear"]) == 0
        assert not (root / "stale.txt").exists()
        assert (root / "other.txt").exists()

    def test_missing_outline(self, tmp_path: Path, capsys):
        assert main(["scaffold", str(tmp_path / "nope.txt"), str(tmp_path / "out")]) == 1
        assert "File not found" in capsys.readouterr().out

    def test_bad_indentation(self, tmp_path: Path, capsys):
        outline = tmp_path / "bad.txt"
        outline.write_text("src/\n  a.txt\n   b.txt\n", encoding="utf-8")
        root = tmp_path / "out"
        assert main(["scaffold", str(outline), str(root)]) == 1
        assert not root.exists()
        assert "Error" in capsys.readouterr().out


# ---------------------------------------------------------------------------
# tokens
# ---------------------------------------------------------------------------


class TestTokensCommand:
    def test_default_classifier(self, outline_file: Path, capsys):
        assert main(["tokens", str(outline_file)]) == 0
        out = capsys.readouterr().out
        assert "indent" in out
        assert "hello" in out

    def test_symbols_classifier(self, project_root: Path, capsys):
        assert main(["tokens", "src/.symbols", "--symbols"]) == 0
        out = capsys.readouterr().out
        assert "lib" in out
        assert "isFile" in out

    def test_symbols_classifier_rejects_deep_nesting(self, tmp_path: Path):
        path = tmp_path / "deep.symbols"
        path.write_text("a.ts\n\tx\n\t\ty\n", encoding="utf-8")
        assert main(["tokens", str(path), "--symbols"]) == 1


# ---------------------------------------------------------------------------
# symbols
# ---------------------------------------------------------------------------


class TestSymbolsCommand:
    def test_lookup(self, project_root: Path, capsys):
        assert main(["symbols", "isFile", "pad"]) == 0
        out = capsys.readouterr().out
        assert "src/lib/fs.ts" in out
        assert "src/lib/str.ts" in out

    def test_unknown_symbol(self, project_root: Path, capsys):
        assert main(["symbols", "isFile", "nope"]) == 1
        assert "Unknown symbols: nope" in capsys.readouterr().out

    def test_imports(self, project_root: Path, capsys):
        assert main(["symbols", "isFile", "pad", "isDir", "--imports"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            "import {isFile, isDir} from './src/lib/fs.ts';",
            "import {pad} from './src/lib/str.ts';",
        ]

    def test_explicit_symbols_file(self, tmp_path: Path, capsys):
        path = tmp_path / "other.symbols"
        path.write_text("fs\n\treadFile\n", encoding="utf-8")
        assert main(["symbols", "readFile", "--symbols-file", str(path), "--imports"]) == 0
        assert "import {readFile} from 'fs';" in capsys.readouterr().out

    def test_missing_symbols_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys):
        monkeypatch.chdir(tmp_path)
        assert main(["symbols", "isFile"]) == 1
        assert "Symbols file not found" in capsys.readouterr().out

    def test_debug_traces_loaded_symbols(self, project_root: Path):
        with patch("indentkit.symbols.loader.print_debug") as mock_debug:
            assert main(["--debug", "symbols", "isFile", "--imports"]) == 0
        messages = [call.args[0] for call in mock_debug.call_args_list]
        assert "ADD isFile from src/lib/fs.ts" in messages
        assert len(messages) == 4

    def test_no_symbol_trace_without_debug(self, project_root: Path):
        with patch("indentkit.symbols.loader.print_debug") as mock_debug:
            assert main(["symbols", "isFile", "--imports"]) == 0
        mock_debug.assert_not_called()

    def test_check_files(self, project_root: Path, capsys):
        (project_root / "src" / "lib" / "fs.ts").unlink()
        assert main(["symbols", "pad", "--check-files"]) == 1
        assert "No such file" in capsys.readouterr().out


# ---------------------------------------------------------------------------
# Overrides
# ---------------------------------------------------------------------------


class TestOverrides:
    def test_unset_flags_keep_config(self):
        args = argparse.Namespace(debug=None, clear=None)
        cfg = Config(debug=True, clear=True)
        assert _apply_overrides(cfg, args) == cfg

    def test_flags_override_config(self):
        args = argparse.Namespace(
            debug=True, check_files=True, symbols_file=Path("x/.symbols")
        )
        cfg = _apply_overrides(Config(), args)
        assert cfg.debug is True
        assert cfg.check_files is True
        assert cfg.symbols_path == Path("x/.symbols")

    def test_environment_read_by_main(
        self, tmp_path: Path, outline_file: Path, monkeypatch: pytest.MonkeyPatch
    ):
        root = tmp_path / "out"
        root.mkdir()
        (root / "stale.txt").write_text("x", encoding="utf-8")
        monkeypatch.setenv("INDENTKIT_CLEAR", "1")
        assert main(["scaffold", str(outline_file), str(root)]) == 0
        assert not (root / "stale.txt").exists()
