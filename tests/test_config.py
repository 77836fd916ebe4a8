"""Unit tests for Config (indentkit.config).

Tests cover:
- Config defaults and field validation
- save/load round trip
- from_env (paths, boolean flags)
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from indentkit.config import Config


# ---------------------------------------------------------------------------
# Defaults & validation
# ---------------------------------------------------------------------------


class TestConfigDefaults:
    @pytest.mark.unit
    def test_defaults(self):
        cfg = Config()
        assert cfg.symbols_path == Path("src/.symbols")
        assert cfg.check_files is False
        assert cfg.debug is False
        assert cfg.clear is False

    @pytest.mark.unit
    def test_symbols_path_coerced(self):
        assert Config(symbols_path="lib/.symbols").symbols_path == Path("lib/.symbols")

    @pytest.mark.unit
    def test_invalid_flag(self):
        with pytest.raises(ValidationError):
            Config(debug="maybe")


# ---------------------------------------------------------------------------
# Save / load
# ---------------------------------------------------------------------------


class TestConfigPersistence:
    @pytest.mark.unit
    def test_save_creates_parents(self, tmp_path: Path):
        target = tmp_path / "nested" / "config.json"
        written = Config(debug=True).save(target)
        assert written == target
        data = json.loads(target.read_text(encoding="utf-8"))
        assert data["debug"] is True
        assert set(data) == {"symbols_path", "check_files", "debug", "clear"}

    @pytest.mark.unit
    def test_round_trip(self, tmp_path: Path):
        cfg = Config(symbols_path=Path("lib/.symbols"), check_files=True, clear=True)
        loaded = Config.load(cfg.save(tmp_path / "config.json"))
        assert loaded == cfg


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------


class TestConfigFromEnv:
    @pytest.mark.unit
    def test_empty_environment(self):
        with patch.dict(os.environ, {}, clear=True):
            assert Config.from_env() == Config()

    @pytest.mark.unit
    def test_all_variables(self):
        env = {
            "INDENTKIT_SYMBOLS_PATH": "lib/.symbols",
            "INDENTKIT_CHECK_FILES": "yes",
            "INDENTKIT_DEBUG": "1",
            "INDENTKIT_CLEAR": "TRUE",
        }
        with patch.dict(os.environ, env, clear=True):
            cfg = Config.from_env()
        assert cfg.symbols_path == Path("lib/.symbols")
        assert cfg.check_files is True
        assert cfg.debug is True
        assert cfg.clear is True

    @pytest.mark.unit
    @pytest.mark.parametrize("raw", ["0", "false", "no", "off"])
    def test_false_flags(self, raw: str):
        with patch.dict(os.environ, {"INDENTKIT_DEBUG": raw}, clear=True):
            assert Config.from_env().debug is False

    @pytest.mark.unit
    def test_blank_flag_ignored(self):
        with patch.dict(os.environ, {"INDENTKIT_CLEAR": "  "}, clear=True):
            assert Config.from_env().clear is False

    @pytest.mark.unit
    def test_blank_symbols_path_ignored(self):
        with patch.dict(os.environ, {"INDENTKIT_SYMBOLS_PATH": ""}, clear=True):
            assert Config.from_env().symbols_path == Path("src/.symbols")
