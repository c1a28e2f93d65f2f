"""Unit tests for Config and related Pydantic models (nestforge.config).

Tests cover:
- BinaryConfig defaults
- Config defaults and validation
- Config.load from JSON
- Config.from_env, including a config file overridden by variables
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from nestforge.config import BinaryConfig, Config


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------


class TestConfigDefaults:
    @pytest.mark.unit
    def test_default_values(self):
        config = Config()
        assert config.default_project_name == "nest-app"
        assert config.default_collection == "@nestjs/schematics"
        assert config.default_language == "ts"
        assert config.command_timeout == 600

    @pytest.mark.unit
    def test_default_binaries(self):
        binaries = BinaryConfig()
        assert binaries.schematics == "schematics"
        assert binaries.git == "git"
        assert binaries.npx == "npx"

    @pytest.mark.unit
    def test_timeout_below_minimum_rejected(self):
        with pytest.raises(ValidationError):
            Config(command_timeout=0)

    @pytest.mark.unit
    def test_empty_project_name_rejected(self):
        with pytest.raises(ValidationError):
            Config(default_project_name="")


# ---------------------------------------------------------------------------
# load
# ---------------------------------------------------------------------------


class TestConfigLoad:
    @pytest.mark.unit
    def test_load_partial_file(self, tmp_path: Path):
        path = tmp_path / "nestforge.json"
        path.write_text(
            json.dumps({"command_timeout": 120, "binaries": {"git": "/usr/bin/git"}}),
            encoding="utf-8",
        )
        config = Config.load(path)
        assert config.command_timeout == 120
        assert config.binaries.git == "/usr/bin/git"
        assert config.binaries.npx == "npx"

    @pytest.mark.unit
    def test_load_invalid_file(self, tmp_path: Path):
        path = tmp_path / "nestforge.json"
        path.write_text(json.dumps({"command_timeout": -5}), encoding="utf-8")
        with pytest.raises(ValidationError):
            Config.load(path)

    @pytest.mark.unit
    def test_load_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            Config.load(tmp_path / "missing.json")


# ---------------------------------------------------------------------------
# from_env
# ---------------------------------------------------------------------------


class TestConfigFromEnv:
    @pytest.mark.unit
    def test_defaults_when_no_env(self):
        with patch.dict(os.environ, {}, clear=True):
            config = Config.from_env()
        assert config == Config()

    @pytest.mark.unit
    def test_values_from_env(self):
        env = {
            "NESTFORGE_PROJECT_NAME": "my-api",
            "NESTFORGE_COLLECTION": "@nestjs/schematics",
            "NESTFORGE_LANGUAGE": "js",
            "NESTFORGE_COMMAND_TIMEOUT": "90",
        }
        with patch.dict(os.environ, env, clear=True):
            config = Config.from_env()
        assert config.default_project_name == "my-api"
        assert config.default_language == "js"
        assert config.command_timeout == 90

    @pytest.mark.unit
    def test_binaries_from_env(self):
        env = {
            "NESTFORGE_SCHEMATICS_BIN": "/opt/schematics",
            "NESTFORGE_GIT_BIN": "/opt/git",
            "NESTFORGE_NPX_BIN": "/opt/npx",
        }
        with patch.dict(os.environ, env, clear=True):
            config = Config.from_env()
        assert config.binaries == BinaryConfig(
            schematics="/opt/schematics", git="/opt/git", npx="/opt/npx"
        )

    @pytest.mark.unit
    def test_env_overrides_config_file(self, tmp_path: Path):
        path = tmp_path / "nestforge.json"
        path.write_text(
            json.dumps({"default_language": "js", "command_timeout": 30}),
            encoding="utf-8",
        )
        env = {"NESTFORGE_CONFIG": str(path), "NESTFORGE_COMMAND_TIMEOUT": "45"}
        with patch.dict(os.environ, env, clear=True):
            config = Config.from_env()
        assert config.default_language == "js"
        assert config.command_timeout == 45

    @pytest.mark.unit
    def test_non_numeric_timeout_rejected(self):
        with patch.dict(os.environ, {"NESTFORGE_COMMAND_TIMEOUT": "soon"}, clear=True):
            with pytest.raises(ValueError):
                Config.from_env()
