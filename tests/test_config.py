"""Tests for settings loading."""

from __future__ import annotations

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from third_party_notice.config import CONFIG_PATH_ENV_VAR, ConfigError, Settings, load_settings


class TestLoadSettings:
    def test_defaults_without_path(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = load_settings()

        assert settings == Settings()
        assert settings.license_names == ("LICENSE", "LICENSE.md", "LICENSE.txt")
        assert settings.tasks_dir == "Tasks"
        assert settings.output_name == "ThirdPartyNotice.txt"

    def test_json_file(self, tmp_path: Path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"licenseNames": ["COPYING"], "outputName": "NOTICE.txt"}))

        settings = load_settings(path)

        assert settings.license_names == ("COPYING",)
        assert settings.output_name == "NOTICE.txt"
        assert settings.tasks_dir == "Tasks"

    def test_yaml_file(self, tmp_path: Path):
        path = tmp_path / "settings.yaml"
        path.write_text("tasksDir: Extensions\nlicenseNames:\n  - LICENSE\n  - LICENCE\n")

        settings = load_settings(path)

        assert settings.tasks_dir == "Extensions"
        assert settings.license_names == ("LICENSE", "LICENCE")

    def test_empty_yaml_uses_defaults(self, tmp_path: Path):
        path = tmp_path / "settings.yml"
        path.write_text("")

        assert load_settings(path) == Settings()

    def test_env_var(self, tmp_path: Path):
        path = tmp_path / "settings.json"
        path.write_text('{"tasksDir": "FromEnv"}')

        with patch.dict(os.environ, {CONFIG_PATH_ENV_VAR: str(path)}):
            assert load_settings().tasks_dir == "FromEnv"

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            load_settings(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "settings.json"
        path.write_text("{")

        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_settings(path)

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "settings.yaml"
        path.write_text("licenseNames: [unclosed\n")

        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_settings(path)

    @pytest.mark.parametrize(
        "document",
        [
            {"licenseNames": []},
            {"licenseNames": ["LICENSE", "LICENSE"]},
            {"tasksDir": ""},
            {"outputName": 3},
            {"unknown": True},
            ["not", "an", "object"],
        ],
    )
    def test_schema_violations(self, tmp_path: Path, document):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps(document))

        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_settings(path)
