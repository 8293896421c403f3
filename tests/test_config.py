"""Unit tests for Settings (ora2pg_projects.config).

Tests cover:
- Defaults and the packaged template resource
- Derived project paths
- Project name checks
- Immutability
- save/load and from_env
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from ora2pg_projects.config import Settings


class TestSettingsDefaults:
    @pytest.mark.unit
    def test_default_directories(self):
        settings = Settings()
        assert settings.project_directory == Path("./projects")
        assert settings.resource_directory.name == "resources"

    @pytest.mark.unit
    def test_default_file_names(self):
        settings = Settings()
        assert settings.template_name == "ora2pg-config-file.j2"
        assert settings.config_json_name == "ora2pg-conf.json"
        assert settings.config_file_name == "ora2pg.conf"

    @pytest.mark.unit
    def test_packaged_template_exists(self):
        assert Settings().template_path.is_file()

    @pytest.mark.unit
    def test_string_paths_are_coerced(self):
        settings = Settings(project_directory="/srv/projects")
        assert settings.project_directory == Path("/srv/projects")

    @pytest.mark.unit
    def test_empty_template_name_rejected(self):
        with pytest.raises(ValidationError):
            Settings(template_name="")

    @pytest.mark.unit
    def test_settings_are_frozen(self):
        settings = Settings()
        with pytest.raises(ValidationError):
            settings.project_directory = Path("/elsewhere")


class TestDerivedPaths:
    @pytest.mark.unit
    def test_project_path(self, tmp_path: Path):
        settings = Settings(project_directory=tmp_path)
        assert settings.project_path("hr") == tmp_path / "hr"

    @pytest.mark.unit
    def test_config_dir(self, tmp_path: Path):
        settings = Settings(project_directory=tmp_path)
        assert settings.config_dir("hr") == tmp_path / "hr" / "config"

    @pytest.mark.unit
    def test_config_json_path(self, tmp_path: Path):
        settings = Settings(project_directory=tmp_path)
        assert settings.config_json_path("hr") == tmp_path / "hr" / "config" / "ora2pg-conf.json"

    @pytest.mark.unit
    def test_config_file_path(self, tmp_path: Path):
        settings = Settings(project_directory=tmp_path)
        assert settings.config_file_path("hr") == tmp_path / "hr" / "config" / "ora2pg.conf"

    @pytest.mark.unit
    def test_template_path(self, tmp_path: Path):
        settings = Settings(resource_directory=tmp_path, template_name="custom.j2")
        assert settings.template_path == tmp_path / "custom.j2"

    @pytest.mark.unit
    @pytest.mark.parametrize("name", ["", ".", "..", "a/b", "../etc", "a\\b"])
    def test_invalid_project_names(self, name: str):
        with pytest.raises(ValueError, match="Invalid project name"):
            Settings().config_dir(name)


class TestSerialisation:
    @pytest.mark.unit
    def test_save_and_load_roundtrip(self, tmp_path: Path):
        original = Settings(project_directory=tmp_path / "p", template_name="x.j2")
        target = original.save(tmp_path / "nested" / "settings.json")
        assert target.exists()
        assert Settings.load(target) == original

    @pytest.mark.unit
    def test_from_env_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings.from_env()
        assert settings == Settings()

    @pytest.mark.unit
    def test_from_env_overrides(self, tmp_path: Path):
        env = {
            "ORA2PG_PROJECT_DIRECTORY": str(tmp_path / "projects"),
            "ORA2PG_RESOURCE_DIRECTORY": str(tmp_path / "resources"),
            "ORA2PG_TEMPLATE_NAME": "site.j2",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings.from_env()
        assert settings.project_directory == tmp_path / "projects"
        assert settings.resource_directory == tmp_path / "resources"
        assert settings.template_name == "site.j2"
