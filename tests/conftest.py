"""Shared pytest fixtures for the ora2pg project store test suite.

Provides reusable fixtures for:
- Temporary project roots and settings
- A ``ProjectFiles`` instance bound to the temporary root
- Sample configuration objects in canonical section order
- Projects pre-populated with a JSON configuration document
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from ora2pg_projects.config import Settings
from ora2pg_projects.file_utils import ProjectFiles
from ora2pg_projects.schema import CANONICAL_KEYS


# ---------------------------------------------------------------------------
# Paths & settings
# ---------------------------------------------------------------------------

@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Empty project root directory (auto-cleanup)."""
    root = tmp_path / "projects"
    root.mkdir()
    yield root


@pytest.fixture
def settings(project_root: Path) -> Settings:
    """Settings pointing at the temporary project root and packaged template."""
    return Settings(project_directory=project_root)


@pytest.fixture
def files(settings: Settings) -> ProjectFiles:
    return ProjectFiles(settings)


# ---------------------------------------------------------------------------
# Configuration objects
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_config() -> dict[str, Any]:
    """A configuration object with every section in canonical order.

    COMMON and INPUT carry real directives; INPUT uses the record-list form
    with one excluded directive.  Remaining sections are empty.
    """
    config: dict[str, Any] = {name: {} for name in CANONICAL_KEYS}
    config["COMMON"] = {
        "PROJECT_NAME": "hr",
        "DEBUG": False,
        "DISABLE_COMMENT": True,
    }
    config["INPUT"] = [
        {"name": "ORACLE_DSN", "value": "dbi:Oracle:host=db;sid=ORCL;port=1521", "include": True},
        {"name": "ORACLE_USER", "value": "system"},
        {"name": "ORACLE_PWD", "value": "secret", "include": False},
    ]
    config["EXPORT"] = {"TYPE": ["TABLE", "VIEW", "SEQUENCE"]}
    return config


@pytest.fixture
def configured_project(project_root: Path, sample_config: dict[str, Any]) -> str:
    """A project named ``hr`` with ``config/ora2pg-conf.json`` written."""
    config_dir = project_root / "hr" / "config"
    config_dir.mkdir(parents=True)
    (config_dir / "ora2pg-conf.json").write_text(json.dumps(sample_config), encoding="utf-8")
    return "hr"
