"""ora2pg project settings.

Typed, process-wide path configuration for the project store. Settings use a
frozen Pydantic v2 model so they are validated once at startup and then
passed explicitly to ``ProjectFiles`` and ``TemplateRenderer``.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

_DEFAULT_RESOURCE_DIR = Path(__file__).parent / "resources"


class Settings(BaseModel):
    """Directory roots and file names used to locate project artifacts.

    ``project_directory`` holds one subdirectory per project;
    ``resource_directory`` holds the ``ora2pg.conf`` template.
    """

    model_config = ConfigDict(frozen=True)

    project_directory: Path = Field(default=Path("./projects"))
    resource_directory: Path = Field(default=_DEFAULT_RESOURCE_DIR)
    template_name: str = Field(default="ora2pg-config-file.j2", min_length=1)
    config_json_name: str = Field(default="ora2pg-conf.json", min_length=1)
    config_file_name: str = Field(default="ora2pg.conf", min_length=1)

    # ------------------------------------------------------------------
    # Derived paths
    # ------------------------------------------------------------------

    def project_path(self, project: str) -> Path:
        """Working directory of *project*.

        Raises:
            ValueError: If *project* is not a single directory name.
        """
        if project in ("", ".", "..") or "/" in project or "\\" in project:
            raise ValueError(f"Invalid project name: {project!r}")
        return self.project_directory / project

    def config_dir(self, project: str) -> Path:
        """The ``config/`` directory inside a project."""
        return self.project_path(project) / "config"

    def config_json_path(self, project: str) -> Path:
        """Path to the project's ``ora2pg-conf.json`` document."""
        return self.config_dir(project) / self.config_json_name

    def config_file_path(self, project: str) -> Path:
        """Path to the project's rendered ``ora2pg.conf``."""
        return self.config_dir(project) / self.config_file_name

    @property
    def template_path(self) -> Path:
        return self.resource_directory / self.template_name

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the settings to a JSON file and return the written path."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Settings":
        """Load previously-saved settings from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Settings":
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional):
            ORA2PG_PROJECT_DIRECTORY, ORA2PG_RESOURCE_DIRECTORY,
            ORA2PG_TEMPLATE_NAME.
        """
        kwargs: dict[str, object] = {}
        if os.environ.get("ORA2PG_PROJECT_DIRECTORY"):
            kwargs["project_directory"] = Path(os.environ["ORA2PG_PROJECT_DIRECTORY"])
        if os.environ.get("ORA2PG_RESOURCE_DIRECTORY"):
            kwargs["resource_directory"] = Path(os.environ["ORA2PG_RESOURCE_DIRECTORY"])
        if os.environ.get("ORA2PG_TEMPLATE_NAME"):
            kwargs["template_name"] = os.environ["ORA2PG_TEMPLATE_NAME"]
        return cls(**kwargs)
