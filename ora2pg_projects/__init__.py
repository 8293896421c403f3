"""ora2pg project store -- per-project configuration artifacts.

This package reads and writes each project's ``ora2pg-conf.json`` document,
renders it into an ``ora2pg.conf`` file through a Jinja2 template, and manages
the project directories that hold them.

Quick usage::

    from ora2pg_projects import ProjectFiles, Settings

    files = ProjectFiles(Settings(project_directory="/srv/ora2pg/projects"))
    await files.create_project_directory("hr")
    await files.save_config_json("hr", config_object)
    status = await files.create_config_file("hr")
"""

from ora2pg_projects.config import Settings
from ora2pg_projects.errors import (
    ParseError,
    ProjectFileError,
    ReadError,
    TemplateError,
    WriteError,
)
from ora2pg_projects.file_utils import ProjectFiles
from ora2pg_projects.models import CreateStatus, OperationResult, Outcome
from ora2pg_projects.schema import CANONICAL_KEYS, CONFIG_SECTIONS, key_mismatches, valid_keys
from ora2pg_projects.templates import TemplateRenderer

__all__ = [
    "CANONICAL_KEYS",
    "CONFIG_SECTIONS",
    "CreateStatus",
    "OperationResult",
    "Outcome",
    "ParseError",
    "ProjectFileError",
    "ProjectFiles",
    "ReadError",
    "Settings",
    "TemplateError",
    "TemplateRenderer",
    "WriteError",
    "key_mismatches",
    "valid_keys",
]
