"""Exceptions raised by the project store and template renderer."""

from __future__ import annotations

from pathlib import Path


class ProjectFileError(Exception):
    """Base class for failures touching a project artifact."""

    def __init__(self, message: str, path: str | Path | None = None):
        self.path = Path(path) if path is not None else None
        super().__init__(message)


class ReadError(ProjectFileError):
    """A file or directory is missing or unreadable."""


class ParseError(ProjectFileError):
    """A configuration document is not valid JSON."""


class WriteError(ProjectFileError):
    """Writing, creating or removing a file failed."""


class TemplateError(ProjectFileError):
    """The template resource is missing, malformed, or failed to render."""
