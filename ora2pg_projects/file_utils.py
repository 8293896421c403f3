"""Project directory and configuration file management.

``ProjectFiles`` owns the on-disk layout below the project root::

    {project_directory}/{project}/                   working directory
    {project_directory}/{project}/config/ora2pg-conf.json
    {project_directory}/{project}/config/ora2pg.conf

Every operation is a coroutine.  Blocking filesystem calls are pushed to a
worker thread with ``asyncio.to_thread`` so the event loop stays responsive.
There is no locking: concurrent writers to the same project race and the last
write wins.
"""

from __future__ import annotations

import asyncio
import json
import os
import shutil
from pathlib import Path
from typing import Any

from .config import Settings
from .errors import ParseError, ReadError, WriteError
from .models import CreateStatus, OperationResult, Outcome
from .templates import TemplateRenderer
from .utils import print_error


class ProjectFiles:
    """Reads, writes and renders the configuration artifacts of projects."""

    def __init__(self, settings: Settings, renderer: TemplateRenderer | None = None) -> None:
        self.settings = settings
        self.renderer = renderer or TemplateRenderer(
            settings.template_path.parent, settings.template_path.name
        )

    # -- JSON configuration document ---------------------------------------

    async def get_config_object(self, project: str) -> dict[str, Any]:
        """Read and parse the project's ``ora2pg-conf.json``.

        Section order is preserved as it appears in the file.

        Raises:
            ReadError: If the file is missing or unreadable.
            ParseError: If the file is not valid JSON or its top level is not
                an object.
        """
        path = self.settings.config_json_path(project)
        try:
            raw = await asyncio.to_thread(path.read_text, "utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ReadError(f"Cannot read {path}: {exc}", path) from exc
        try:
            config_object = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ParseError(f"Invalid JSON in {path}: {exc}", path) from exc
        if not isinstance(config_object, dict):
            raise ParseError(
                f"Expected a JSON object in {path}, got {type(config_object).__name__}",
                path,
            )
        return config_object

    async def save_config_json(self, project: str, config_object: dict[str, Any]) -> None:
        """Serialise *config_object* and overwrite the project's JSON document.

        The ``config/`` directory is not created here.

        Raises:
            WriteError: On any I/O failure.
            TypeError: If *config_object* is not JSON serialisable.
        """
        path = self.settings.config_json_path(project)
        content = json.dumps(config_object, indent=2, ensure_ascii=False)
        try:
            data = content.encode("utf-8")
        except UnicodeError as exc:
            raise WriteError(f"Cannot encode {path}: {exc}", path) from exc
        try:
            await asyncio.to_thread(path.write_bytes, data)
        except OSError as exc:
            raise WriteError(f"Cannot write {path}: {exc}", path) from exc

    # -- Rendered ora2pg.conf ----------------------------------------------

    async def save_config_file(self, project: str, config_object: dict[str, Any]) -> None:
        """Render *config_object* and overwrite the project's ``ora2pg.conf``.

        Raises:
            TemplateError: If the template is missing or malformed.
            WriteError: If the output cannot be written.
        """
        await self.renderer.render_to_file(
            config_object, self.settings.config_file_path(project)
        )

    async def create_config_file(self, project: str) -> CreateStatus:
        """Render ``ora2pg.conf`` from the JSON document, at most once.

        Returns ``NOT_FOUND`` when the project has no ``config/`` directory and
        ``CONFLICT`` when the rendered file already exists; neither case
        touches the filesystem.  Read, parse, template and write failures
        while creating propagate as exceptions.
        """
        if not await asyncio.to_thread(self.settings.config_dir(project).is_dir):
            return CreateStatus.NOT_FOUND
        if await self.file_exists(self.settings.config_file_path(project)):
            return CreateStatus.CONFLICT

        config_object = await self.get_config_object(project)
        await self.save_config_file(project, config_object)
        return CreateStatus.CREATED

    async def read_config_file(self, project: str) -> str:
        """Return the text of the project's rendered ``ora2pg.conf``.

        Raises:
            ReadError: If the file does not exist or cannot be read.
        """
        path = self.settings.config_file_path(project)
        try:
            return await asyncio.to_thread(path.read_text, "utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ReadError(f"Cannot read {path}: {exc}", path) from exc

    async def delete_config_file(self, project: str) -> OperationResult:
        """Remove the project's ``ora2pg.conf``.

        A missing file counts as already done.  Other failures are reported
        on the error console and returned, never raised.
        """
        path = self.settings.config_file_path(project)
        try:
            await asyncio.to_thread(path.unlink)
        except FileNotFoundError:
            return OperationResult(Outcome.ALREADY_DONE, path)
        except OSError as exc:
            return _failed(path, f"Cannot delete {path}: {exc}")
        return OperationResult(Outcome.SUCCESS, path)

    # -- Project directories -----------------------------------------------

    async def file_exists(self, path: str | Path) -> bool:
        """Return ``True`` if *path* exists; any access failure reads as ``False``."""
        try:
            return await asyncio.to_thread(os.path.exists, path)
        except (OSError, ValueError, TypeError):
            return False

    async def create_project_directory(self, project: str) -> OperationResult:
        """Create ``{project}/config`` (and parents) under the project root.

        An existing directory counts as already done.  Other failures are
        reported on the error console and returned, never raised.
        """
        path = self.settings.config_dir(project)
        try:
            await asyncio.to_thread(path.mkdir, parents=True, exist_ok=False)
        except FileExistsError as exc:
            if await asyncio.to_thread(path.is_dir):
                return OperationResult(Outcome.ALREADY_DONE, path)
            return _failed(path, f"Cannot create {path}: {exc}")
        except OSError as exc:
            return _failed(path, f"Cannot create {path}: {exc}")
        return OperationResult(Outcome.SUCCESS, path)

    async def delete_project_directory(self, project: str) -> OperationResult:
        """Remove a project's working directory and everything in it.

        A missing directory counts as already done.  Other failures are
        reported on the error console and returned, never raised.
        """
        path = self.settings.project_path(project)
        if not await asyncio.to_thread(path.is_dir):
            if await self.file_exists(path):
                return _failed(path, f"Cannot delete {path}: not a directory")
            return OperationResult(Outcome.ALREADY_DONE, path)
        try:
            await asyncio.to_thread(shutil.rmtree, path)
        except OSError as exc:
            return _failed(path, f"Cannot delete {path}: {exc}")
        return OperationResult(Outcome.SUCCESS, path)

    async def list_project_directories(self) -> list[str]:
        """Names of the directories directly under the project root.

        Raises:
            ReadError: If the project root cannot be listed.
        """
        return await self._list_entries(self.settings.project_directory, dirs=True)

    async def list_project_files(self, project: str) -> list[str]:
        """Names of the regular files directly under a project's directory.

        Raises:
            ReadError: If the project directory cannot be listed.
        """
        return await self._list_entries(self.settings.project_path(project), dirs=False)

    async def _list_entries(self, directory: Path, *, dirs: bool) -> list[str]:
        def _scan() -> list[str]:
            with os.scandir(directory) as entries:
                return sorted(
                    entry.name
                    for entry in entries
                    if (entry.is_dir() if dirs else entry.is_file())
                )

        try:
            return await asyncio.to_thread(_scan)
        except OSError as exc:
            raise ReadError(f"Cannot list {directory}: {exc}", directory) from exc


def _failed(path: Path, reason: str) -> OperationResult:
    print_error(reason)
    return OperationResult(Outcome.FAILED, path, reason)
