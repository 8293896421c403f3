"""Command-line interface for managing ora2pg projects."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from .config import Settings
from .errors import ProjectFileError
from .file_utils import ProjectFiles
from .models import CreateStatus
from .schema import key_mismatches
from .utils import console, print_error, print_success, print_summary_table, print_warning


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ora2pg-projects",
        description="Manage ora2pg project directories and configuration files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  ora2pg-projects init hr\n"
            "  ora2pg-projects validate hr\n"
            "  ora2pg-projects render hr --project-dir /srv/ora2pg/projects\n"
        ),
    )
    parser.add_argument(
        "--project-dir",
        default=None,
        help="Project root (default: $ORA2PG_PROJECT_DIRECTORY or ./projects)",
    )
    parser.add_argument(
        "--resource-dir",
        default=None,
        help="Directory holding the ora2pg.conf template",
    )

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("list", help="List project directories")
    for name, help_text in (
        ("init", "Create a project's config directory"),
        ("files", "List the files in a project directory"),
        ("validate", "Check the section order of a project's ora2pg-conf.json"),
        ("render", "Create ora2pg.conf from ora2pg-conf.json"),
        ("delete-conf", "Delete a project's ora2pg.conf"),
        ("delete", "Delete a project directory"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("project", help="Project name")
    return parser


def _settings_from_args(args: argparse.Namespace) -> Settings:
    settings = Settings.from_env()
    overrides: dict[str, Path] = {}
    if args.project_dir:
        overrides["project_directory"] = Path(args.project_dir)
    if args.resource_dir:
        overrides["resource_directory"] = Path(args.resource_dir)
    return settings.model_copy(update=overrides) if overrides else settings


async def run(args: argparse.Namespace) -> int:
    """Execute the parsed command and return the process exit code."""
    files = ProjectFiles(_settings_from_args(args))

    if args.command == "list":
        for name in await files.list_project_directories():
            console.print(name)
        return 0

    if args.command == "files":
        for name in await files.list_project_files(args.project):
            console.print(name)
        return 0

    if args.command == "init":
        result = await files.create_project_directory(args.project)
        if result.ok:
            print_success(f"{args.project}: {result.outcome.value}")
        return 0 if result.ok else 1

    if args.command == "validate":
        problems = key_mismatches(await files.get_config_object(args.project))
        if problems:
            for problem in problems:
                print_warning(problem)
            return 1
        print_success(f"{args.project}: configuration sections are valid")
        return 0

    if args.command == "render":
        status = await files.create_config_file(args.project)
        if status is CreateStatus.CREATED:
            print_summary_table(
                {
                    "Project": args.project,
                    "Status": status.value,
                    "File": str(files.settings.config_file_path(args.project)),
                },
                title="ora2pg.conf",
            )
            return 0
        print_error(f"{args.project}: {status.value}")
        return 1

    if args.command == "delete-conf":
        result = await files.delete_config_file(args.project)
    else:
        result = await files.delete_project_directory(args.project)
    if result.ok:
        print_success(f"{args.project}: {result.outcome.value}")
    return 0 if result.ok else 1


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``ora2pg-projects``."""
    args = build_parser().parse_args(argv)
    try:
        code = asyncio.run(run(args))
    except (ProjectFileError, ValueError) as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)
    sys.exit(code)


if __name__ == "__main__":
    main()
