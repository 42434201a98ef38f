"""Command-line entry point for ktscaffold.

Collects the target directory, project name and package (prompting for the
names when they are not given), validates them into a ``ProjectSpec`` and
runs the generator once.

Usage::

    python -m ktscaffold ~/work --name demo-app --package com.example
    python -m ktscaffold . --dry-run
"""

from __future__ import annotations

import argparse
import asyncio
import re
import sys
from pathlib import Path

from pydantic import ValidationError
from rich.markup import escape
from rich.prompt import Prompt

from ktscaffold.config import Config
from ktscaffold.scaffolder import FileSystemError, ProjectGenerator, ProjectSpec
from ktscaffold.scaffolder.models import PACKAGE_NAME_PATTERN, PROJECT_NAME_PATTERN
from ktscaffold.utils import (
    console,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
)

EXIT_IO_ERROR = 1
EXIT_INVALID_INPUT = 2
EXIT_CANCELLED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ktscaffold",
        description="Create a new Kotlin/Gradle project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  ktscaffold ~/work --name demo-app --package com.example\n"
            "  ktscaffold . --dry-run\n"
        ),
    )
    parser.add_argument(
        "target_dir",
        nargs="?",
        default=".",
        help="Existing directory the project folder is created in (default: .)",
    )
    parser.add_argument("--name", "-n", default=None, help="Project name")
    parser.add_argument("--package", "-p", default=None, help="Package, e.g. com.example")
    parser.add_argument(
        "--config",
        default=None,
        help="JSON config file (default: read KTS_* environment variables)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="List the files that would be written without touching the disk",
    )
    return parser


def prompt_until_valid(label: str, pattern: str, default: str, message: str) -> str:
    """Ask for a value until it matches *pattern*."""
    while True:
        value = Prompt.ask(label, default=default, console=console).strip()
        if re.fullmatch(pattern, value):
            return value
        print_error(message)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for ``python -m ktscaffold``.  Returns the exit code."""
    args = build_parser().parse_args(argv)

    try:
        config = Config.load(Path(args.config)) if args.config else Config.from_env()
    except (OSError, ValidationError) as exc:
        print_error(f"Error: could not load config: {escape(str(exc))}")
        return EXIT_INVALID_INPUT

    target_dir = Path(args.target_dir).expanduser()
    if not target_dir.is_dir():
        print_error(f"Error: target directory not found: {escape(str(target_dir))}")
        return EXIT_IO_ERROR

    try:
        project_name = args.name or prompt_until_valid(
            "Project name",
            PROJECT_NAME_PATTERN,
            config.default_project_name,
            "Project name can only contain letters, numbers, underscores, and hyphens",
        )
        package_name = args.package or prompt_until_valid(
            "Package name",
            PACKAGE_NAME_PATTERN,
            config.default_package,
            "Invalid package name format",
        )
    except (EOFError, KeyboardInterrupt):
        console.print()
        print_warning("Cancelled: no project was created.")
        return EXIT_CANCELLED

    try:
        spec = ProjectSpec(
            target_dir=target_dir,
            project_name=project_name,
            package_name=package_name,
        )
    except ValidationError as exc:
        for err in exc.errors():
            field = ".".join(str(loc) for loc in err["loc"])
            print_error(f"Invalid {field}: {escape(err['msg'])}")
        return EXIT_INVALID_INPUT

    generator = ProjectGenerator(spec, config=config)

    if args.dry_run:
        artifacts = generator.plan()
        print_summary_table(
            {
                a.relative_path: f"{len(a.content)} chars" + (" (executable)" if a.executable else "")
                for a in artifacts
            },
            title=escape(str(spec.project_root)),
            columns=("File", "Content"),
        )
        print_warning("Dry run: nothing was written.")
        return 0

    try:
        project_root = asyncio.run(generator.generate())
    except FileSystemError as exc:
        print_error(f"Failed to create Kotlin project: {escape(str(exc))}")
        return EXIT_IO_ERROR

    print_success(f"Kotlin project '{spec.project_name}' created successfully!")
    console.print(f"  {escape(str(project_root))}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
