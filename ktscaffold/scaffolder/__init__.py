"""ktscaffold scaffolder -- generates Kotlin/Gradle project structures.

This module takes a validated ``ProjectSpec`` (target directory, project
name, package) and writes a buildable Gradle project with a Kotlin entry
point, a unit test, the Gradle wrapper files, and VS Code settings.

Quick usage::

    from ktscaffold.scaffolder import ProjectGenerator, ProjectSpec

    spec = ProjectSpec(
        target_dir="/tmp/ws",
        project_name="demo-app",
        package_name="com.example",
    )
    generator = ProjectGenerator(spec)
    project_path = await generator.generate()
"""

from ktscaffold.scaffolder.filesystem import (
    FileSystem,
    FileSystemError,
    LocalFileSystem,
    MemoryFileSystem,
)
from ktscaffold.scaffolder.generator import ProjectGenerator
from ktscaffold.scaffolder.models import FileArtifact, ProjectSpec
from ktscaffold.scaffolder.paths import ProjectPaths, derive
from ktscaffold.scaffolder.templates import TemplateKind, TemplateRenderer

__all__ = [
    "FileArtifact",
    "FileSystem",
    "FileSystemError",
    "LocalFileSystem",
    "MemoryFileSystem",
    "ProjectGenerator",
    "ProjectPaths",
    "ProjectSpec",
    "TemplateKind",
    "TemplateRenderer",
    "derive",
]
