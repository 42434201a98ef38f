"""Main scaffolding orchestrator.

Takes a validated ``ProjectSpec`` and generates a complete Kotlin/Gradle
project directory: build and settings scripts, Gradle properties and
wrapper, a ``Main.kt`` entry point with a matching test, and VS Code
configuration.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from ..config import Config
from .filesystem import FileSystem, LocalFileSystem
from .models import FileArtifact, ProjectSpec
from .paths import ProjectPaths, derive
from .templates import TemplateRenderer


class ProjectGenerator:
    """Main scaffolding orchestrator.

    Given a ``ProjectSpec``, generates ``<target_dir>/<project_name>``
    containing:
    - ``build.gradle.kts``, ``settings.gradle.kts``, ``gradle.properties``
    - Gradle wrapper properties plus ``gradlew`` / ``gradlew.bat``
    - ``src/main/kotlin/<package>/Main.kt``
    - ``src/test/kotlin/<package>/CalculatorTest.kt``
    - ``.vscode/settings.json`` and ``.vscode/launch.json``

    Existing directories are reused and existing files are overwritten.
    Nothing is rolled back if a write fails part way through.
    """

    def __init__(
        self,
        spec: ProjectSpec,
        config: Config | None = None,
        fs: FileSystem | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.spec = spec
        self.config = config or Config()
        self.fs = fs if fs is not None else LocalFileSystem()
        self.renderer = renderer or TemplateRenderer(toolchain=self.config.toolchain)

    # -- Public API --------------------------------------------------------

    @property
    def paths(self) -> ProjectPaths:
        return derive(self.spec)

    def plan(self) -> list[FileArtifact]:
        """Render every file of the project without writing anything."""
        return self.renderer.render_all(self.spec, self.paths)

    async def generate(self) -> Path:
        """Generate the complete project structure.

        Returns:
            Path to the generated project root.

        Raises:
            FileSystemError: A directory, file, or permission change failed.
                Whatever was written before the failure is left in place,
                including the execute bit on an already-written ``gradlew``.
        """
        paths = self.paths

        # 1. Create the directory skeleton
        await self._create_directory_structure(paths)

        # 2. Render and write every file; launcher scripts are made
        #    executable as soon as they are written
        for artifact in self.renderer.render_all(self.spec, paths):
            target = artifact.target(paths.project_root)
            await asyncio.to_thread(self.fs.write_file, target, artifact.content)
            if artifact.executable:
                await asyncio.to_thread(self.fs.set_executable, target)

        return paths.project_root

    # -- Directory structure -----------------------------------------------

    async def _create_directory_structure(self, paths: ProjectPaths) -> None:
        """Create every project directory; existing ones are left alone."""
        for directory in paths.directories():
            await asyncio.to_thread(self.fs.create_dir, directory)
