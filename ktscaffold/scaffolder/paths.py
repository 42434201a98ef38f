"""Directory layout of a generated Gradle project.

Pure path arithmetic: nothing here touches the filesystem.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict

from .models import ProjectSpec

SOURCE_LANGUAGE = "kotlin"
WRAPPER_SUBDIR = ("gradle", "wrapper")
EDITOR_CONFIG_SUBDIR = (".vscode",)


class ProjectPaths(BaseModel):
    """Absolute directories derived from a ``ProjectSpec``."""

    model_config = ConfigDict(frozen=True)

    project_root: Path
    source_package_dir: Path
    test_package_dir: Path
    wrapper_dir: Path
    editor_config_dir: Path

    def directories(self) -> list[Path]:
        """Every directory a generation run must create, root first."""
        return [
            self.project_root,
            self.source_package_dir,
            self.test_package_dir,
            self.wrapper_dir,
            self.editor_config_dir,
        ]

    def relative(self, directory: Path, *parts: str) -> str:
        """POSIX path of ``directory/parts`` relative to the project root."""
        return directory.relative_to(self.project_root).joinpath(*parts).as_posix()


def derive(spec: ProjectSpec) -> ProjectPaths:
    """Compute the project layout for *spec*.

    ``com.example`` under ``/tmp/ws/demo-app`` yields
    ``/tmp/ws/demo-app/src/main/kotlin/com/example`` as the source package
    directory and the matching ``src/test`` directory for tests.
    """
    root = spec.project_root
    segments = spec.package_segments
    return ProjectPaths(
        project_root=root,
        source_package_dir=root.joinpath("src", "main", SOURCE_LANGUAGE, *segments),
        test_package_dir=root.joinpath("src", "test", SOURCE_LANGUAGE, *segments),
        wrapper_dir=root.joinpath(*WRAPPER_SUBDIR),
        editor_config_dir=root.joinpath(*EDITOR_CONFIG_SUBDIR),
    )
