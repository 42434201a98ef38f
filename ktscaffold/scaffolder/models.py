"""Value types for project scaffolding.

``ProjectSpec`` is the validated input to a generation run and
``FileArtifact`` is one file the generator writes.  Both are frozen Pydantic
models: the name patterns are enforced when a spec is built, so the
generator itself never re-validates.
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath

from pydantic import BaseModel, ConfigDict, Field, field_validator

PROJECT_NAME_PATTERN = r"^[A-Za-z0-9_-]+$"
PACKAGE_NAME_PATTERN = r"^[A-Za-z][A-Za-z0-9_]*(\.[A-Za-z][A-Za-z0-9_]*)*$"

# Kotlin compiles top-level functions in Main.kt into a class named MainKt.
MAIN_CLASS_SUFFIX = "MainKt"


class ProjectSpec(BaseModel):
    """Validated (target directory, project name, package) triple."""

    model_config = ConfigDict(frozen=True)

    target_dir: Path = Field(..., description="Existing parent directory for the project")
    project_name: str = Field(..., pattern=PROJECT_NAME_PATTERN)
    package_name: str = Field(..., pattern=PACKAGE_NAME_PATTERN)

    @field_validator("target_dir")
    @classmethod
    def _absolute_target(cls, value: Path) -> Path:
        return value.expanduser().absolute()

    @property
    def project_root(self) -> Path:
        return self.target_dir / self.project_name

    @property
    def package_segments(self) -> list[str]:
        """Package identifier split into directory segments.

        ``"com.example.app"`` -> ``["com", "example", "app"]``.
        """
        return self.package_name.split(".")

    @property
    def main_class(self) -> str:
        """Fully-qualified JVM class holding ``main()``."""
        return f"{self.package_name}.{MAIN_CLASS_SUFFIX}"


class FileArtifact(BaseModel):
    """A single rendered file, addressed relative to the project root."""

    model_config = ConfigDict(frozen=True)

    relative_path: str = Field(..., min_length=1, description="POSIX-style path under the project root")
    content: str
    executable: bool = False

    @field_validator("relative_path")
    @classmethod
    def _inside_project(cls, value: str) -> str:
        path = PurePosixPath(value)
        if path.is_absolute() or ".." in path.parts:
            raise ValueError(f"artifact path must stay inside the project root: {value!r}")
        return path.as_posix()

    def target(self, project_root: Path) -> Path:
        """Resolve this artifact's location under *project_root*."""
        return project_root.joinpath(*PurePosixPath(self.relative_path).parts)
