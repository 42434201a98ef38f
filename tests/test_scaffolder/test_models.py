"""Tests for ProjectSpec and FileArtifact (ktscaffold.scaffolder.models)."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from ktscaffold.scaffolder.models import FileArtifact, ProjectSpec

pytestmark = pytest.mark.unit


def _spec(**overrides) -> ProjectSpec:
    fields = {
        "target_dir": Path("/tmp/ws"),
        "project_name": "demo-app",
        "package_name": "com.example",
    }
    fields.update(overrides)
    return ProjectSpec(**fields)


# ---------------------------------------------------------------------------
# ProjectSpec
# ---------------------------------------------------------------------------


class TestProjectSpecValidation:
    @pytest.mark.parametrize("name", ["demo-app", "Demo_App", "app2", "a", "my-kotlin-project"])
    def test_valid_project_names(self, name):
        assert _spec(project_name=name).project_name == name

    @pytest.mark.parametrize(
        "name", ["", "demo app", "demo.app", "demo/app", "../escape", "naïve"]
    )
    def test_invalid_project_names(self, name):
        with pytest.raises(ValidationError):
            _spec(project_name=name)

    @pytest.mark.parametrize(
        "package", ["com", "com.example", "org.acme.billing_core", "a1.b2.c3"]
    )
    def test_valid_package_names(self, package):
        assert _spec(package_name=package).package_name == package

    @pytest.mark.parametrize(
        "package",
        ["", "1com.example", "com..example", "com.example.", ".com", "com.1example", "com-example"],
    )
    def test_invalid_package_names(self, package):
        with pytest.raises(ValidationError):
            _spec(package_name=package)

    def test_string_target_dir_coerced(self):
        spec = _spec(target_dir="/tmp/ws")
        assert spec.target_dir == Path("/tmp/ws")

    def test_relative_target_dir_made_absolute(self):
        spec = _spec(target_dir=Path("relative/dir"))
        assert spec.target_dir.is_absolute()
        assert spec.target_dir.parts[-2:] == ("relative", "dir")

    def test_frozen(self):
        spec = _spec()
        with pytest.raises(ValidationError):
            spec.project_name = "other"


class TestProjectSpecDerived:
    def test_project_root(self):
        assert _spec().project_root == Path("/tmp/ws/demo-app")

    def test_package_segments(self):
        assert _spec().package_segments == ["com", "example"]

    def test_single_segment_package(self):
        assert _spec(package_name="app").package_segments == ["app"]

    def test_main_class_is_string_concatenation(self):
        assert _spec(package_name="org.acme.app").main_class == "org.acme.app.MainKt"


# ---------------------------------------------------------------------------
# FileArtifact
# ---------------------------------------------------------------------------


class TestFileArtifact:
    def test_defaults_not_executable(self):
        artifact = FileArtifact(relative_path="build.gradle.kts", content="")
        assert artifact.executable is False

    def test_normalises_path(self):
        artifact = FileArtifact(relative_path="gradle//wrapper/./x.properties", content="")
        assert artifact.relative_path == "gradle/wrapper/x.properties"

    @pytest.mark.parametrize("path", ["/etc/passwd", "../outside.txt", "src/../../x"])
    def test_rejects_paths_outside_root(self, path):
        with pytest.raises(ValidationError):
            FileArtifact(relative_path=path, content="x")

    def test_rejects_empty_path(self):
        with pytest.raises(ValidationError):
            FileArtifact(relative_path="", content="x")

    def test_target_under_project_root(self):
        artifact = FileArtifact(relative_path="src/main/kotlin/com/example/Main.kt", content="")
        root = Path("/tmp/ws/demo-app")
        assert artifact.target(root) == root / "src" / "main" / "kotlin" / "com" / "example" / "Main.kt"
