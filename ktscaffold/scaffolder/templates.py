"""Jinja2 template rendering for Kotlin project scaffolding.

Provides the TemplateRenderer class which loads ``.j2`` templates from the
``ktscaffold/scaffolder/templates/`` directory and turns a ``ProjectSpec``
into ``FileArtifact`` objects.  Templates only use ``{{ placeholder }}``
substitution; the editor configuration files are built as dicts and dumped
as JSON so they are always well-formed.
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from ..config import ToolchainConfig
from .models import FileArtifact, ProjectSpec
from .paths import ProjectPaths


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# Template kinds
# ---------------------------------------------------------------------------


class TemplateKind(str, Enum):
    """The fixed file archetypes a generated project is made of."""

    BUILD_DESCRIPTOR = "build_descriptor"
    SETTINGS_DESCRIPTOR = "settings_descriptor"
    PROPERTIES = "properties"
    WRAPPER = "wrapper"
    ENTRY_POINT = "entry_point"
    TEST_SOURCE = "test_source"
    EDITOR_CONFIG = "editor_config"


# (template path, ProjectPaths attribute, output filename, executable)
_FILE_TEMPLATES: dict[TemplateKind, list[tuple[str, str, str, bool]]] = {
    TemplateKind.BUILD_DESCRIPTOR: [
        ("build.gradle.kts.j2", "project_root", "build.gradle.kts", False),
    ],
    TemplateKind.SETTINGS_DESCRIPTOR: [
        ("settings.gradle.kts.j2", "project_root", "settings.gradle.kts", False),
    ],
    TemplateKind.PROPERTIES: [
        ("gradle.properties.j2", "project_root", "gradle.properties", False),
    ],
    TemplateKind.WRAPPER: [
        (
            "gradle/wrapper/gradle-wrapper.properties.j2",
            "wrapper_dir",
            "gradle-wrapper.properties",
            False,
        ),
        ("gradlew.j2", "project_root", "gradlew", True),
        ("gradlew.bat.j2", "project_root", "gradlew.bat", False),
    ],
    TemplateKind.ENTRY_POINT: [
        ("src/main/Main.kt.j2", "source_package_dir", "Main.kt", False),
    ],
    TemplateKind.TEST_SOURCE: [
        ("src/test/CalculatorTest.kt.j2", "test_package_dir", "CalculatorTest.kt", False),
    ],
}

_EXCLUDED_FROM_LISTINGS = ("**/.gradle", "**/build", "**/.git")


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders the scaffold templates for a single toolchain configuration.

    Rendering is a pure function of the spec, the derived paths and the
    toolchain config: the same inputs always give byte-identical output.
    """

    def __init__(
        self,
        template_dir: str | Path | None = None,
        toolchain: ToolchainConfig | None = None,
    ) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.toolchain = toolchain or ToolchainConfig()
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

    # -- Context -----------------------------------------------------------

    def build_context(self, spec: ProjectSpec) -> dict[str, Any]:
        """Placeholder values available to every template."""
        return {
            "project_name": spec.project_name,
            "package_name": spec.package_name,
            "main_class": spec.main_class,
            "kotlin_version": self.toolchain.kotlin_version,
            "jvm_target": self.toolchain.jvm_target,
            "jvm_args": self.toolchain.jvm_args,
            "code_style": self.toolchain.code_style,
            "distribution_url": self.toolchain.distribution_url,
        }

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"src/main/Main.kt.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    # -- Artifacts ---------------------------------------------------------

    def render_kind(
        self, kind: TemplateKind, spec: ProjectSpec, paths: ProjectPaths
    ) -> list[FileArtifact]:
        """Render every file belonging to one template kind."""
        if kind is TemplateKind.EDITOR_CONFIG:
            return self._render_editor_config(spec, paths)

        context = self.build_context(spec)
        return [
            FileArtifact(
                relative_path=paths.relative(getattr(paths, directory), filename),
                content=self.render(template_path, context),
                executable=executable,
            )
            for template_path, directory, filename, executable in _FILE_TEMPLATES[kind]
        ]

    def render_all(self, spec: ProjectSpec, paths: ProjectPaths) -> list[FileArtifact]:
        """Render the complete project, kind by kind in declaration order."""
        artifacts: list[FileArtifact] = []
        for kind in TemplateKind:
            artifacts.extend(self.render_kind(kind, spec, paths))
        return artifacts

    def _render_editor_config(
        self, spec: ProjectSpec, paths: ProjectPaths
    ) -> list[FileArtifact]:
        """Build ``.vscode/settings.json`` and ``.vscode/launch.json``."""
        settings = {
            "files.exclude": {pattern: True for pattern in _EXCLUDED_FROM_LISTINGS},
            "java.configuration.updateBuildConfiguration": "automatic",
        }
        launch = {
            "version": "0.2.0",
            "configurations": [
                {
                    "type": "kotlin",
                    "request": "launch",
                    "name": "Run Kotlin Application",
                    "projectRoot": "${workspaceFolder}",
                    "mainClass": spec.main_class,
                }
            ],
        }
        return [
            FileArtifact(
                relative_path=paths.relative(paths.editor_config_dir, "settings.json"),
                content=_dump_json(settings),
            ),
            FileArtifact(
                relative_path=paths.relative(paths.editor_config_dir, "launch.json"),
                content=_dump_json(launch),
            ),
        ]

    # -- Utility -----------------------------------------------------------

    def list_templates(self, prefix: str = "") -> list[str]:
        """Return a sorted list of all ``.j2`` template paths under *prefix*.

        Paths are relative to the template root directory and use ``/``.
        """
        search_dir = self.template_dir / prefix if prefix else self.template_dir
        if not search_dir.is_dir():
            return []
        return sorted(
            p.relative_to(self.template_dir).as_posix()
            for p in search_dir.rglob("*.j2")
        )


def template_paths(kind: TemplateKind) -> list[str]:
    """Template files used by *kind* (empty for JSON-built kinds)."""
    return [entry[0] for entry in _FILE_TEMPLATES.get(kind, [])]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _dump_json(data: dict[str, Any]) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
