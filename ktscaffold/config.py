"""ktscaffold configuration.

Typed settings for the scaffolder. Toolchain versions and the defaults offered
by the CLI live here as Pydantic v2 models so they are validated at
construction time and can be serialised to/from JSON or read from the
environment.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class ToolchainConfig(BaseModel):
    """Versions and flags baked into the generated Gradle build.

    These values end up verbatim in ``build.gradle.kts``,
    ``gradle.properties`` and ``gradle-wrapper.properties``.
    """

    kotlin_version: str = Field(default="1.9.0", min_length=1)
    gradle_version: str = Field(default="8.2.1", min_length=1)
    jvm_target: str = Field(default="17", min_length=1)
    jvm_args: str = Field(default="-Xmx2g", description="Value of org.gradle.jvmargs")
    code_style: str = Field(default="official", description="Value of kotlin.code.style")

    @property
    def distribution_url(self) -> str:
        """Gradle distribution URL, with the colon escaped as Java properties require."""
        return (
            "https\\://services.gradle.org/distributions/"
            f"gradle-{self.gradle_version}-bin.zip"
        )


class Config(BaseModel):
    """Global ktscaffold configuration.

    Created once by the CLI (from a JSON file or the environment) and passed
    to ``ProjectGenerator``.
    """

    toolchain: ToolchainConfig = Field(default_factory=ToolchainConfig)
    default_project_name: str = Field(default="my-kotlin-project")
    default_package: str = Field(default="com.example")

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file. Parent directories are created.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            KTS_KOTLIN_VERSION, KTS_GRADLE_VERSION, KTS_JVM_TARGET,
            KTS_JVM_ARGS, KTS_DEFAULT_PACKAGE.
        """
        toolchain_kwargs: dict[str, Any] = {}
        if os.environ.get("KTS_KOTLIN_VERSION"):
            toolchain_kwargs["kotlin_version"] = os.environ["KTS_KOTLIN_VERSION"]
        if os.environ.get("KTS_GRADLE_VERSION"):
            toolchain_kwargs["gradle_version"] = os.environ["KTS_GRADLE_VERSION"]
        if os.environ.get("KTS_JVM_TARGET"):
            toolchain_kwargs["jvm_target"] = os.environ["KTS_JVM_TARGET"]
        if os.environ.get("KTS_JVM_ARGS"):
            toolchain_kwargs["jvm_args"] = os.environ["KTS_JVM_ARGS"]

        kwargs: dict[str, Any] = {"toolchain": ToolchainConfig(**toolchain_kwargs)}
        if os.environ.get("KTS_DEFAULT_PACKAGE"):
            kwargs["default_package"] = os.environ["KTS_DEFAULT_PACKAGE"]
        return cls(**kwargs)
