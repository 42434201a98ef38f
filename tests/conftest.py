"""Shared pytest fixtures for the ktscaffold test suite.

Provides reusable fixtures for:
- A validated demo ``ProjectSpec`` rooted in a temporary workspace
- In-memory and local filesystems
- Generators wired to either filesystem
"""

from __future__ import annotations

from pathlib import Path

import pytest

from ktscaffold.config import Config, ToolchainConfig
from ktscaffold.scaffolder import (
    LocalFileSystem,
    MemoryFileSystem,
    ProjectGenerator,
    ProjectSpec,
)


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Existing, writable parent directory for generated projects."""
    ws = tmp_path / "ws"
    ws.mkdir()
    yield ws


# ---------------------------------------------------------------------------
# Specs & config
# ---------------------------------------------------------------------------

@pytest.fixture
def demo_spec(workspace: Path) -> ProjectSpec:
    """``demo-app`` in package ``com.example``."""
    return ProjectSpec(
        target_dir=workspace,
        project_name="demo-app",
        package_name="com.example",
    )


@pytest.fixture
def nested_spec(workspace: Path) -> ProjectSpec:
    """A deeper package to exercise multi-segment paths."""
    return ProjectSpec(
        target_dir=workspace,
        project_name="Billing_Service",
        package_name="org.acme.billing.core",
    )


@pytest.fixture
def custom_config() -> Config:
    return Config(
        toolchain=ToolchainConfig(
            kotlin_version="2.0.21",
            gradle_version="8.10",
            jvm_target="21",
            jvm_args="-Xmx4g",
        )
    )


# ---------------------------------------------------------------------------
# Filesystems & generators
# ---------------------------------------------------------------------------

@pytest.fixture
def memory_fs() -> MemoryFileSystem:
    return MemoryFileSystem()


@pytest.fixture
def memory_generator(demo_spec: ProjectSpec, memory_fs: MemoryFileSystem) -> ProjectGenerator:
    """Generator for ``demo_spec`` that never touches the disk."""
    return ProjectGenerator(demo_spec, fs=memory_fs)


@pytest.fixture
def local_generator(demo_spec: ProjectSpec) -> ProjectGenerator:
    """Generator for ``demo_spec`` writing into the temporary workspace."""
    return ProjectGenerator(demo_spec, fs=LocalFileSystem())
