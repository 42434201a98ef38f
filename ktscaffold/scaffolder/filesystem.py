"""Filesystem capability used by the generator.

``ProjectGenerator`` never touches the disk directly; it calls a
``FileSystem``.  ``LocalFileSystem`` writes to disk and ``MemoryFileSystem``
keeps everything in dictionaries so generation can be checked without a
real directory tree.  (``--dry-run`` does not use either: it only calls
``ProjectGenerator.plan()``.)
"""

from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import Protocol


class FileSystemError(OSError):
    """A directory creation, file write, or chmod failed.

    Carries the failing *operation* and *path* so callers can report a
    useful message.  The underlying ``OSError`` is chained as ``__cause__``.
    """

    def __init__(self, operation: str, path: Path, reason: str) -> None:
        self.operation = operation
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{operation} failed for {path}: {reason}")


class FileSystem(Protocol):
    def create_dir(self, path: Path) -> None: ...

    def write_file(self, path: Path, content: str) -> None: ...

    def set_executable(self, path: Path) -> None: ...


class LocalFileSystem:
    """``FileSystem`` backed by the real disk."""

    def create_dir(self, path: Path) -> None:
        """Create *path* and any missing parents; existing dirs are fine."""
        try:
            Path(path).mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise FileSystemError("create_dir", path, exc.strerror or str(exc)) from exc

    def write_file(self, path: Path, content: str) -> None:
        """Write *content* as UTF-8, replacing any existing file."""
        try:
            # newline="" keeps "\n" line endings on every platform
            with open(path, "w", encoding="utf-8", newline="") as fh:
                fh.write(content)
        except OSError as exc:
            raise FileSystemError("write_file", path, exc.strerror or str(exc)) from exc

    def set_executable(self, path: Path) -> None:
        """Add user/group/other execute bits.  No-op on Windows."""
        if os.name == "nt":
            return
        try:
            current = Path(path).stat().st_mode
            Path(path).chmod(current | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        except OSError as exc:
            raise FileSystemError("set_executable", path, exc.strerror or str(exc)) from exc


class MemoryFileSystem:
    """In-memory ``FileSystem``.

    Mirrors the disk semantics the generator relies on: writing into a
    directory that was never created fails, and writes overwrite.
    """

    def __init__(self) -> None:
        self.directories: set[Path] = set()
        self.files: dict[Path, str] = {}
        self.executables: set[Path] = set()

    def create_dir(self, path: Path) -> None:
        path = Path(path)
        if path in self.files:
            raise FileSystemError("create_dir", path, "File exists")
        self.directories.add(path)
        self.directories.update(path.parents)

    def write_file(self, path: Path, content: str) -> None:
        path = Path(path)
        if path.parent not in self.directories:
            raise FileSystemError("write_file", path, "No such file or directory")
        if path in self.directories:
            raise FileSystemError("write_file", path, "Is a directory")
        self.files[path] = content

    def set_executable(self, path: Path) -> None:
        path = Path(path)
        if path not in self.files:
            raise FileSystemError("set_executable", path, "No such file or directory")
        self.executables.add(path)
