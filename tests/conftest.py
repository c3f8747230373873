"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from fsguard.context import AppContext
from fsguard.filesystem import LocalFileSystem


@pytest.fixture
def fs() -> LocalFileSystem:
    """Create a filesystem facade."""
    return LocalFileSystem()


@pytest.fixture
def fixture_dir(tmp_path: Path) -> Path:
    """Create the standard fixture tree.

    Contains an empty file and dir, a read-only and a write-only file,
    and symlinks to the empty file and dir.
    """
    base = tmp_path / "fixtures"
    base.mkdir()
    (base / "empty-dir").mkdir()
    (base / "empty-file").touch()
    (base / "readonly-file").touch()
    (base / "readonly-file").chmod(0o444)
    (base / "writeonly-file").touch()
    (base / "writeonly-file").chmod(0o222)
    (base / "symlink-file").symlink_to(base / "empty-file")
    (base / "symlink-dir").symlink_to(base / "empty-dir", target_is_directory=True)
    return base


@pytest.fixture
def locked_dir(tmp_path: Path) -> Iterator[Path]:
    """Create a directory the current user cannot traverse."""
    locked = tmp_path / "locked"
    locked.mkdir()
    (locked / "inner-file").touch()
    locked.chmod(0o000)
    yield locked
    locked.chmod(0o755)


@pytest.fixture
def app_context(fs: LocalFileSystem) -> AppContext:
    """Create an AppContext wired to the real filesystem."""
    return AppContext(filesystem=fs)
