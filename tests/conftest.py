"""Shared test fixtures."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from fs_facade import facade
from fs_facade.filesystem import NativeFileSystem
from fs_facade.settings import FileSystemSettings
from fs_facade.testing.fixtures import fs_sandbox  # noqa: F401


def _can_symlink(directory: Path) -> bool:
    link = directory / ".symlink-check"
    try:
        os.symlink(directory, link)
    except (OSError, NotImplementedError):
        return False
    link.unlink()
    return True


@pytest.fixture(autouse=True)
def restore_shared_filesystem() -> Iterator[None]:
    """Restore the shared FS instance replaced by a test."""
    previous = facade._instance
    yield
    facade._instance = previous


@pytest.fixture
def native_fs(tmp_path: Path) -> NativeFileSystem:
    """Create a native filesystem whose temp root is the test directory."""
    return NativeFileSystem(FileSystemSettings(tmp_root=tmp_path))


@pytest.fixture
def requires_symlinks(tmp_path: Path) -> None:
    """Skip the test on hosts that cannot create symlinks."""
    if not _can_symlink(tmp_path):
        pytest.skip("symlinks are not supported on this host")


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create a small directory tree.

    Layout:
        tree/file1.txt
        tree/file2.txt
        tree/dir1/file3.txt
    """
    root = tmp_path / "tree"
    (root / "dir1").mkdir(parents=True)
    (root / "file1.txt").write_text("one")
    (root / "file2.txt").write_text("two")
    (root / "dir1" / "file3.txt").write_text("three")
    return root


# ============================================================================
# Mock FileSystem Fixture
# ============================================================================


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock FileSystem for testing.

    The mock tracks all filesystem operations without touching real files.
    """
    fs = MagicMock()
    fs.exists.return_value = False
    fs.read_file.return_value = ""
    fs.real_path.side_effect = lambda path, *args, **kwargs: os.fspath(path)
    return fs
