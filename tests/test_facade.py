"""Tests for the process-wide FS accessor."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

import fs_facade
from fs_facade import facade
from fs_facade.facade import FACADE_METHODS, FS, get_instance, set_instance, use_filesystem
from fs_facade.filesystem import NativeFileSystem
from fs_facade.protocols import FileMutations, FileReader, PathQueries, TempResources
from fs_facade.readonly import MUTATING_OPERATIONS, ReadOnlyFileSystem


def protocol_methods(protocol: type) -> set[str]:
    return {name for name in vars(protocol) if not name.startswith("_")}


class TestSharedInstance:
    """Tests for get_instance and set_instance."""

    def test_lazily_creates_native_filesystem(self) -> None:
        """Test the first access creates a NativeFileSystem."""
        facade._instance = None

        instance = get_instance()

        assert isinstance(instance, NativeFileSystem)
        assert get_instance() is instance

    def test_set_instance(self, mock_filesystem: MagicMock) -> None:
        """Test the shared instance can be replaced."""
        set_instance(mock_filesystem)

        assert get_instance() is mock_filesystem

    def test_use_filesystem_restores_previous(self, mock_filesystem: MagicMock) -> None:
        """Test use_filesystem swaps the instance only inside the block."""
        previous = get_instance()

        with use_filesystem(mock_filesystem) as fs:
            assert fs is mock_filesystem
            assert get_instance() is mock_filesystem

        assert get_instance() is previous

    def test_use_filesystem_restores_on_error(self, mock_filesystem: MagicMock) -> None:
        """Test the previous instance comes back when the block raises."""
        previous = get_instance()

        with pytest.raises(RuntimeError):
            with use_filesystem(mock_filesystem):
                raise RuntimeError("boom")

        assert get_instance() is previous


class TestFacadeMethods:
    """Tests for the forwarded operation names."""

    def test_covers_every_protocol(self) -> None:
        """Test every capability group is exposed on FS."""
        expected = (
            protocol_methods(PathQueries)
            | protocol_methods(FileReader)
            | protocol_methods(FileMutations)
            | protocol_methods(TempResources)
        )

        assert FACADE_METHODS == expected
        assert set(MUTATING_OPERATIONS) <= FACADE_METHODS
        assert len(FACADE_METHODS) == 32

    def test_dir_lists_operations(self) -> None:
        """Test dir(FS) lists the forwarded operations."""
        assert dir(FS) == sorted(FACADE_METHODS)


class TestFS:
    """Tests for forwarding through FS."""

    @pytest.mark.parametrize("name", sorted(FACADE_METHODS))
    def test_forwards_every_operation(self, name: str, mock_filesystem: MagicMock) -> None:
        """Test each operation reaches the shared instance unchanged."""
        set_instance(mock_filesystem)

        getattr(FS, name)("arg", flag=True)

        getattr(mock_filesystem, name).assert_called_once_with("arg", flag=True)

    def test_returns_result(self, mock_filesystem: MagicMock) -> None:
        """Test results of the shared instance are returned."""
        mock_filesystem.read_file.return_value = "content"
        set_instance(mock_filesystem)

        assert FS.read_file("/a") == "content"

    def test_follows_instance_changes(self) -> None:
        """Test FS resolves the shared instance on every call."""
        first = MagicMock()
        second = MagicMock()

        set_instance(first)
        FS.exists("/a")
        set_instance(second)
        FS.exists("/b")

        first.exists.assert_called_once_with("/a")
        second.exists.assert_called_once_with("/b")

    def test_unknown_operation(self) -> None:
        """Test unknown names raise AttributeError."""
        with pytest.raises(AttributeError, match="FS has no operation 'unlink'"):
            FS.unlink("/a")

    def test_private_names_are_not_forwarded(self, mock_filesystem: MagicMock) -> None:
        """Test implementation details of the instance stay hidden."""
        set_instance(mock_filesystem)

        with pytest.raises(AttributeError):
            FS._handle_write  # noqa: B018

    def test_real_filesystem(self, tmp_path: Path) -> None:
        """Test FS works end to end with the native filesystem."""
        set_instance(NativeFileSystem())
        target = tmp_path / "file.txt"

        FS.dump_file(target, "content")

        assert FS.read_file(target) == "content"
        assert FS.exists(target)

    def test_read_only_instance(self, tmp_path: Path) -> None:
        """Test a read-only shared instance blocks writes through FS."""
        set_instance(ReadOnlyFileSystem(True))

        with pytest.raises(fs_facade.ReadOnlyFileSystemError):
            FS.dump_file(tmp_path / "file.txt", "content")
        assert not (tmp_path / "file.txt").exists()

    def test_repr(self, mock_filesystem: MagicMock) -> None:
        """Test the repr shows the shared instance."""
        set_instance(mock_filesystem)

        assert repr(FS) == f"FS({mock_filesystem!r})"

    def test_exported_from_package(self) -> None:
        """Test the package exports the accessor."""
        assert fs_facade.FS is FS
