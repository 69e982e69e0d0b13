"""Filesystem facade: path resolution, file I/O and a read-only variant."""

__version__ = "0.1.0"

from fs_facade.errors import (
    FileSystemIOError,
    PathNotFoundError,
    ReadOnlyFileSystemError,
    SandboxSetupError,
)
from fs_facade.facade import FS, get_instance, set_instance, use_filesystem
from fs_facade.filesystem import NativeFileSystem
from fs_facade.finder import FileInfo, Finder
from fs_facade.protocols import (
    FileMutations,
    FileReader,
    FileSystem,
    PathQueries,
    TempResources,
)
from fs_facade.readonly import ReadOnlyFileSystem
from fs_facade.settings import FileSystemSettings

__all__ = [
    "__version__",
    "FS",
    "FileInfo",
    "FileMutations",
    "FileReader",
    "FileSystem",
    "FileSystemIOError",
    "FileSystemSettings",
    "Finder",
    "NativeFileSystem",
    "PathNotFoundError",
    "PathQueries",
    "ReadOnlyFileSystem",
    "ReadOnlyFileSystemError",
    "SandboxSetupError",
    "TempResources",
    "get_instance",
    "set_instance",
    "use_filesystem",
]
