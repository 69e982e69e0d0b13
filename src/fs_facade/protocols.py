"""Protocol definitions for the filesystem contract.

The contract is split into one Protocol per capability group, then
composed into `FileSystem`:

- `PathQueries`: path arithmetic, resolution and non-mutating checks
- `FileReader`: reading contents and listing directories
- `FileMutations`: every operation that changes the filesystem
- `TempResources`: creation of temporary files and directories

All concrete implementations satisfy these protocols structurally (duck
typing); `ReadOnlyFileSystem` wraps any of them.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from fs_facade.types import FileContent, PathLike, Paths

if TYPE_CHECKING:
    from fs_facade.finder import Finder


@runtime_checkable
class PathQueries(Protocol):
    """Path computations and checks that never modify the filesystem."""

    def is_absolute_path(self, path: PathLike) -> bool:
        """Check whether a path starts at a root (``/``, ``C:``, UNC, scheme)."""
        ...

    def is_relative_path(self, path: PathLike) -> bool:
        """Deprecated negation of `is_absolute_path`; empty is relative."""
        ...

    def escape_path(self, path: PathLike) -> str:
        """Replace non-native separators with the native one."""
        ...

    def real_path(self, path: PathLike) -> str:
        """Resolve a path to its absolute, symlink-free form.

        Args:
            path: Existing path.

        Returns:
            Absolute path using native separators.

        Raises:
            PathNotFoundError: If the path or a symlink target does not exist.
        """
        ...

    def normalized_real_path(self, path: PathLike) -> str:
        """Like `real_path` but always with forward slashes.

        Raises:
            PathNotFoundError: If the path or a symlink target does not exist.
        """
        ...

    def make_path_relative(self, end_path: PathLike, start_path: PathLike) -> str:
        """Compute the directory-style relative path from start to end.

        Args:
            end_path: Absolute path to reach.
            start_path: Absolute path to start from.

        Returns:
            Relative path ending with ``/``.
        """
        ...

    def readlink(self, path: PathLike, canonicalize: bool = False) -> str | None:
        """Resolve links in a path.

        Args:
            path: Path to inspect.
            canonicalize: If False, return the direct target of the link
                without checking it exists (None if path is missing or is
                not a link). If True, return the fully resolved absolute
                path (None if path does not exist).

        Returns:
            The resolved target or None.
        """
        ...

    def exists(self, files: Paths) -> bool:
        """Check that every given path exists. Never raises."""
        ...

    def is_readable(self, path: PathLike) -> bool:
        """Check that a path exists and is readable."""
        ...

    def is_readable_file(self, path: PathLike) -> bool:
        """Check that a path is a readable regular file."""
        ...

    def is_readable_directory(self, path: PathLike) -> bool:
        """Check that a path is a readable directory."""
        ...


@runtime_checkable
class FileReader(Protocol):
    """Reading file contents and listing directories."""

    def read_file(self, filename: PathLike) -> str:
        """Read a text file.

        Raises:
            FileSystemIOError: If the file cannot be read.
        """
        ...

    def create_finder(self) -> Finder:
        """Create a new directory listing."""
        ...


@runtime_checkable
class FileMutations(Protocol):
    """Operations that change the filesystem.

    Every method raises `FileSystemIOError` (or a subclass) on failure.
    """

    def copy(
        self, origin_file: PathLike, target_file: PathLike, overwrite_newer_files: bool = False
    ) -> None:
        """Copy a file.

        An older target is always overwritten; a newer one only when
        ``overwrite_newer_files`` is set.

        Raises:
            PathNotFoundError: If the origin does not exist.
        """
        ...

    def mkdir(self, dirs: Paths, mode: int = 0o777) -> None:
        """Create directories recursively."""
        ...

    def touch(self, files: Paths, time: float | None = None, atime: float | None = None) -> None:
        """Create files or update their access and modification times."""
        ...

    def remove(self, files: Paths) -> None:
        """Remove files, links or directory trees. Missing paths are ignored."""
        ...

    def chmod(self, files: Paths, mode: int, umask: int = 0o000, recursive: bool = False) -> None:
        """Change the mode of files or directories."""
        ...

    def chown(self, files: Paths, user: str | int, recursive: bool = False) -> None:
        """Change the owner of files or directories."""
        ...

    def chgrp(self, files: Paths, group: str | int, recursive: bool = False) -> None:
        """Change the group of files or directories."""
        ...

    def rename(self, origin: PathLike, target: PathLike, overwrite: bool = False) -> None:
        """Rename a file or directory.

        Raises:
            FileSystemIOError: If the target exists and ``overwrite`` is False.
        """
        ...

    def symlink(self, origin_dir: PathLike, target_dir: PathLike, copy_on_windows: bool = False) -> None:
        """Create a symbolic link, or copy the directory on Windows if asked."""
        ...

    def hardlink(self, origin_file: PathLike, target_files: Paths) -> None:
        """Create one or several hard links to a file.

        Raises:
            PathNotFoundError: If the origin is missing or not a file.
        """
        ...

    def mirror(
        self,
        origin_dir: PathLike,
        target_dir: PathLike,
        iterator: Iterable[PathLike] | None = None,
        *,
        override: bool = False,
        copy_on_windows: bool = False,
        delete: bool = False,
    ) -> None:
        """Mirror a directory to another.

        Raises:
            FileSystemIOError: When an entry of unknown type is encountered.
        """
        ...

    def dump_file(self, filename: PathLike, content: FileContent = "") -> None:
        """Atomically write content into a file."""
        ...

    def append_to_file(self, filename: PathLike, content: FileContent, lock: bool = False) -> None:
        """Append content to a file, creating it if needed."""
        ...


@runtime_checkable
class TempResources(Protocol):
    """Creation of temporary files and directories.

    The caller owns what is created and must remove it.
    """

    def tempnam(self, dir: PathLike, prefix: str, suffix: str = "") -> str:
        """Create an empty, uniquely named file in a directory.

        Returns:
            Path of the new file.
        """
        ...

    def tmp_file(self, prefix: str, suffix: str = "", target_dir: PathLike | None = None) -> str:
        """Create a temporary file in ``target_dir`` or the temp root."""
        ...

    def tmp_dir(self, prefix: str, target_dir: PathLike | None = None) -> str:
        """Create a temporary directory in ``target_dir`` or the temp root."""
        ...

    def make_tmp_dir(self, namespace: str, class_name: str) -> str:
        """Create a fresh directory named after a class, under a namespace."""
        ...

    def get_namespaced_tmp_dir(self, namespace: str) -> str:
        """Get (and create) a namespaced directory under the temp root."""
        ...


@runtime_checkable
class FileSystem(PathQueries, FileReader, FileMutations, TempResources, Protocol):
    """The complete filesystem contract."""
