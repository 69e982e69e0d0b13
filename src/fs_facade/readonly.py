"""Read-only filesystem decorator.

`ReadOnlyFileSystem` wraps any `FileSystem` implementation. Read
operations are forwarded to it unchanged; every mutating operation is
routed through a single gate, `_handle_write`, which either raises or
skips the call depending on ``fail_on_write``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from fs_facade.context import default_filesystem
from fs_facade.errors import ReadOnlyFileSystemError
from fs_facade.finder import Finder
from fs_facade.protocols import FileSystem
from fs_facade.types import FileContent, PathLike, Paths, iter_paths

logger = logging.getLogger(__name__)

__all__ = ["MUTATING_OPERATIONS", "ReadOnlyFileSystem"]

MUTATING_OPERATIONS: tuple[str, ...] = (
    "copy",
    "mkdir",
    "touch",
    "remove",
    "chmod",
    "chown",
    "chgrp",
    "rename",
    "symlink",
    "hardlink",
    "mirror",
    "tempnam",
    "append_to_file",
    "dump_file",
    "tmp_file",
    "tmp_dir",
    "make_tmp_dir",
    "get_namespaced_tmp_dir",
)


def _first_path(paths: Paths | None) -> str | None:
    if paths is None:
        return None
    found = iter_paths(paths)
    return found[0] if found else None


class ReadOnlyFileSystem:
    """Filesystem that refuses every mutation.

    In strict mode (``fail_on_write=True``) a mutation raises
    `ReadOnlyFileSystemError` naming the operation. In permissive mode it
    is skipped and a benign default (``None`` or ``""``) is returned.
    Neither mode touches the disk.

    Satisfies the FileSystem protocol structurally.
    """

    def __init__(self, fail_on_write: bool, filesystem: FileSystem | None = None) -> None:
        """Initialize the read-only wrapper.

        Args:
            fail_on_write: Raise on mutation instead of skipping it.
            filesystem: Implementation to forward reads to. Defaults to a
                `NativeFileSystem`.
        """
        self._fail_on_write = fail_on_write
        self._filesystem = filesystem if filesystem is not None else default_filesystem()

    @property
    def fail_on_write(self) -> bool:
        return self._fail_on_write

    @property
    def inner(self) -> FileSystem:
        """The wrapped implementation."""
        return self._filesystem

    def _handle_write(self, operation: str, path: Paths | None = None) -> None:
        """Gate every mutating operation.

        Raises:
            ReadOnlyFileSystemError: In strict mode.
        """
        target = _first_path(path)
        if self._fail_on_write:
            raise ReadOnlyFileSystemError(operation, target)
        logger.debug("Skipped %s on read-only file system (path=%s)", operation, target)

    # -- Forwarded reads -----------------------------------------------

    def is_absolute_path(self, path: PathLike) -> bool:
        return self._filesystem.is_absolute_path(path)

    def is_relative_path(self, path: PathLike) -> bool:
        return self._filesystem.is_relative_path(path)

    def escape_path(self, path: PathLike) -> str:
        return self._filesystem.escape_path(path)

    def real_path(self, path: PathLike) -> str:
        return self._filesystem.real_path(path)

    def normalized_real_path(self, path: PathLike) -> str:
        return self._filesystem.normalized_real_path(path)

    def make_path_relative(self, end_path: PathLike, start_path: PathLike) -> str:
        return self._filesystem.make_path_relative(end_path, start_path)

    def readlink(self, path: PathLike, canonicalize: bool = False) -> str | None:
        return self._filesystem.readlink(path, canonicalize)

    def exists(self, files: Paths) -> bool:
        return self._filesystem.exists(files)

    def is_readable(self, path: PathLike) -> bool:
        return self._filesystem.is_readable(path)

    def is_readable_file(self, path: PathLike) -> bool:
        return self._filesystem.is_readable_file(path)

    def is_readable_directory(self, path: PathLike) -> bool:
        return self._filesystem.is_readable_directory(path)

    def read_file(self, filename: PathLike) -> str:
        return self._filesystem.read_file(filename)

    def create_finder(self) -> Finder:
        return self._filesystem.create_finder()

    # -- Gated mutations -----------------------------------------------

    def copy(
        self, origin_file: PathLike, target_file: PathLike, overwrite_newer_files: bool = False
    ) -> None:
        self._handle_write("copy", target_file)

    def mkdir(self, dirs: Paths, mode: int = 0o777) -> None:
        self._handle_write("mkdir", dirs)

    def touch(self, files: Paths, time: float | None = None, atime: float | None = None) -> None:
        self._handle_write("touch", files)

    def remove(self, files: Paths) -> None:
        self._handle_write("remove", files)

    def chmod(self, files: Paths, mode: int, umask: int = 0o000, recursive: bool = False) -> None:
        self._handle_write("chmod", files)

    def chown(self, files: Paths, user: str | int, recursive: bool = False) -> None:
        self._handle_write("chown", files)

    def chgrp(self, files: Paths, group: str | int, recursive: bool = False) -> None:
        self._handle_write("chgrp", files)

    def rename(self, origin: PathLike, target: PathLike, overwrite: bool = False) -> None:
        self._handle_write("rename", origin)

    def symlink(self, origin_dir: PathLike, target_dir: PathLike, copy_on_windows: bool = False) -> None:
        self._handle_write("symlink", target_dir)

    def hardlink(self, origin_file: PathLike, target_files: Paths) -> None:
        self._handle_write("hardlink", target_files)

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
        self._handle_write("mirror", target_dir)

    def dump_file(self, filename: PathLike, content: FileContent = "") -> None:
        self._handle_write("dump_file", filename)

    def append_to_file(self, filename: PathLike, content: FileContent, lock: bool = False) -> None:
        self._handle_write("append_to_file", filename)

    def tempnam(self, dir: PathLike, prefix: str, suffix: str = "") -> str:
        self._handle_write("tempnam", dir)
        return ""

    def tmp_file(self, prefix: str, suffix: str = "", target_dir: PathLike | None = None) -> str:
        self._handle_write("tmp_file", target_dir)
        return ""

    def tmp_dir(self, prefix: str, target_dir: PathLike | None = None) -> str:
        self._handle_write("tmp_dir", target_dir)
        return ""

    def make_tmp_dir(self, namespace: str, class_name: str) -> str:
        self._handle_write("make_tmp_dir", namespace)
        return ""

    def get_namespaced_tmp_dir(self, namespace: str) -> str:
        self._handle_write("get_namespaced_tmp_dir", namespace)
        return ""
