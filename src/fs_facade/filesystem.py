"""Native filesystem implementation.

`NativeFileSystem` satisfies the `FileSystem` protocol by delegating to
the standard library (``os``, ``shutil``, ``tempfile``). Every OS-level
failure is re-raised as a `FileSystemIOError` naming the operation and
the path involved.
"""

from __future__ import annotations

import logging
import os
import shutil
import stat
import tempfile
from collections.abc import Iterable, Iterator
from time import time as current_time

from fs_facade import paths
from fs_facade.errors import FileSystemIOError, PathNotFoundError
from fs_facade.finder import Finder
from fs_facade.settings import FileSystemSettings
from fs_facade.types import FileContent, PathLike, Paths, iter_paths

try:
    import fcntl
except ImportError:  # Windows
    fcntl = None  # type: ignore[assignment]

logger = logging.getLogger(__name__)

__all__ = ["NativeFileSystem"]


def _reason(error: OSError) -> str:
    return error.strerror or str(error)


def _to_bytes(content: FileContent) -> bytes:
    if isinstance(content, bytes):
        return content
    return content.encode("utf-8")


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


class NativeFileSystem:
    """Filesystem backed by the host operating system.

    Satisfies the FileSystem protocol structurally.
    """

    def __init__(self, settings: FileSystemSettings | None = None) -> None:
        """Initialize the filesystem.

        Args:
            settings: Configuration. Defaults to `FileSystemSettings()`.
        """
        self.settings = settings or FileSystemSettings()

    # -- Path queries --------------------------------------------------

    def is_absolute_path(self, path: PathLike) -> bool:
        return paths.is_absolute_path(path)

    def is_relative_path(self, path: PathLike) -> bool:
        return paths.is_relative_path(path)

    def escape_path(self, path: PathLike) -> str:
        return paths.escape_path(path)

    def real_path(self, path: PathLike) -> str:
        return paths.real_path(path)

    def normalized_real_path(self, path: PathLike) -> str:
        return paths.normalized_real_path(path)

    def make_path_relative(self, end_path: PathLike, start_path: PathLike) -> str:
        return paths.make_path_relative(end_path, start_path)

    def readlink(self, path: PathLike, canonicalize: bool = False) -> str | None:
        path = os.fspath(path)
        if not canonicalize:
            if not os.path.islink(path):
                return None
            return os.readlink(path)
        if not os.path.exists(path):
            return None
        return os.path.realpath(path)

    def exists(self, files: Paths) -> bool:
        return all(os.path.exists(path) for path in iter_paths(files))

    def is_readable(self, path: PathLike) -> bool:
        return os.path.exists(path) and os.access(path, os.R_OK)

    def is_readable_file(self, path: PathLike) -> bool:
        return os.path.isfile(path) and os.access(path, os.R_OK)

    def is_readable_directory(self, path: PathLike) -> bool:
        return os.path.isdir(path) and os.access(path, os.R_OK)

    # -- Reading -------------------------------------------------------

    def read_file(self, filename: PathLike) -> str:
        filename = os.fspath(filename)
        if os.path.isdir(filename):
            raise FileSystemIOError(
                f'Failed to read file "{filename}": File is a directory.', filename
            )
        try:
            with open(filename, encoding="utf-8") as handle:
                return handle.read()
        except FileNotFoundError as e:
            raise PathNotFoundError(
                f'Failed to read file "{filename}": {_reason(e)}', filename
            ) from e
        except OSError as e:
            raise FileSystemIOError(f'Failed to read file "{filename}": {_reason(e)}', filename) from e

    def create_finder(self) -> Finder:
        return Finder()

    # -- Mutations -----------------------------------------------------

    def copy(
        self, origin_file: PathLike, target_file: PathLike, overwrite_newer_files: bool = False
    ) -> None:
        origin = os.fspath(origin_file)
        target = os.fspath(target_file)
        if not os.path.isfile(origin):
            raise PathNotFoundError(
                f'Failed to copy "{origin}" because file does not exist.', origin
            )
        if not overwrite_newer_files and self._is_newer(target, origin):
            raise FileSystemIOError(
                f'Failed to copy "{origin}" to "{target}" because the target file is newer.',
                target,
            )

        logger.debug("Copying %s to %s", origin, target)
        parent = os.path.dirname(target)
        if parent:
            self.mkdir(parent)
        try:
            shutil.copy2(origin, target)
        except OSError as e:
            raise FileSystemIOError(
                f'Failed to copy "{origin}" to "{target}": {_reason(e)}', target
            ) from e

    def mkdir(self, dirs: Paths, mode: int = 0o777) -> None:
        for directory in iter_paths(dirs):
            if os.path.isdir(directory):
                continue
            logger.debug("Creating directory %s", directory)
            try:
                os.makedirs(directory, mode, exist_ok=True)
            except OSError as e:
                raise FileSystemIOError(
                    f'Failed to create "{directory}": {_reason(e)}', directory
                ) from e

    def touch(self, files: Paths, time: float | None = None, atime: float | None = None) -> None:
        if time is None and atime is None:
            times = None
        else:
            mtime = time if time is not None else current_time()
            times = (atime if atime is not None else mtime, mtime)

        for path in iter_paths(files):
            logger.debug("Touching %s", path)
            try:
                if not os.path.exists(path):
                    with open(path, "a"):
                        pass
                os.utime(path, times)
            except OSError as e:
                raise FileSystemIOError(f'Failed to touch "{path}": {_reason(e)}', path) from e

    def remove(self, files: Paths) -> None:
        for path in reversed(iter_paths(files)):
            if not os.path.lexists(path):
                continue
            logger.debug("Removing %s", path)
            try:
                if os.path.islink(path):
                    if os.name == "nt" and os.path.isdir(path):
                        os.rmdir(path)
                    else:
                        os.unlink(path)
                elif os.path.isdir(path):
                    shutil.rmtree(path)
                else:
                    os.unlink(path)
            except OSError as e:
                raise FileSystemIOError(f'Failed to remove "{path}": {_reason(e)}', path) from e

    def chmod(self, files: Paths, mode: int, umask: int = 0o000, recursive: bool = False) -> None:
        for path in iter_paths(files):
            if recursive and os.path.isdir(path) and not os.path.islink(path):
                self.chmod(self._children(path), mode, umask, True)
            logger.debug("Changing mode of %s to %o", path, mode & ~umask)
            try:
                os.chmod(path, mode & ~umask)
            except OSError as e:
                raise FileSystemIOError(f'Failed to chmod file "{path}": {_reason(e)}', path) from e

    def chown(self, files: Paths, user: str | int, recursive: bool = False) -> None:
        self._change_owner("chown", files, user, recursive)

    def chgrp(self, files: Paths, group: str | int, recursive: bool = False) -> None:
        self._change_owner("chgrp", files, group, recursive)

    def rename(self, origin: PathLike, target: PathLike, overwrite: bool = False) -> None:
        origin = os.fspath(origin)
        target = os.fspath(target)
        if os.path.lexists(target):
            if not overwrite:
                raise FileSystemIOError(
                    f'Cannot rename "{origin}" because the target "{target}" already exists.', target
                )
            if os.path.isdir(target) and not os.path.islink(target):
                self.remove(target)

        logger.debug("Renaming %s to %s", origin, target)
        try:
            os.replace(origin, target)
        except OSError as e:
            raise FileSystemIOError(
                f'Cannot rename "{origin}" to "{target}": {_reason(e)}', target
            ) from e

    def symlink(self, origin_dir: PathLike, target_dir: PathLike, copy_on_windows: bool = False) -> None:
        origin = os.fspath(origin_dir)
        target = os.fspath(target_dir)
        if os.name == "nt" and copy_on_windows:
            self.mirror(origin, target)
            return

        parent = os.path.dirname(target)
        if parent:
            self.mkdir(parent)
        if os.path.islink(target):
            if os.readlink(target) == origin:
                return
            self.remove(target)

        logger.debug("Linking %s to %s", target, origin)
        try:
            os.symlink(origin, target, target_is_directory=os.path.isdir(origin))
        except OSError as e:
            raise FileSystemIOError(
                f'Failed to create symbolic link from "{origin}" to "{target}": {_reason(e)}',
                target,
            ) from e

    def hardlink(self, origin_file: PathLike, target_files: Paths) -> None:
        origin = os.fspath(origin_file)
        if not os.path.exists(origin):
            raise PathNotFoundError(f'Origin file "{origin}" does not exist.', origin)
        if not os.path.isfile(origin):
            raise PathNotFoundError(f'Origin file "{origin}" is not a file.', origin)

        for target in iter_paths(target_files):
            if os.path.isfile(target):
                if os.path.samefile(origin, target):
                    continue
                self.remove(target)
            logger.debug("Hard linking %s to %s", target, origin)
            try:
                os.link(origin, target)
            except OSError as e:
                raise FileSystemIOError(
                    f'Failed to create hard link from "{origin}" to "{target}": {_reason(e)}',
                    target,
                ) from e

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
        origin_root = os.fspath(origin_dir).rstrip("/\\")
        target_root = os.fspath(target_dir).rstrip("/\\")
        if not os.path.isdir(origin_root):
            raise PathNotFoundError(
                f'The origin directory specified "{origin_root}" was not found.', origin_root
            )
        follow_links = copy_on_windows and os.name == "nt"

        if delete and os.path.isdir(target_root):
            stale = [
                path
                for path in self._walk(target_root, follow_links=False)
                if not os.path.lexists(origin_root + path[len(target_root):])
            ]
            self.remove(stale)

        logger.debug("Mirroring %s to %s", origin_root, target_root)
        self.mkdir(target_root)
        entries = (
            self._walk(origin_root, follow_links)
            if iterator is None
            else (os.fspath(path) for path in iterator)
        )
        for path in entries:
            if path.rstrip("/\\") == origin_root:
                continue
            target = target_root + path[len(origin_root):]
            if os.path.islink(path) and not follow_links:
                self.symlink(os.readlink(path), target)
            elif os.path.isdir(path):
                self.mkdir(target)
            elif os.path.isfile(path):
                if not override and self._is_newer(target, path):
                    continue
                self.copy(path, target, overwrite_newer_files=True)
            else:
                raise FileSystemIOError(f'Unable to guess "{path}" file type.', path)

    def dump_file(self, filename: PathLike, content: FileContent = "") -> None:
        filename = os.path.abspath(filename)
        if os.path.islink(filename):
            # Write through the link to its target.
            filename = os.path.join(os.path.dirname(filename), os.readlink(filename))
        directory = os.path.dirname(filename)
        self.mkdir(directory)
        if os.path.exists(filename):
            mode = stat.S_IMODE(os.stat(filename).st_mode)
        else:
            mode = 0o666 & ~_current_umask()

        logger.debug("Dumping %s", filename)
        tmp_file = None
        try:
            fd, tmp_file = tempfile.mkstemp(prefix=os.path.basename(filename) + ".", dir=directory)
            with os.fdopen(fd, "wb") as handle:
                handle.write(_to_bytes(content))
            os.chmod(tmp_file, mode)
            os.replace(tmp_file, filename)
        except OSError as e:
            if tmp_file is not None and os.path.exists(tmp_file):
                os.unlink(tmp_file)
            raise FileSystemIOError(
                f'Failed to write file "{filename}": {_reason(e)}', filename
            ) from e

    def append_to_file(self, filename: PathLike, content: FileContent, lock: bool = False) -> None:
        filename = os.fspath(filename)
        directory = os.path.dirname(os.path.abspath(filename))
        self.mkdir(directory)

        logger.debug("Appending to %s", filename)
        try:
            with open(filename, "ab") as handle:
                if lock and fcntl is not None:
                    fcntl.flock(handle, fcntl.LOCK_EX)
                handle.write(_to_bytes(content))
        except OSError as e:
            raise FileSystemIOError(
                f'Failed to write file "{filename}": {_reason(e)}', filename
            ) from e

    # -- Temporary resources -------------------------------------------

    def tempnam(self, dir: PathLike, prefix: str, suffix: str = "") -> str:
        dir = os.fspath(dir)
        try:
            fd, path = tempfile.mkstemp(suffix=suffix, prefix=prefix, dir=dir)
        except OSError as e:
            raise FileSystemIOError(
                f'A temporary file could not be created in "{dir}": {_reason(e)}', dir
            ) from e
        os.close(fd)
        logger.debug("Created temporary file %s", path)
        return path

    def tmp_file(self, prefix: str, suffix: str = "", target_dir: PathLike | None = None) -> str:
        return self.tempnam(self._tmp_target(target_dir), prefix, suffix)

    def tmp_dir(self, prefix: str, target_dir: PathLike | None = None) -> str:
        directory = self._tmp_target(target_dir)
        try:
            path = tempfile.mkdtemp(prefix=prefix, dir=directory)
        except OSError as e:
            raise FileSystemIOError(
                f'A temporary directory could not be created in "{directory}": {_reason(e)}',
                directory,
            ) from e
        logger.debug("Created temporary directory %s", path)
        return path

    def get_namespaced_tmp_dir(self, namespace: str) -> str:
        # The temp root may itself be a symlink (/var -> /private/var on macOS).
        root = paths.normalized_real_path(self.settings.tmp_root)
        directory = root + "/" + namespace.strip("/\\")
        self.mkdir(directory)
        return directory

    def make_tmp_dir(self, namespace: str, class_name: str) -> str:
        short_name = class_name.replace("\\", ".").rsplit(".", 1)[-1]
        return self.escape_path(self.tmp_dir(short_name, self.get_namespaced_tmp_dir(namespace)))

    # -- Internal ------------------------------------------------------

    def _tmp_target(self, target_dir: PathLike | None) -> str:
        return os.fspath(target_dir if target_dir is not None else self.settings.tmp_root)

    def _is_newer(self, target: str, origin: str) -> bool:
        """Check whether target exists and was modified after origin."""
        if not os.path.exists(target):
            return False
        return os.path.getmtime(target) > os.path.getmtime(origin)

    def _children(self, directory: str) -> list[str]:
        return [os.path.join(directory, name) for name in os.listdir(directory)]

    def _walk(self, root: str, follow_links: bool) -> Iterator[str]:
        """Yield every path below root, each directory before its content."""
        for current, dirnames, filenames in os.walk(root, followlinks=follow_links):
            dirnames.sort()
            for name in sorted(filenames):
                yield os.path.join(current, name)
            for name in dirnames:
                yield os.path.join(current, name)

    def _change_owner(self, operation: str, files: Paths, owner: str | int, recursive: bool) -> None:
        if not hasattr(os, "chown"):
            raise FileSystemIOError(f'The operation "{operation}" is not supported on this platform.')

        try:
            owner_id = self._resolve_owner(operation, owner)
        except KeyError as e:
            raise FileSystemIOError(f'Failed to {operation}: unknown owner "{owner}".') from e

        for path in iter_paths(files):
            if recursive and os.path.isdir(path) and not os.path.islink(path):
                self._change_owner(operation, self._children(path), owner, True)
            uid, gid = (owner_id, -1) if operation == "chown" else (-1, owner_id)
            logger.debug("Running %s on %s (%s)", operation, path, owner)
            try:
                if os.path.islink(path):
                    os.lchown(path, uid, gid)
                else:
                    os.chown(path, uid, gid)
            except OSError as e:
                raise FileSystemIOError(
                    f'Failed to {operation} file "{path}": {_reason(e)}', path
                ) from e

    @staticmethod
    def _resolve_owner(operation: str, owner: str | int) -> int:
        if isinstance(owner, int):
            return owner
        if operation == "chown":
            import pwd

            return pwd.getpwnam(owner).pw_uid
        import grp

        return grp.getgrnam(owner).gr_gid
