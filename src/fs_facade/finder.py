"""Directory listing: file records and a small fluent finder."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from dataclasses import dataclass, replace

from pydantic import BaseModel, ConfigDict

from fs_facade.errors import PathNotFoundError
from fs_facade.types import PathLike

logger = logging.getLogger(__name__)

__all__ = ["FileInfo", "Finder"]


class FileInfo(BaseModel):
    """A file found below a listing root.

    Attributes:
        pathname: Full path of the entry, as found.
        relative_path: Directory of the entry, relative to the listing root.
        relative_pathname: Path of the entry, relative to the listing root.
        contents: Preloaded contents. When unset, `get_contents` reads
            the file through the shared filesystem.
    """

    model_config = ConfigDict(frozen=True)

    pathname: str
    relative_path: str
    relative_pathname: str
    contents: str | None = None

    @property
    def path(self) -> str:
        """Directory part of `pathname`, empty when it has none."""
        return os.path.dirname(self.pathname)

    @property
    def filename(self) -> str:
        return os.path.basename(self.pathname)

    @property
    def filename_without_extension(self) -> str:
        return os.path.splitext(self.filename)[0]

    def __fspath__(self) -> str:
        return self.pathname

    def get_contents(self) -> str:
        """Return the file contents.

        Raises:
            FileSystemIOError: If the contents are not preloaded and the
                file cannot be read.
        """
        if self.contents is not None:
            return self.contents
        from fs_facade.facade import get_instance

        return get_instance().read_file(self.pathname)


@dataclass(frozen=True)
class Finder:
    """Lists entries below one or more directories.

    Every refinement returns a new finder; iteration yields `FileInfo`
    records with absolute pathnames, sorted by pathname.

    Example:
        >>> names = [info.pathname for info in Finder().in_dir("/tmp").depth(0)]
    """

    dirs: tuple[str, ...] = ()
    exact_depth: int | None = None
    only_files: bool = False
    only_directories: bool = False

    def in_dir(self, *dirs: PathLike) -> Finder:
        """Add directories to search in."""
        return replace(self, dirs=self.dirs + tuple(os.path.abspath(d) for d in dirs))

    def depth(self, level: int) -> Finder:
        """Only keep entries at the given depth; 0 means immediate children."""
        if level < 0:
            raise ValueError(f"Depth must be positive, got {level}")
        return replace(self, exact_depth=level)

    def files(self) -> Finder:
        return replace(self, only_files=True, only_directories=False)

    def directories(self) -> Finder:
        return replace(self, only_files=False, only_directories=True)

    def __iter__(self) -> Iterator[FileInfo]:
        found: list[FileInfo] = []
        for root in self.dirs:
            if not os.path.isdir(root):
                raise PathNotFoundError.for_path(root)
            found.extend(self._walk(root))
        return iter(sorted(found, key=lambda info: info.pathname))

    def _walk(self, root: str) -> Iterator[FileInfo]:
        logger.debug("Listing %s (depth=%s)", root, self.exact_depth)
        for current, dirnames, filenames in os.walk(root):
            relative_dir = os.path.relpath(current, root)
            relative_dir = "" if relative_dir == os.curdir else relative_dir
            level = relative_dir.count(os.sep) + 1 if relative_dir else 0

            if self.exact_depth is not None and level >= self.exact_depth:
                # Nothing below this level can match.
                descend: list[str] = []
            else:
                descend = dirnames
            if self.exact_depth is None or level == self.exact_depth:
                for name in sorted(dirnames + filenames):
                    pathname = os.path.join(current, name)
                    if self.only_files and not os.path.isfile(pathname):
                        continue
                    if self.only_directories and not os.path.isdir(pathname):
                        continue
                    yield FileInfo(
                        pathname=pathname,
                        relative_path=relative_dir,
                        relative_pathname=os.path.join(relative_dir, name),
                    )
            dirnames[:] = descend
