"""Process-wide filesystem accessor.

Code that cannot receive a filesystem explicitly goes through `FS`,
which forwards every `FileSystem` operation to a shared instance:

    >>> from fs_facade import FS
    >>> FS.is_absolute_path("/tmp")
    True

The shared instance is created lazily and can be swapped, e.g. by tests.
Whoever swaps it is responsible for restoring it; `use_filesystem` does
that automatically.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from fs_facade.protocols import FileSystem

logger = logging.getLogger(__name__)

__all__ = ["FS", "get_instance", "set_instance", "use_filesystem"]

_instance: FileSystem | None = None

FACADE_METHODS: frozenset[str] = frozenset(
    name for name in dir(FileSystem) if not name.startswith("_")
)


def get_instance() -> FileSystem:
    """Return the shared filesystem, creating a `NativeFileSystem` on first use."""
    global _instance
    if _instance is None:
        from fs_facade.context import default_filesystem

        _instance = default_filesystem()
    return _instance


def set_instance(filesystem: FileSystem) -> None:
    """Replace the shared filesystem."""
    global _instance
    logger.debug("Replacing shared filesystem with %r", filesystem)
    _instance = filesystem


@contextmanager
def use_filesystem(filesystem: FileSystem) -> Iterator[FileSystem]:
    """Temporarily replace the shared filesystem.

    Args:
        filesystem: Filesystem to use inside the block.

    Yields:
        The filesystem given.
    """
    previous = get_instance()
    set_instance(filesystem)
    try:
        yield filesystem
    finally:
        set_instance(previous)


class _FileSystemFacade:
    """Forwards `FileSystem` operations to the shared instance."""

    __slots__ = ()

    def __getattr__(self, name: str) -> Any:
        if name not in FACADE_METHODS:
            raise AttributeError(f"FS has no operation '{name}'")
        return getattr(get_instance(), name)

    def __dir__(self) -> list[str]:
        return sorted(FACADE_METHODS)

    def __repr__(self) -> str:
        return f"FS({get_instance()!r})"


FS = _FileSystemFacade()
