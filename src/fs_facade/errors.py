"""Exception types raised by filesystem operations."""

from __future__ import annotations

import os

__all__ = [
    "FileSystemIOError",
    "PathNotFoundError",
    "ReadOnlyFileSystemError",
    "SandboxSetupError",
]


class FileSystemIOError(OSError):
    """Generic failure of a filesystem operation.

    Attributes:
        path: The path involved in the failed operation, if any.
    """

    def __init__(self, message: str, path: str | os.PathLike[str] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = os.fspath(path) if path is not None else None

    def __str__(self) -> str:
        return self.message


class PathNotFoundError(FileSystemIOError, FileNotFoundError):
    """A required file, directory or symlink target does not exist."""

    @classmethod
    def for_path(cls, path: str | os.PathLike[str]) -> PathNotFoundError:
        """Build the standard "does not exist" error for a path."""
        return cls(f'The file or directory "{os.fspath(path)}" does not exist.', path)


class ReadOnlyFileSystemError(FileSystemIOError):
    """A mutating operation was attempted on a strict read-only filesystem."""

    def __init__(self, operation: str, path: str | os.PathLike[str] | None = None) -> None:
        super().__init__(
            f'The operation "{operation}" is not allowed on a read-only file system.', path
        )
        self.operation = operation


class SandboxSetupError(RuntimeError):
    """Unrecoverable failure while preparing a sandboxed working directory."""

    pass
