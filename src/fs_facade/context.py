"""Filesystem context for dependency injection.

Prefer passing a `FileSystemContext` (or just its ``filesystem``) to the
code that needs it over reaching for the shared `FS` accessor. This
separates object creation from object use and lets tests inject doubles.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from fs_facade.protocols import FileSystem
from fs_facade.settings import FileSystemSettings


def default_filesystem(settings: FileSystemSettings | None = None) -> FileSystem:
    """Create the default filesystem implementation for the given settings."""
    from fs_facade.filesystem import NativeFileSystem

    return NativeFileSystem(settings)


@dataclass
class FileSystemContext:
    """Container for the filesystem and its settings.

    The filesystem is typed using the FileSystem Protocol, not a concrete
    class, so test doubles can be injected without inheritance. When no
    filesystem is given, a native one is built from ``settings``.
    """

    settings: FileSystemSettings = field(default_factory=FileSystemSettings)
    filesystem: FileSystem = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.filesystem is None:
            self.filesystem = default_filesystem(self.settings)


def create_context(
    settings: FileSystemSettings | None = None,
    read_only: bool | None = None,
) -> FileSystemContext:
    """Factory for a wired filesystem context.

    Args:
        settings: Settings to use. Defaults to `FileSystemSettings.from_env()`.
        read_only: Override ``settings.read_only``.

    Returns:
        FileSystemContext whose filesystem honours the settings.
    """
    from fs_facade.readonly import ReadOnlyFileSystem

    settings = settings or FileSystemSettings.from_env()
    if read_only is not None:
        settings = settings.model_copy(update={"read_only": read_only})

    filesystem = default_filesystem(settings)
    if settings.read_only:
        filesystem = ReadOnlyFileSystem(settings.fail_on_write, filesystem)

    return FileSystemContext(settings=settings, filesystem=filesystem)
