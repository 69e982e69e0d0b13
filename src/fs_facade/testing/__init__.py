"""Test-support helpers: sandboxed working directories and file records."""

from fs_facade.testing.file_info import FileInfoBuilder
from fs_facade.testing.sandbox import (
    FileSystemSandbox,
    FileSystemTestCase,
    natural_case_sort_key,
    natural_sort_key,
    normalize_paths,
)

__all__ = [
    "FileInfoBuilder",
    "FileSystemSandbox",
    "FileSystemTestCase",
    "natural_case_sort_key",
    "natural_sort_key",
    "normalize_paths",
]
