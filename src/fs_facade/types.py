"""Shared type aliases for filesystem operations."""

from __future__ import annotations

import os
from collections.abc import Iterable
from typing import Union

__all__ = ["FileContent", "PathLike", "Paths", "iter_paths"]

PathLike = Union[str, "os.PathLike[str]"]
"""A single path, as a string or path-like object."""

Paths = Union[PathLike, Iterable[PathLike]]
"""One path or an iterable of paths."""

FileContent = Union[str, bytes]


def iter_paths(paths: Paths) -> list[str]:
    """Flatten a single path or an iterable of paths into strings.

    Args:
        paths: A path or an iterable of paths.

    Returns:
        List of path strings, in input order.
    """
    if isinstance(paths, (str, os.PathLike)):
        return [os.fspath(paths)]
    return [os.fspath(path) for path in paths]
