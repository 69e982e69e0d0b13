"""Path resolution helpers.

Pure string functions (absolute-path detection, separator escaping,
canonicalization, relative-path computation) plus the two resolving
functions `real_path` and `normalized_real_path`, which ask the host
filesystem to follow symlinks.

Functions whose output depends on the host separator take a keyword-only
``sep`` argument defaulting to ``os.sep``.
"""

from __future__ import annotations

import os
import re
import warnings

from fs_facade.errors import PathNotFoundError
from fs_facade.types import PathLike

__all__ = [
    "canonicalize",
    "escape_path",
    "is_absolute_path",
    "is_relative_path",
    "make_path_relative",
    "normalized_real_path",
    "real_path",
]

_SEPARATORS = "/\\"
_DRIVE_RE = re.compile(r"^[A-Za-z]:")
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://")


def is_absolute_path(path: PathLike) -> bool:
    """Check whether a path starts at a root.

    Roots are a leading separator (covering UNC prefixes), a drive letter
    followed by a colon, or a URL-like scheme such as ``file://``.

    Args:
        path: Path to check.

    Returns:
        True if the path is absolute, False otherwise (including empty).
    """
    path = os.fspath(path)
    if not path:
        return False
    if path[0] in _SEPARATORS:
        return True
    return bool(_DRIVE_RE.match(path) or _SCHEME_RE.match(path))


def is_relative_path(path: PathLike) -> bool:
    """Check whether a path is relative. An empty path is relative.

    Deprecated: use ``not is_absolute_path(path)``.
    """
    warnings.warn(
        "is_relative_path() is deprecated, use 'not is_absolute_path()' instead.",
        DeprecationWarning,
        stacklevel=2,
    )
    return not is_absolute_path(path)


def escape_path(path: PathLike, *, sep: str = os.sep) -> str:
    """Replace every non-native directory separator with the native one.

    Args:
        path: Path to rewrite.
        sep: Native separator of the target platform.

    Returns:
        The rewritten path. No filesystem access is performed.
    """
    path = os.fspath(path)
    foreign = "\\" if sep == "/" else "/"
    return path.replace(foreign, sep)


def _split_root(path: str) -> tuple[str, str]:
    """Split a forward-slash path into its root and the remainder."""
    scheme = _SCHEME_RE.match(path)
    if scheme:
        rest = path[scheme.end():]
        if rest.startswith("/"):
            return scheme.group(0) + "/", rest.lstrip("/")
        return scheme.group(0), rest
    if _DRIVE_RE.match(path):
        root = path[0].upper() + ":"
        rest = path[2:]
        if rest.startswith("/"):
            return root + "/", rest.lstrip("/")
        return root, rest
    if path.startswith("/"):
        return "/", path.lstrip("/")
    return "", path


def _segments(path: str) -> list[str]:
    stack: list[str] = []
    for segment in path.split("/"):
        if segment in ("", "."):
            continue
        if segment == "..":
            if stack and stack[-1] != "..":
                stack.pop()
            else:
                stack.append(segment)
            continue
        stack.append(segment)
    return stack


def canonicalize(path: PathLike) -> str:
    """Normalize a path as a string, without touching the filesystem.

    Backslashes become forward slashes, ``.`` segments and duplicate
    separators are dropped, ``..`` collapses against the preceding
    segment, and a trailing separator is removed. ``..`` never climbs
    above a root; on a relative path leading ``..`` segments are kept.

    Example:
        >>> canonicalize("C:\\\\a\\\\b\\\\..\\\\c\\\\")
        'C:/a/c'
    """
    path = os.fspath(path).replace("\\", "/")
    if not path:
        return ""
    root, rest = _split_root(path)
    segments = _segments(rest)
    if root:
        segments = [s for s in segments if s != ".."]
    return root + "/".join(segments)


def real_path(path: PathLike, *, sep: str = os.sep) -> str:
    """Resolve symlinks and relative segments to an absolute path.

    Args:
        path: Existing path to resolve. Relative paths are resolved
            against the current working directory.
        sep: Separator used in the result.

    Returns:
        The absolute resolved path, using ``sep`` as separator.

    Raises:
        PathNotFoundError: If the path, or the target of a symlink along
            it, does not exist.
    """
    try:
        resolved = os.path.realpath(path, strict=True)
    except OSError as e:
        raise PathNotFoundError.for_path(path) from e
    return escape_path(resolved, sep=sep)


def normalized_real_path(path: PathLike) -> str:
    """Like `real_path`, but the result always uses forward slashes.

    Raises:
        PathNotFoundError: If the path or a symlink target does not exist.
    """
    return real_path(path).replace("\\", "/")


def make_path_relative(end_path: PathLike, start_path: PathLike) -> str:
    """Compute the relative path from ``start_path`` to ``end_path``.

    Pure segment arithmetic; neither path needs to exist. The result is
    directory style: it ends with ``/``, and ``./`` is returned when both
    paths designate the same location.

    Args:
        end_path: Absolute path to reach.
        start_path: Absolute path to start from.

    Returns:
        The relative path. If both paths carry different drive letters no
        relative path exists, and the absolute end path is returned.

    Raises:
        ValueError: If either path is not absolute.

    Example:
        >>> make_path_relative("/a/b/c", "/a/d")
        '../b/c/'
    """
    end = os.fspath(end_path)
    start = os.fspath(start_path)
    if not is_absolute_path(start):
        raise ValueError(f'The start path "{start}" is not absolute.')
    if not is_absolute_path(end):
        raise ValueError(f'The end path "{end}" is not absolute.')

    end_root, end_rest = _split_root(end.replace("\\", "/"))
    start_root, start_rest = _split_root(start.replace("\\", "/"))
    end_parts = [s for s in _segments(end_rest) if s != ".."]
    start_parts = [s for s in _segments(start_rest) if s != ".."]

    end_drive = end_root[:2] if _DRIVE_RE.match(end_root) else None
    start_drive = start_root[:2] if _DRIVE_RE.match(start_root) else None
    if end_drive and start_drive and end_drive != start_drive:
        return end_drive + "/" + "".join(part + "/" for part in end_parts)

    common = 0
    while (
        common < len(start_parts)
        and common < len(end_parts)
        and start_parts[common] == end_parts[common]
    ):
        common += 1

    traverser = "../" * (len(start_parts) - common)
    remainder = "".join(part + "/" for part in end_parts[common:])
    return (traverser + remainder) or "./"
