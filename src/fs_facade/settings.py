"""Runtime configuration for filesystem handles."""

from __future__ import annotations

import os
import tempfile
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

ENV_PREFIX = "FS_FACADE_"

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _default_tmp_root() -> Path:
    return Path(tempfile.gettempdir())


class FileSystemSettings(BaseModel):
    """Settings shared by the filesystem implementations.

    Attributes:
        tmp_root: Directory under which temporary files and directories
            are created when no target directory is given.
        read_only: Build a read-only handle instead of a native one.
        fail_on_write: For read-only handles, raise on mutation instead
            of silently skipping it.
    """

    model_config = ConfigDict(frozen=True)

    tmp_root: Path = Field(default_factory=_default_tmp_root)
    read_only: bool = False
    fail_on_write: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> FileSystemSettings:
        """Load settings from ``FS_FACADE_*`` environment variables.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Returns:
            Settings with unset variables left at their defaults.
        """
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}

        tmp_root = env.get(f"{ENV_PREFIX}TMP_ROOT")
        if tmp_root:
            values["tmp_root"] = Path(tmp_root)
        for name in ("read_only", "fail_on_write"):
            raw = env.get(f"{ENV_PREFIX}{name.upper()}")
            if raw is not None:
                values[name] = raw.strip().lower() in _TRUE_VALUES

        return cls.model_validate(values)
