"""pytest fixtures for sandboxed filesystem tests.

Import the fixture into a ``conftest.py`` to make it available:

    from fs_facade.testing.fixtures import fs_sandbox  # noqa: F401

The sandbox namespace defaults to the test name; override it with the
``fs_namespace`` marker:

    @pytest.mark.fs_namespace("my-namespace")
    def test_something(fs_sandbox): ...
"""

from __future__ import annotations

import re
from collections.abc import Iterator

import pytest

from fs_facade.testing.sandbox import FileSystemSandbox

_UNSAFE_CHARS_RE = re.compile(r"[^A-Za-z0-9_.-]+")
_MAX_NAMESPACE_LENGTH = 64


def sandbox_namespace(request: pytest.FixtureRequest) -> str:
    """Derive a directory-safe namespace for the requesting test."""
    marker = request.node.get_closest_marker("fs_namespace")
    if marker is not None and marker.args:
        return str(marker.args[0])
    name = _UNSAFE_CHARS_RE.sub("-", request.node.name).strip("-.")
    return name[:_MAX_NAMESPACE_LENGTH] or "fs-facade"


@pytest.fixture
def fs_sandbox(request: pytest.FixtureRequest) -> Iterator[FileSystemSandbox]:
    """Run the test inside a fresh temporary working directory."""
    sandbox = FileSystemSandbox(sandbox_namespace(request))
    try:
        sandbox.set_up()
        yield sandbox
    finally:
        sandbox.tear_down()
