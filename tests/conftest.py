"""Shared fixtures for the deftyped test suite.

Provides an isolated ``workspace`` directory (the test's cwd) and a
``write_marker`` factory for laying out ``package.json`` / ``tsd.json``
marker files anywhere in that tree.
"""

from __future__ import annotations

import json
import os
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

# (directory, file name, content) -> marker path. Dict content is JSON-encoded,
# string content is written verbatim (for malformed markers).
WriteMarker = Callable[[Path, str, "dict[str, object] | str"], Path]


@pytest.fixture()
def workspace(tmp_path: Path) -> Iterator[Path]:
    """Create an isolated, symlink-resolved directory and cd into it.

    Yields:
        Path to the temporary workspace root.

    After the test, the working directory is restored.
    """
    root = tmp_path.resolve()
    original_cwd = Path.cwd()
    os.chdir(root)
    try:
        yield root
    finally:
        os.chdir(original_cwd)


@pytest.fixture()
def write_marker() -> WriteMarker:
    """Return a helper that writes a marker file, creating parent dirs.

    Usage in tests::

        def test_probe(workspace: Path, write_marker: WriteMarker) -> None:
            write_marker(workspace, "package.json", {"name": "DefinitelyTyped"})
    """

    def _write(directory: Path, filename: str, content: dict[str, object] | str) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        marker = directory / filename
        text = content if isinstance(content, str) else json.dumps(content)
        marker.write_text(text, encoding="utf-8")
        return marker

    return _write
