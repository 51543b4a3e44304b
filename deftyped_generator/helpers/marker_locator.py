"""Upward search for marker files.

Walks from a start directory towards the filesystem root looking for a
well-known file (``package.json``, ``tsd.json``). Missing markers, unreadable
directories and broken marker content are all ordinary outcomes here and are
reported as ``None`` rather than raised.
"""

from __future__ import annotations

import json
from pathlib import Path

# Parsed JSON object from a marker file
MarkerData = dict[str, object]


def locate_marker(filename: str, start_dir: Path | str | None = None) -> Path | None:
    """Find the nearest ``filename`` in ``start_dir`` or any of its ancestors.

    Args:
        filename: Marker file name to look for (e.g. 'package.json')
        start_dir: Directory to start from (default: current working directory)

    Returns:
        Absolute path to the marker file, or None when no ancestor has it
    """
    try:
        current = Path.cwd() if start_dir is None else Path(start_dir)
        # Resolve first so symlinked ancestors cannot loop the ascent
        current = current.resolve()
        while True:
            candidate = current / filename
            if candidate.is_file():
                return candidate
            parent = current.parent
            if parent == current:
                break
            current = parent
    except OSError:
        return None

    return None


def read_marker(marker_path: Path) -> MarkerData | None:
    """Parse a marker file as a JSON object.

    Returns:
        The decoded object, or None for unreadable, invalid or non-object content
    """
    try:
        raw_data: object = json.loads(marker_path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return None

    if not isinstance(raw_data, dict):
        return None

    return raw_data
