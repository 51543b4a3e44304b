"""Repository environment discovery.

Two environments are recognized, in priority order:

- a DefinitelyTyped checkout (``package.json`` whose ``name`` is
  ``DefinitelyTyped``), rooted at the directory holding that file;
- a TSD-managed project (``tsd.json`` with a ``path`` field), rooted at the
  typings directory that ``path`` points to.

Both are instances of one ``EnvironmentProbe`` strategy, parametrized by the
marker file name, a validity check over the parsed marker, and a function that
computes the root from the marker's directory and content. Probes never cache:
every call reads the filesystem again.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from deftyped_generator.core.constants import (
    DEFINITELY_TYPED_MARKER,
    DEFINITELY_TYPED_NAME,
    TSD_MARKER,
)
from deftyped_generator.helpers.marker_locator import (
    MarkerData,
    locate_marker,
    read_marker,
)


class EnvironmentKind(Enum):
    """Kind of environment the tool is running in."""
    NONE = "none"
    PRIMARY_REPOSITORY = "definitely-typed"
    TOOL_CONFIG = "tsd"


@dataclass(frozen=True)
class ProbeResult:
    """Outcome of one probe; root_path is set iff recognized."""
    recognized: bool
    root_path: Path | None = None

    @classmethod
    def not_recognized(cls) -> ProbeResult:
        return cls(recognized=False)


@dataclass(frozen=True)
class EnvironmentProbe:
    """Marker-file based environment check.

    Attributes:
        kind: Environment reported when the probe recognizes its marker
        marker_name: File name searched for upwards from the start directory
        is_valid: Predicate over the parsed marker content
        compute_root: Builds the root from (marker directory, marker content)
    """
    kind: EnvironmentKind
    marker_name: str
    is_valid: Callable[[MarkerData], bool]
    compute_root: Callable[[Path, MarkerData], Path]

    def probe(self, start_dir: Path | str | None = None) -> ProbeResult:
        """Locate, parse and validate the marker, then compute the root."""
        marker_path = locate_marker(self.marker_name, start_dir)
        if marker_path is None:
            return ProbeResult.not_recognized()

        marker_data = read_marker(marker_path)
        if marker_data is None or not self.is_valid(marker_data):
            return ProbeResult.not_recognized()

        root = self.compute_root(marker_path.parent, marker_data)
        return ProbeResult(recognized=True, root_path=_normalize(root))

    def verify(self, start_dir: Path | str | None = None) -> bool:
        """Return True when this environment is active."""
        return self.probe(start_dir).recognized

    def get_root(self, start_dir: Path | str | None = None) -> Path | None:
        """Return the environment root, or None when not active."""
        return self.probe(start_dir).root_path


def _normalize(path: Path) -> Path:
    """Make a path absolute and collapse '.' and '..' segments."""
    return Path(os.path.normpath(os.path.abspath(path)))


# ============================================================================
# DefinitelyTyped checkout
# ============================================================================


def _is_definitely_typed_package(marker: MarkerData) -> bool:
    return marker.get("name") == DEFINITELY_TYPED_NAME


def _marker_directory(marker_dir: Path, _marker: MarkerData) -> Path:
    return marker_dir


DEFINITELY_TYPED_PROBE = EnvironmentProbe(
    kind=EnvironmentKind.PRIMARY_REPOSITORY,
    marker_name=DEFINITELY_TYPED_MARKER,
    is_valid=_is_definitely_typed_package,
    compute_root=_marker_directory,
)


# ============================================================================
# TSD tool config
# ============================================================================


def _has_tsd_path(marker: MarkerData) -> bool:
    # Empty string counts as present: the root becomes the marker directory
    return isinstance(marker.get("path"), str)


def _tsd_typings_directory(marker_dir: Path, marker: MarkerData) -> Path:
    # Always relative to the marker: "/typings" means <marker_dir>/typings
    return marker_dir / str(marker["path"]).lstrip("/\\")


TSD_PROBE = EnvironmentProbe(
    kind=EnvironmentKind.TOOL_CONFIG,
    marker_name=TSD_MARKER,
    is_valid=_has_tsd_path,
    compute_root=_tsd_typings_directory,
)

# Priority order: the first recognizing probe governs path suggestion
PROBES: tuple[EnvironmentProbe, ...] = (DEFINITELY_TYPED_PROBE, TSD_PROBE)


def detect_environment(
    start_dir: Path | str | None = None,
    probes: tuple[EnvironmentProbe, ...] = PROBES,
) -> tuple[EnvironmentKind, Path | None]:
    """Detect the current working environment.

    Args:
        start_dir: Directory to probe from (default: current working directory)
        probes: Probes in priority order

    Returns:
        tuple: (kind, root) of the first recognizing probe,
            or (EnvironmentKind.NONE, None) when none recognizes
    """
    for env_probe in probes:
        result = env_probe.probe(start_dir)
        if result.recognized:
            return env_probe.kind, result.root_path

    return EnvironmentKind.NONE, None
