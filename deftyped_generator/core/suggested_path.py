"""Suggested target directory and typing directory computation."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from deftyped_generator.core.environment import (
    PROBES,
    EnvironmentKind,
    EnvironmentProbe,
)


class TargetExistsError(FileExistsError):
    """Raised when the typing output directory already exists."""

    def __init__(self, typing_dir: Path) -> None:
        self.typing_dir = typing_dir
        super().__init__(f'The directory: "{typing_dir}" already exists.')


@dataclass(frozen=True)
class SuggestedPath:
    """Alternate target directory offered to the user.

    Attributes:
        offered: True only when an environment was recognized and its root
            differs from the current working directory
        relative_path: Root relative to the current working directory
        kind: Environment that produced the suggestion
    """
    offered: bool
    relative_path: str = "."
    kind: EnvironmentKind = EnvironmentKind.NONE


NO_SUGGESTION = SuggestedPath(offered=False)


def resolve_suggested_path(
    cwd: Path | str | None = None,
    probes: tuple[EnvironmentProbe, ...] = PROBES,
) -> SuggestedPath:
    """Decide whether to offer a suggested target directory.

    The first probe (in priority order) that verifies decides the outcome.
    When its root is the current directory nothing is offered, and lower
    priority probes are not consulted.

    Args:
        cwd: Current working directory (default: Path.cwd())
        probes: Probes in priority order

    Returns:
        SuggestedPath with at most one offer
    """
    current = (Path.cwd() if cwd is None else Path(cwd)).resolve()

    for env_probe in probes:
        root = env_probe.get_root(current)
        if root is None:
            continue
        if root == current:
            return NO_SUGGESTION
        return SuggestedPath(
            offered=True,
            relative_path=os.path.relpath(root, current),
            kind=env_probe.kind,
        )

    return NO_SUGGESTION


def build_typing_dir(
    typing_name: str,
    suggestion: SuggestedPath = NO_SUGGESTION,
    use_suggested_path: bool = False,
) -> Path:
    """Build the output directory for a typing, relative to the cwd.

    Example:
        >>> build_typing_dir("jquery", SuggestedPath(True, ".."), True)
        PosixPath('../jquery')
    """
    base = suggestion.relative_path if use_suggested_path and suggestion.offered else "."
    return Path(base) / typing_name


def ensure_target_available(typing_dir: Path, cwd: Path | str | None = None) -> None:
    """Raise TargetExistsError if typing_dir (relative to cwd) already exists."""
    base = Path.cwd() if cwd is None else Path(cwd)
    # lexists: a dangling symlink still occupies the name
    if os.path.lexists(base / typing_dir):
        raise TargetExistsError(typing_dir)
