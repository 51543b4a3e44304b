"""Create typing boilerplate directories."""

from __future__ import annotations

from pathlib import Path

from deftyped_generator.core.constants import (
    DEFINITION_SUFFIX,
    TESTS_SUFFIX,
    TSCPARAMS_SUFFIX,
)
from deftyped_generator.core.suggested_path import (
    TargetExistsError,
    ensure_target_available,
)
from deftyped_generator.core.templates import (
    get_definition_template,
    get_tests_template,
    get_tscparams_template,
)
from deftyped_generator.core.types import TypingAnswers
from deftyped_generator.helpers.helpers_logging import print_success


def scaffold_files(answers: TypingAnswers) -> list[tuple[str, str]]:
    """Return (file name, content) pairs for a typing, in write order."""
    name = answers.typing_name
    return [
        (f"{name}{DEFINITION_SUFFIX}", get_definition_template(answers)),
        (f"{name}{TESTS_SUFFIX}", get_tests_template(answers)),
        (f"{name}{TSCPARAMS_SUFFIX}", get_tscparams_template()),
    ]


def create_typing_scaffold(
    typing_dir: Path,
    answers: TypingAnswers,
    cwd: Path | None = None,
) -> list[Path]:
    """Create the typing directory and write the boilerplate files.

    Files are written one after another; if a later write fails the earlier
    ones are left in place.

    Args:
        typing_dir: Output directory, relative to cwd
        answers: Collected prompt answers
        cwd: Base directory (default: current working directory)

    Returns:
        Paths of the written files

    Raises:
        TargetExistsError: If typing_dir already exists
    """
    base = Path.cwd() if cwd is None else cwd
    ensure_target_available(typing_dir, base)

    target = base / typing_dir
    try:
        target.mkdir(parents=True)
    except FileExistsError as exc:
        raise TargetExistsError(typing_dir) from exc
    print_success(f"Created directory: {typing_dir}/")

    written: list[Path] = []
    for file_name, content in scaffold_files(answers):
        file_path = target / file_name
        file_path.write_text(content, encoding="utf-8")
        written.append(file_path)
        print_success(f"Created {typing_dir / file_name}")

    return written
