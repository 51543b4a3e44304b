#!/usr/bin/env python3
"""DefinitelyTyped typing boilerplate CLI - Main Entry Point.

Usage:
    deftyped [--skip-install]

Run it from inside a DefinitelyTyped checkout (or a project using the TSD
tool) and it will offer to create the typing next to the other definitions.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from deftyped_generator.cli.prompts import build_questions, run_prompts
from deftyped_generator.core.constants import GUIDE_URL
from deftyped_generator.core.scaffold import create_typing_scaffold
from deftyped_generator.core.suggested_path import (
    TargetExistsError,
    build_typing_dir,
    resolve_suggested_path,
)
from deftyped_generator.core.types import TypingAnswers
from deftyped_generator.helpers.helpers_logging import (
    print_banner,
    print_error,
    print_info,
    print_success,
)

# Exit code used when the user cancels (128 + SIGINT)
_EXIT_CANCELLED = 130


def generate_typing(skip_install: bool = False, cwd: Path | None = None) -> int:
    """Run the interactive typing scaffold.

    Args:
        skip_install: Skip the post-generation info step (no browser)
        cwd: Working directory (default: current working directory)

    Returns:
        Exit code (0 on success)

    Raises:
        TargetExistsError: If the computed typing directory already exists
    """
    base = Path.cwd() if cwd is None else cwd

    print_banner()

    suggestion = resolve_suggested_path(base)
    answers = TypingAnswers.from_answers(run_prompts(build_questions(suggestion)))

    typing_dir = build_typing_dir(
        answers.typing_name,
        suggestion,
        answers.use_suggested_path,
    )
    print_info(f"\nCreating typing at {typing_dir}/ ...\n")
    create_typing_scaffold(typing_dir, answers, base)
    print_success(f"Typing '{answers.typing_name}' created!")

    if not skip_install and answers.more_info_at_the_end:
        print_info(f"Opening {GUIDE_URL}")
        click.launch(GUIDE_URL)

    return 0


@click.command(name="deftyped", help="Generate DefinitelyTyped typing boilerplate")
@click.option("--skip-install", is_flag=True,
              help="Skip the post-generation info step (does not open the guide)")
def cli(skip_install: bool) -> int:
    try:
        return generate_typing(skip_install=skip_install)
    except TargetExistsError as exc:
        print_error(str(exc))
        return 1


def main() -> int:
    """Main CLI entry point."""
    try:
        result = cli.main(
            args=sys.argv[1:],
            prog_name="deftyped",
            standalone_mode=False,
        )
    except click.Abort:
        print("\n⚠️  Cancelled by user")
        return _EXIT_CANCELLED
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    return 0 if result is None else int(result)


if __name__ == "__main__":
    sys.exit(main())
