"""Template generation functions for typing scaffolding."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from deftyped_generator.core.constants import DEFINITION_SUFFIX, DEFINITIONS_URL

if TYPE_CHECKING:
    from deftyped_generator.core.types import TypingAnswers


def get_definition_template(answers: TypingAnswers) -> str:
    """Generate the <name>.d.ts definition file.

    Args:
        answers: Collected prompt answers

    Returns:
        Complete definition file content as string
    """
    title = f"{answers.typing_name} {answers.typing_version}".rstrip()

    return f"""// Type definitions for {title}
// Project: {answers.library_url}
// Definitions by: {answers.github_name} <https://github.com/{answers.github_name}>
// Definitions: {DEFINITIONS_URL}

declare module "{answers.typing_name}" {{
}}
"""


_NON_IDENTIFIER = re.compile(r"[^A-Za-z0-9_$]+")


def module_identifier(typing_name: str) -> str:
    """Turn a module name into a TypeScript identifier for the test import.

    Example:
        >>> module_identifier("@scope/angular-ui.router")
        'scope_angular_ui_router'
    """
    identifier = _NON_IDENTIFIER.sub("_", typing_name).strip("_") or "lib"
    if identifier[0].isdigit():
        identifier = f"_{identifier}"
    return identifier


def get_tests_template(answers: TypingAnswers) -> str:
    """Generate the <name>-tests.ts file referencing the definition."""
    definition_file = f"{answers.typing_name}{DEFINITION_SUFFIX}"

    return f"""/// <reference path="{definition_file}" />

import {module_identifier(answers.typing_name)} = require("{answers.typing_name}");
"""


def get_tscparams_template() -> str:
    """Generate the compiler flags file used by the DefinitelyTyped test runner."""
    return "--noImplicitAny\n"
