"""Interactive prompts for the typing scaffold workflow."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

import click

from deftyped_generator.core.environment import EnvironmentKind
from deftyped_generator.core.suggested_path import SuggestedPath
from deftyped_generator.helpers.helpers_logging import print_warning

# Answer validator: returns True when the answer is acceptable
Validator = Callable[[str], bool]

_SUGGESTION_INTROS: dict[EnvironmentKind, str] = {
    EnvironmentKind.PRIMARY_REPOSITORY: "Hey! Looks like you're in a DefinitelyTyped repository.",
    EnvironmentKind.TOOL_CONFIG: "Hey! Looks like you're using TSD tool!",
}


@dataclass(frozen=True)
class Question:
    """One prompt in the sequence.

    Attributes:
        name: Key of the answer in the returned mapping
        message: Text shown to the user
        confirm: Ask a yes/no question instead of free text
        validate: Predicate the answer must satisfy (free text only)
        default: Value used when the user just presses Enter
    """
    name: str
    message: str
    confirm: bool = False
    validate: Validator | None = None
    default: str | bool | None = None


def validate_required(answer: str | None) -> bool:
    """Reject missing and whitespace-only answers."""
    if not answer:
        return False
    return answer.strip() != ""


def suggestion_question(suggestion: SuggestedPath) -> Question | None:
    """Build the 'use suggested path?' question, or None if nothing is offered."""
    if not suggestion.offered:
        return None

    intro = _SUGGESTION_INTROS.get(suggestion.kind, "Hey! Looks like you're in a known environment.")
    return Question(
        name="use_suggested_path",
        message=(
            f"{intro}\n Would you like to create the typing at "
            f"\"{suggestion.relative_path}\" dir?"
        ),
        confirm=True,
        default=True,
    )


def build_questions(suggestion: SuggestedPath) -> list[Question]:
    """Build the full prompt sequence, led by the optional suggestion question."""
    questions: list[Question] = []

    leading = suggestion_question(suggestion)
    if leading is not None:
        questions.append(leading)

    questions.extend([
        Question(
            name="typing_name",
            message="Please, inform the typing name?",
            validate=validate_required,
        ),
        Question(
            name="typing_version",
            message="What the typing version?",
            default="",
        ),
        Question(
            name="library_url",
            message="What the project library url?",
            validate=validate_required,
        ),
        Question(
            name="github_name",
            message="Inform your Github name?",
            validate=validate_required,
        ),
        Question(
            name="more_info_at_the_end",
            message=(
                "Would you like more information about how to create "
                "TypeScript definitions\n at the end of this installation?"
            ),
            confirm=True,
            default=True,
        ),
    ])
    return questions


def _ask(question: Question) -> str | bool:
    if question.confirm:
        return click.confirm(question.message, default=bool(question.default))

    default = "" if question.default is None else str(question.default)
    while True:
        answer: str = click.prompt(question.message, default=default, show_default=False)
        if question.validate is None or question.validate(answer):
            return answer
        print_warning("A value is required.")


def run_prompts(questions: list[Question]) -> dict[str, str | bool]:
    """Ask each question in order and collect the answers by name.

    Free-text questions are asked again until their validator accepts.

    Raises:
        click.Abort: If the user interrupts the prompt (Ctrl-C / EOF)
    """
    return {question.name: _ask(question) for question in questions}
