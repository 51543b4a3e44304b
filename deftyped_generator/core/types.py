"""Type definitions for typing scaffolding.

Answers are collected by the prompt sequence as a flat name -> value mapping
and converted into ``TypingAnswers`` once all questions are answered.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

Answers = Mapping[str, object]
"""Raw prompt answers keyed by question name."""


@dataclass(frozen=True)
class TypingAnswers:
    """Answers describing one typing submission."""
    typing_name: str
    typing_version: str
    library_url: str
    github_name: str
    use_suggested_path: bool = False
    more_info_at_the_end: bool = True

    @classmethod
    def from_answers(cls, answers: Answers) -> TypingAnswers:
        """Build from a prompt answer mapping, trimming text answers."""
        return cls(
            typing_name=str(answers["typing_name"]).strip(),
            typing_version=str(answers.get("typing_version") or "").strip(),
            library_url=str(answers["library_url"]).strip(),
            github_name=str(answers["github_name"]).strip(),
            use_suggested_path=bool(answers.get("use_suggested_path", False)),
            more_info_at_the_end=bool(answers.get("more_info_at_the_end", True)),
        )
