"""End-to-end tests for the ``deftyped`` command.

Drives the click command with ``CliRunner``, feeding answers through stdin
exactly as a user would type them at the prompts.

Coverage matrix
---------------
- Plain directory (no environment): typing created in cwd
- DefinitelyTyped checkout: suggestion offered, accepted and declined
- TSD project: suggestion into the typings directory
- Validation: empty required answers are asked again
- Existing target directory: fatal, nothing written
- Guide opening: only with "more info" and without ``--skip-install``
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import MagicMock, patch

import click
import pytest
from click.testing import CliRunner, Result

from deftyped_generator.cli.commands import cli
from deftyped_generator.core.constants import GUIDE_URL

# Mark all tests in this module as CLI end-to-end tests
pytestmark = pytest.mark.cli


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _answers(*lines: str) -> str:
    return "\n".join(lines) + "\n"


# name, version, url, github, more info
_JQUERY = ("jquery", "2.1", "http://jquery.com", "octocat")


@pytest.fixture()
def launch() -> Iterator[MagicMock]:
    """Stub out browser launching."""
    with patch("click.launch") as launcher:
        yield launcher


def _invoke(stdin: str, *args: str) -> Result:
    runner = CliRunner()
    return runner.invoke(cli, list(args), input=stdin, standalone_mode=False)


def _write_json(path: Path, data: dict[str, object]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")


def _assert_typing_files(typing_dir: Path, name: str) -> None:
    for suffix in (".d.ts", "-tests.ts", "-tests.ts.tscparams"):
        assert (typing_dir / f"{name}{suffix}").is_file(), f"File missing: {name}{suffix}"


# ---------------------------------------------------------------------------
# Happy paths
# ---------------------------------------------------------------------------


def test_plain_directory_creates_typing_in_cwd(workspace: Path, launch: MagicMock) -> None:
    result = _invoke(_answers(*_JQUERY, "n"))

    assert result.exception is None, result.output
    assert result.return_value == 0
    assert "Welcome to DefinitelyTyped typing boilerplate!" in result.output
    assert "Would you like to create the typing at" not in result.output
    _assert_typing_files(workspace / "jquery", "jquery")
    definition = (workspace / "jquery" / "jquery.d.ts").read_text(encoding="utf-8")
    assert definition.startswith("// Type definitions for jquery 2.1\n")
    launch.assert_not_called()


def test_definitely_typed_suggestion_accepted(
    workspace: Path, launch: MagicMock, monkeypatch: pytest.MonkeyPatch,
) -> None:
    _write_json(workspace / "package.json", {"name": "DefinitelyTyped"})
    cwd = workspace / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)

    result = _invoke(_answers("y", *_JQUERY, "n"))

    assert result.exception is None, result.output
    assert "DefinitelyTyped repository" in result.output
    assert '".."' in result.output
    _assert_typing_files(workspace / "jquery", "jquery")
    assert not (cwd / "jquery").exists()


def test_enter_accepts_suggestion(
    workspace: Path, launch: MagicMock, monkeypatch: pytest.MonkeyPatch,
) -> None:
    _write_json(workspace / "package.json", {"name": "DefinitelyTyped"})
    cwd = workspace / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)

    result = _invoke(_answers("", *_JQUERY, "n"))

    assert result.exception is None, result.output
    assert "[Y/n]" in result.output
    _assert_typing_files(workspace / "jquery", "jquery")
    assert not (cwd / "jquery").exists()


def test_definitely_typed_suggestion_declined(
    workspace: Path, launch: MagicMock, monkeypatch: pytest.MonkeyPatch,
) -> None:
    _write_json(workspace / "package.json", {"name": "DefinitelyTyped"})
    cwd = workspace / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)

    result = _invoke(_answers("n", *_JQUERY, "n"))

    assert result.exception is None, result.output
    _assert_typing_files(cwd / "jquery", "jquery")
    assert not (workspace / "jquery").exists()


def test_tsd_suggestion_targets_typings_dir(workspace: Path, launch: MagicMock) -> None:
    _write_json(workspace / "tsd.json", {"version": "v4", "path": "typings"})

    result = _invoke(_answers("y", *_JQUERY, "n"))

    assert result.exception is None, result.output
    assert "TSD tool" in result.output
    _assert_typing_files(workspace / "typings" / "jquery", "jquery")


def test_no_suggestion_inside_repository_root(workspace: Path, launch: MagicMock) -> None:
    _write_json(workspace / "package.json", {"name": "DefinitelyTyped"})

    result = _invoke(_answers(*_JQUERY, "n"))

    assert result.exception is None, result.output
    assert "Would you like to create the typing at" not in result.output
    _assert_typing_files(workspace / "jquery", "jquery")


def test_empty_required_answers_are_asked_again(workspace: Path, launch: MagicMock) -> None:
    result = _invoke(_answers("", "  ", "jquery", "", "http://jquery.com", "octocat", "n"))

    assert result.exception is None, result.output
    assert result.output.count("A value is required.") == 2
    unversioned = (workspace / "jquery" / "jquery.d.ts").read_text(encoding="utf-8")
    assert unversioned.startswith("// Type definitions for jquery\n")


# ---------------------------------------------------------------------------
# Guide opening
# ---------------------------------------------------------------------------


def test_more_info_opens_guide(workspace: Path, launch: MagicMock) -> None:
    result = _invoke(_answers(*_JQUERY, "y"))

    assert result.exception is None, result.output
    launch.assert_called_once_with(GUIDE_URL)


def test_more_info_defaults_to_yes(workspace: Path, launch: MagicMock) -> None:
    result = _invoke(_answers(*_JQUERY, ""))

    assert result.exception is None, result.output
    launch.assert_called_once_with(GUIDE_URL)


def test_skip_install_never_opens_guide(workspace: Path, launch: MagicMock) -> None:
    result = _invoke(_answers(*_JQUERY, "y"), "--skip-install")

    assert result.exception is None, result.output
    launch.assert_not_called()
    _assert_typing_files(workspace / "jquery", "jquery")


# ---------------------------------------------------------------------------
# Error paths
# ---------------------------------------------------------------------------


def test_existing_target_is_fatal(workspace: Path, launch: MagicMock) -> None:
    (workspace / "jquery").mkdir()

    result = _invoke(_answers(*_JQUERY, "y"))

    assert result.return_value == 1
    assert 'The directory: "jquery" already exists.' in result.output
    assert list((workspace / "jquery").iterdir()) == []
    launch.assert_not_called()


def test_dangling_symlink_target_is_fatal(workspace: Path, launch: MagicMock) -> None:
    (workspace / "jquery").symlink_to(workspace / "nowhere")

    result = _invoke(_answers(*_JQUERY, "y"))

    assert result.exception is None, result.output
    assert result.return_value == 1
    assert 'The directory: "jquery" already exists.' in result.output
    assert not (workspace / "nowhere").exists()
    launch.assert_not_called()


def test_closed_stdin_aborts(workspace: Path, launch: MagicMock) -> None:
    result = _invoke("jquery\n")

    assert isinstance(result.exception, click.Abort)
    assert not (workspace / "jquery").exists()
