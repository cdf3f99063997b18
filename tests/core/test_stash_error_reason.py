"""Tests for how RealStashBackend condenses git output into an error message."""

from stashfav.core.stash.real import _first_error_line
from stashfav.core.subprocess import CommandError


def _error(*, stdout: str = "", stderr: str = "", returncode: int | None = 1) -> CommandError:
    return CommandError(
        "Failed to pop stash@{0}\nCommand: git stash pop stash@{0}\nExit code: 1",
        stdout=stdout,
        stderr=stderr,
        returncode=returncode,
    )


def test_prefers_error_line_on_stderr() -> None:
    error = _error(stderr="hint: something\nerror: stash@{9} is not a valid reference")

    assert _first_error_line(error) == "error: stash@{9} is not a valid reference"


def test_conflict_reported_on_stdout() -> None:
    error = _error(
        stdout="Auto-merging file.txt\nCONFLICT (content): Merge conflict in file.txt\n"
        "The stash entry is kept in case you need it again."
    )

    assert _first_error_line(error) == "CONFLICT (content): Merge conflict in file.txt"


def test_falls_back_to_first_stderr_line() -> None:
    error = _error(stderr="\nsomething went wrong\nmore detail", stdout="unrelated")

    assert _first_error_line(error) == "something went wrong"


def test_falls_back_to_first_stdout_line() -> None:
    assert _first_error_line(_error(stdout="  only stdout  ")) == "only stdout"


def test_silent_failure_never_leaks_diagnostic() -> None:
    message = _first_error_line(_error(returncode=128))

    assert message == "git exited with code 128"
