"""Tests for run_subprocess_with_context error enrichment."""

import sys

import pytest

from stashfav.core.subprocess import CommandError, run_subprocess_with_context


def test_successful_command_returns_output() -> None:
    result = run_subprocess_with_context(
        [sys.executable, "-c", "print('hello')"], operation_context="say hello"
    )

    assert result.stdout.strip() == "hello"


def test_failed_command_carries_context_and_stderr() -> None:
    with pytest.raises(CommandError) as exc_info:
        run_subprocess_with_context(
            [sys.executable, "-c", "import sys; sys.stderr.write('boom\\n'); sys.exit(3)"],
            operation_context="explode",
        )

    error = exc_info.value
    assert error.returncode == 3
    assert error.stderr == "boom"
    assert error.stdout == ""
    assert "Failed to explode" in str(error)
    assert "Exit code: 3" in str(error)


def test_missing_binary_is_reported() -> None:
    with pytest.raises(CommandError) as exc_info:
        run_subprocess_with_context(
            ["definitely-not-a-real-binary-xyz"], operation_context="run nothing"
        )

    assert exc_info.value.returncode is None
    assert "Command not found" in str(exc_info.value)


def test_failed_command_keeps_stdout() -> None:
    with pytest.raises(CommandError) as exc_info:
        run_subprocess_with_context(
            [sys.executable, "-c", "print('CONFLICT (content): x'); raise SystemExit(1)"],
            operation_context="merge",
        )

    assert exc_info.value.stdout == "CONFLICT (content): x"
    assert exc_info.value.stderr == ""
