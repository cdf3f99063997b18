"""Production StashBackend implementation using the git CLI."""

import logging
from pathlib import Path

from stashfav.core.stash.abc import StashBackend, StashBackendError
from stashfav.core.subprocess import CommandError, run_subprocess_with_context

logger = logging.getLogger(__name__)


class RealStashBackend(StashBackend):
    """Production implementation using subprocess.

    All stash operations execute actual git commands in `cwd`.
    """

    def __init__(self, cwd: Path, git_executable: str = "git") -> None:
        self._cwd = cwd
        self._git = git_executable

    def _run_stash(self, args: list[str], operation_context: str) -> str:
        cmd = [self._git, "stash", *args]
        logger.debug("Running %s in %s", cmd, self._cwd)
        try:
            result = run_subprocess_with_context(cmd, operation_context, cwd=self._cwd)
        except CommandError as e:
            logger.debug("Stash command failed: %s", e)
            raise StashBackendError(_first_error_line(e)) from e
        return result.stdout

    def list_stashes(self) -> list[str]:
        output = self._run_stash(["list"], "list stashes")
        return [line for line in output.splitlines() if line.strip()]

    def apply(self, stash_id: str) -> None:
        self._run_stash(["apply", stash_id], f"apply {stash_id}")

    def pop(self, stash_id: str) -> None:
        self._run_stash(["pop", stash_id], f"pop {stash_id}")

    def drop(self, stash_id: str) -> None:
        self._run_stash(["drop", stash_id], f"drop {stash_id}")


_REASON_PREFIXES = ("error:", "fatal:", "CONFLICT")


def _first_error_line(error: CommandError) -> str:
    """Pick the one line of git's output that explains the failure.

    Most failures are reported on stderr as `error:` or `fatal:`, but a merge
    conflict during apply/pop is reported on stdout as `CONFLICT (...)`.
    """
    stderr_lines = _non_empty_lines(error.stderr)
    stdout_lines = _non_empty_lines(error.stdout)
    for line in [*stderr_lines, *stdout_lines]:
        if line.startswith(_REASON_PREFIXES):
            return line
    if stderr_lines:
        return stderr_lines[0]
    if stdout_lines:
        return stdout_lines[0]
    return f"git exited with code {error.returncode}"


def _non_empty_lines(text: str) -> list[str]:
    return [line.strip() for line in text.splitlines() if line.strip()]
