"""User-facing output with mode awareness."""

from abc import ABC, abstractmethod

import click


class UserFeedback(ABC):
    """Provides user-facing output that's mode-aware.

    Commands call ctx.feedback methods instead of threading a `quiet` boolean
    through every function.

    Two modes:
    - Interactive: Show all messages
    - Quiet: Suppress info/success, still show warnings and errors

    Usage:
        result = ctx.stashes.apply(stash_id)
        if result.success:
            ctx.feedback.success(result.message)
        else:
            ctx.feedback.error(result.message)

    Mode behavior:
        info(), success() -> stdout (suppressed in quiet mode)
        warning(), error() -> stderr (always shown)
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show informational message (suppressed in quiet mode)."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show success message (suppressed in quiet mode)."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Show warning message (always shown)."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Show error message (always shown)."""


class InteractiveFeedback(UserFeedback):
    """Feedback shown in interactive mode (all messages)."""

    def __init__(self, use_color: bool = True) -> None:
        self._use_color = use_color

    def _style(self, message: str, fg: str) -> str:
        if not self._use_color:
            return message
        return click.style(message, fg=fg)

    def info(self, message: str) -> None:
        click.echo(message)

    def success(self, message: str) -> None:
        click.echo(self._style(message, "green"))

    def warning(self, message: str) -> None:
        click.echo(self._style(message, "yellow"), err=True)

    def error(self, message: str) -> None:
        click.echo(self._style(message, "red"), err=True)


class QuietFeedback(InteractiveFeedback):
    """Feedback for --quiet: only warnings and errors are shown."""

    def info(self, message: str) -> None:
        pass

    def success(self, message: str) -> None:
        pass
