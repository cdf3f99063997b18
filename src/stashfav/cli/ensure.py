"""CLI error handling utilities with styled output.

Ensure asserts invariants in CLI commands with consistent, user-friendly error
messages on stderr, followed by exit code 1.
"""

import click

STASH_ID_REQUIRED = "Please provide a stash ID (e.g., stash@{0})"


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def invariant(condition: bool, error_message: str) -> None:
        """Ensure condition is true, otherwise print "Error: <message>" and exit 1."""
        if not condition:
            click.echo("Error: " + error_message, err=True)
            raise SystemExit(1)

    @staticmethod
    def stash_id_provided(stash_id: str | None) -> str:
        """Ensure a stash id argument was given and return it.

        Commands declare the id argument as optional so a missing id exits with
        code 1 and a plain message instead of click's usage error (code 2).
        """
        if stash_id is None or not stash_id.strip():
            click.echo("Error: " + STASH_ID_REQUIRED, err=True)
            raise SystemExit(1)
        return stash_id.strip()
