"""Build the StashfavContext for a CLI invocation."""

import click

from stashfav.core.context import StashfavContext, create_context


def load_context_or_exit(*, quiet: bool) -> StashfavContext:
    """Create the production context, or print the config error and exit 1."""
    try:
        return create_context(quiet=quiet)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1) from e
