"""Text rendering of stash entries for terminal output."""

import click

from stashfav.core.stash_favorites import StashEntry

FAVORITE_MARKER = "★ "
PLAIN_MARKER = "  "


def format_stash_entry(entry: StashEntry, *, use_color: bool = False) -> str:
    """Format one entry as `★ stash@{0}: description` (two spaces when not a favorite)."""
    if entry.is_favorite:
        marker = click.style(FAVORITE_MARKER, fg="yellow") if use_color else FAVORITE_MARKER
    else:
        marker = PLAIN_MARKER
    return f"{marker}{entry.stash_id}: {entry.description}"


def echo_entries(entries: tuple[StashEntry, ...], *, use_color: bool) -> None:
    for entry in entries:
        click.echo(format_stash_entry(entry, use_color=use_color))
