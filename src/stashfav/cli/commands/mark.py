"""Mark and unmark commands: edit the favorite set."""

import click

from stashfav.cli.ensure import Ensure
from stashfav.core.context import StashfavContext
from stashfav.core.favorites.types import NotFavorite, PersistFailed


def _warn_persist_failed(ctx: StashfavContext, failure: PersistFailed) -> None:
    ctx.feedback.warning(f"Warning: {failure.message}")


@click.command("mark")
@click.argument("stash_id", metavar="STASH_ID", required=False)
@click.pass_obj
def mark_cmd(ctx: StashfavContext, stash_id: str | None) -> None:
    """Mark a stash as favorite."""
    stash_id = Ensure.stash_id_provided(stash_id)

    outcome = ctx.stashes.mark(stash_id)
    if isinstance(outcome, PersistFailed):
        _warn_persist_failed(ctx, outcome)
    ctx.feedback.success(f"Marked {stash_id} as favorite")


@click.command("unmark")
@click.argument("stash_id", metavar="STASH_ID", required=False)
@click.pass_obj
def unmark_cmd(ctx: StashfavContext, stash_id: str | None) -> None:
    """Unmark a stash as favorite."""
    stash_id = Ensure.stash_id_provided(stash_id)

    outcome = ctx.stashes.unmark(stash_id)
    if isinstance(outcome, NotFavorite):
        ctx.feedback.info(outcome.message)
        return
    if isinstance(outcome, PersistFailed):
        _warn_persist_failed(ctx, outcome)
    ctx.feedback.success(f"Removed {stash_id} from favorites")
