"""Commands that act on the stash itself: apply, pop, drop.

A failing git command is reported on stderr but the process still exits 0;
only a missing stash id is a usage error.
"""

import click

from stashfav.cli.ensure import Ensure
from stashfav.core.context import StashfavContext
from stashfav.core.stash_favorites import StashOpResult


def _report(ctx: StashfavContext, result: StashOpResult) -> None:
    if not result.success:
        ctx.feedback.error(result.message)
        return
    if result.persist_error is not None:
        ctx.feedback.warning(f"Warning: {result.persist_error.message}")
    ctx.feedback.success(result.message)


@click.command("apply")
@click.argument("stash_id", metavar="STASH_ID", required=False)
@click.pass_obj
def apply_cmd(ctx: StashfavContext, stash_id: str | None) -> None:
    """Apply a stash (keeps it and its favorite flag)."""
    stash_id = Ensure.stash_id_provided(stash_id)
    _report(ctx, ctx.stashes.apply(stash_id))


@click.command("pop")
@click.argument("stash_id", metavar="STASH_ID", required=False)
@click.pass_obj
def pop_cmd(ctx: StashfavContext, stash_id: str | None) -> None:
    """Pop a stash and forget its favorite flag."""
    stash_id = Ensure.stash_id_provided(stash_id)
    _report(ctx, ctx.stashes.pop(stash_id))


@click.command("drop")
@click.argument("stash_id", metavar="STASH_ID", required=False)
@click.pass_obj
def drop_cmd(ctx: StashfavContext, stash_id: str | None) -> None:
    """Drop a stash and forget its favorite flag."""
    stash_id = Ensure.stash_id_provided(stash_id)
    _report(ctx, ctx.stashes.drop(stash_id))
