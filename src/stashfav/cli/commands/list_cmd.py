"""List commands: every stash, or favorites only."""

import click

from stashfav.cli.json_output import emit_model
from stashfav.cli.json_schemas import StashListResponse
from stashfav.cli.rendering import echo_entries
from stashfav.core.context import StashfavContext


@click.command("list")
@click.option("--json", "as_json", is_flag=True, help="Output the stash list as JSON.")
@click.option(
    "--grouped",
    is_flag=True,
    help="Show favorites first, then the other stashes.",
)
@click.pass_obj
def list_cmd(ctx: StashfavContext, as_json: bool, grouped: bool) -> None:
    """List all stashes with favorite status."""
    use_color = ctx.global_config.use_color

    if as_json:
        emit_model(StashListResponse.from_listing(ctx.stashes.list_all()))
        return

    if grouped:
        groups = ctx.stashes.list_grouped()
        if groups.error is not None:
            ctx.feedback.error(f"Error getting stashes: {groups.error}")
            return
        click.echo(click.style("★ Favorites:", bold=True) if use_color else "★ Favorites:")
        if groups.favorites:
            echo_entries(groups.favorites, use_color=use_color)
        else:
            click.echo("  (none)")
        click.echo(click.style("Other stashes:", bold=True) if use_color else "Other stashes:")
        if groups.others:
            echo_entries(groups.others, use_color=use_color)
        else:
            click.echo("  (none)")
        return

    listing = ctx.stashes.list_all()
    if listing.error is not None:
        ctx.feedback.error(f"Error getting stashes: {listing.error}")
    click.echo("All stashes (★ = favorite):")
    echo_entries(listing.entries, use_color=use_color)


@click.command("favorites")
@click.option("--json", "as_json", is_flag=True, help="Output favorite stashes as JSON.")
@click.pass_obj
def favorites_cmd(ctx: StashfavContext, as_json: bool) -> None:
    """List only favorite stashes."""
    listing = ctx.stashes.list_favorites()

    if as_json:
        emit_model(StashListResponse.from_listing(listing))
        return

    if listing.error is not None:
        ctx.feedback.error(f"Error getting stashes: {listing.error}")
        return

    if listing.is_empty:
        click.echo("No favorite stashes found.")
        return

    click.echo("Favorite stashes:")
    echo_entries(listing.entries, use_color=ctx.global_config.use_color)
