import logging
import os

import click

from stashfav.cli.commands.config import config_group
from stashfav.cli.commands.help_cmd import help_cmd
from stashfav.cli.commands.list_cmd import favorites_cmd, list_cmd
from stashfav.cli.commands.mark import mark_cmd, unmark_cmd
from stashfav.cli.commands.stash_ops import apply_cmd, drop_cmd, pop_cmd
from stashfav.cli.startup import load_context_or_exit
from stashfav.core.context import StashfavContext
from stashfav.core.user_feedback import QuietFeedback

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

EPILOG = """\b
Examples:
  stashfav mark stash@{0}
  stashfav list
  stashfav favorites
"""

logger = logging.getLogger(__name__)

# Enable debug logging if STASHFAV_DEBUG environment variable is set
if os.getenv("STASHFAV_DEBUG"):
    logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


class HelpFallbackGroup(click.Group):
    """Click group that shows the help text for an unknown command.

    `stashfav frobnicate` behaves like `stashfav help` and exits 0.
    """

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        if args and self.get_command(ctx, args[0]) is None:
            logger.debug("Unknown command %r, showing help", args[0])
            return "help", self.get_command(ctx, "help"), []
        return super().resolve_command(ctx, args)


@click.group(
    cls=HelpFallbackGroup,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    epilog=EPILOG,
)
@click.version_option(package_name="stashfav")
@click.option("-q", "--quiet", is_flag=True, help="Only print warnings and errors.")
@click.pass_context
def cli(ctx: click.Context, quiet: bool) -> None:
    """Manage your favorite git stashes."""
    # Only create context if not already provided (e.g., by tests). The config
    # group builds its own so a broken config file can still be repaired.
    if ctx.obj is None:
        if ctx.invoked_subcommand != "config":
            ctx.obj = load_context_or_exit(quiet=quiet)
    elif quiet and isinstance(ctx.obj, StashfavContext):
        ctx.obj = ctx.obj.with_feedback(
            QuietFeedback(use_color=ctx.obj.global_config.use_color)
        )

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(list_cmd)
cli.add_command(favorites_cmd)
cli.add_command(mark_cmd)
cli.add_command(unmark_cmd)
cli.add_command(apply_cmd)
cli.add_command(pop_cmd)
cli.add_command(drop_cmd)
cli.add_command(config_group)
cli.add_command(help_cmd)


def main() -> None:
    """CLI entry point used by the `stashfav` console script."""
    cli()
