import click


@click.command("help")
@click.pass_context
def help_cmd(click_ctx: click.Context) -> None:
    """Show this help message."""
    parent = click_ctx.parent if click_ctx.parent is not None else click_ctx
    click.echo(parent.get_help())
