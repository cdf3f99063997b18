"""Config commands: inspect and edit ~/.stashfav/config.toml."""

from dataclasses import replace
from pathlib import Path

import click

from stashfav.cli.ensure import Ensure
from stashfav.cli.startup import load_context_or_exit
from stashfav.core.context import StashfavContext
from stashfav.core.global_config import (
    GLOBAL_CONFIG_KEYS,
    GlobalConfig,
    global_config_exists,
    global_config_path,
    load_global_config,
    save_global_config,
)


def _parse_boolean_value(value: str, field_name: str) -> bool:
    """Parse a boolean value from a string.

    Args:
        value: The string value to parse ("true" or "false", case-insensitive)
        field_name: The name of the field being set (for error messages)

    Returns:
        The parsed boolean value

    Raises:
        SystemExit: If the value is not "true" or "false"
    """
    Ensure.invariant(
        value.lower() in ("true", "false"),
        f"Invalid boolean value for {field_name}: {value}",
    )
    return value.lower() == "true"


def _update_global_config_field(
    current_config: GlobalConfig,
    field_name: str,
    value: str,
) -> GlobalConfig:
    """Update a single field in GlobalConfig and return a new instance.

    Raises:
        SystemExit: If the field name is invalid or value is invalid
    """
    match field_name:
        case "favorites_path":
            Ensure.invariant(bool(value.strip()), "favorites_path cannot be empty")
            return replace(current_config, favorites_path=Path(value).expanduser())
        case "use_color":
            return replace(current_config, use_color=_parse_boolean_value(value, field_name))
        case _:
            click.echo(f"Invalid config key: {field_name}", err=True)
            raise SystemExit(1)


def _format_value(config: GlobalConfig, key: str) -> str:
    match key:
        case "favorites_path":
            return str(config.favorites_path)
        case "use_color":
            return str(config.use_color).lower()
        case _:
            click.echo(f"Invalid config key: {key}", err=True)
            raise SystemExit(1)


@click.group("config")
@click.pass_context
def config_group(click_ctx: click.Context) -> None:
    """Manage stashfav configuration."""
    # `config set` works without a context so it can repair a broken file
    if click_ctx.obj is None and click_ctx.invoked_subcommand != "set":
        quiet = click_ctx.find_root().params.get("quiet", False)
        click_ctx.obj = load_context_or_exit(quiet=quiet)


@config_group.command("list")
@click.pass_obj
def config_list(ctx: StashfavContext) -> None:
    """Print a list of configuration keys and values."""
    click.echo(click.style("Global configuration:", bold=True))
    if not global_config_exists():
        click.echo(f"  (no config file at {global_config_path()} - using defaults)")
    for key in GLOBAL_CONFIG_KEYS:
        click.echo(f"  {key}={_format_value(ctx.global_config, key)}")

    click.echo(click.style("\nFavorites:", bold=True))
    favorite_ids = ctx.favorites.favorite_ids()
    if favorite_ids:
        click.echo(f"  {len(favorite_ids)} marked: {', '.join(favorite_ids)}")
    else:
        click.echo("  (none marked)")


@config_group.command("get")
@click.argument("key", metavar="KEY")
@click.pass_obj
def config_get(ctx: StashfavContext, key: str) -> None:
    """Print the value of a given configuration key."""
    click.echo(_format_value(ctx.global_config, key))


@config_group.command("set")
@click.argument("key", metavar="KEY")
@click.argument("value", metavar="VALUE")
def config_set(key: str, value: str) -> None:
    """Update configuration with a value for the given key."""
    config_path = global_config_path()
    try:
        current = load_global_config(config_path, apply_env=False)
    except ValueError as e:
        click.echo(f"Warning: {e}", err=True)
        click.echo("Warning: starting over from default settings", err=True)
        current = GlobalConfig.defaults()

    new_config = _update_global_config_field(current, key, value)
    save_global_config(new_config, config_path)
    click.echo(f"Set {key}={value}")
