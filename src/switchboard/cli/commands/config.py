"""Framework configuration commands."""

from pathlib import Path
from typing import Optional

import click

from switchboard.exceptions import SwitchboardError, format_error_for_display
from switchboard.models import FrameworkConfig
from switchboard.models.config import DEFAULT_CONFIG_PATH


def _config_path(ctx) -> Path:
    return (ctx.obj or {}).get("config_path") or DEFAULT_CONFIG_PATH


def _load(ctx) -> FrameworkConfig:
    try:
        return FrameworkConfig.load_or_default(_config_path(ctx))
    except SwitchboardError as e:
        message, hint = format_error_for_display(e)
        click.echo(f"ERROR: {message}", err=True)
        if hint:
            click.echo(hint, err=True)
        raise SystemExit(1)


@click.group(name="config")
def config_group():
    """Show or change the framework configuration."""
    pass


@config_group.command(name="show")
@click.pass_context
def show(ctx):
    """Display the configuration."""
    config = _load(ctx)
    click.echo(f"Config file: {_config_path(ctx)}\n")
    for field, value in config.model_dump().items():
        click.echo(f"  {field}: {value}")


@config_group.command(name="set")
@click.option("--refresh-rate", type=click.IntRange(min=1), default=None, help="Read cycle period (ms)")
@click.option(
    "--modules-dir", type=click.Path(file_okay=False, path_type=Path), default=None,
    help="Modules directory",
)
@click.option("--view-selector", type=str, default=None, help="Element receiving module views")
@click.pass_context
def set_config(
    ctx,
    refresh_rate: Optional[int],
    modules_dir: Optional[Path],
    view_selector: Optional[str],
):
    """Update configuration values."""
    updates = {
        key: value
        for key, value in (
            ("refresh_rate", refresh_rate),
            ("modules_dir", modules_dir),
            ("view_selector", view_selector),
        )
        if value is not None
    }
    if not updates:
        click.echo("Nothing to update. See 'switchboard config set --help'.")
        return

    config = _load(ctx).model_copy(update=updates)
    config.save(_config_path(ctx))
    for key, value in updates.items():
        click.echo(f"Set {key} = {value}")


@config_group.command(name="reset")
@click.pass_context
def reset(ctx):
    """Reset the configuration to defaults."""
    FrameworkConfig().save(_config_path(ctx))
    click.echo("Configuration reset to defaults")
