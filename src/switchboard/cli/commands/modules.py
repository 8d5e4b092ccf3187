"""Installed module commands."""

from pathlib import Path
from typing import Optional

import click

from switchboard.exceptions import ResourceNotFoundError, SwitchboardError
from switchboard.models import FrameworkConfig
from switchboard.resources import ModuleResources


@click.group(name="modules")
def modules_group():
    """Installed module commands."""
    pass


@modules_group.command(name="list")
@click.option(
    "--modules-dir",
    "-d",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Modules directory (default: from config)",
)
@click.pass_context
def list_modules(ctx, modules_dir: Optional[Path]):
    """List installed modules."""
    if modules_dir is None:
        config_path = (ctx.obj or {}).get("config_path")
        modules_dir = FrameworkConfig.load_or_default(config_path).modules_dir

    resources = ModuleResources(modules_dir)
    try:
        entries = resources.get_loaded_modules_info()
        names = [str(entry.get("name", entry)) if isinstance(entry, dict) else str(entry) for entry in entries]
    except ResourceNotFoundError:
        names = resources.list_module_names()
    except SwitchboardError as e:
        click.echo(f"ERROR: {e.user_message}", err=True)
        raise SystemExit(1)

    if not names:
        click.echo(f"No modules found in {modules_dir}")
        return

    click.echo(f"Modules in {modules_dir}:\n")
    for name in names:
        click.echo(f"  - {name}")
