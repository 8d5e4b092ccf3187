"""Headless module check command."""

import logging
from pathlib import Path

import click

from switchboard.core import Framework
from switchboard.exceptions import SwitchboardError, collect_errors, format_error_for_display
from switchboard.models import FrameworkConfig
from switchboard.presentation import InMemoryPresentation
from switchboard.protocols import FrameworkEvent
from switchboard.resources import ModuleResources

logger = logging.getLogger(__name__)


@click.command(name="check")
@click.argument(
    "module_dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
def check(module_dir: Path):
    """
    Load the module in MODULE_DIR headlessly and report binding errors.

    Exits with status 1 if the module cannot be loaded or any binding,
    config control, template or JSON file is rejected.
    """
    module_dir = module_dir.resolve()
    resources = ModuleResources(module_dir.parent)

    try:
        info = resources.get_module_info(module_dir.name)
    except SwitchboardError as e:
        message, hint = format_error_for_display(e)
        click.echo(f"ERROR: {message}", err=True)
        if hint:
            click.echo(hint, err=True)
        raise SystemExit(1)

    presentation = InMemoryPresentation()
    framework = Framework(
        config=FrameworkConfig(modules_dir=module_dir.parent),
        presentation=presentation,
        resources=resources,
    )

    collector = collect_errors(f"load module {info.name}")
    framework.on(FrameworkEvent.LOAD_ERROR, collector.listener(info.name))
    framework.load_module(info)

    read_count = len(framework.bindings.read_bindings())
    write_count = len(framework.bindings.write_bindings())
    click.echo(f"Module: {info.name}")
    click.echo(f"  Bindings: {framework.num_bindings()} ({read_count} read, {write_count} write)")
    click.echo(f"  Config controls: {len(framework.config_controls)}")
    click.echo(f"  Listeners attached: {presentation.listener_count()}")

    if collector.has_errors:
        click.echo(collector.get_summary(), err=True)
        raise SystemExit(1)
    click.echo("OK")
