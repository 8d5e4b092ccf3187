"""Range notation expansion command."""

from typing import Optional

import click

from switchboard.exceptions import ConfigurationError
from switchboard.ranges import expand_name, expand_pair


@click.command(name="expand")
@click.argument("pattern")
@click.argument("template", required=False)
def expand(pattern: str, template: Optional[str]):
    """
    Show the names PATTERN expands to.

    With TEMPLATE, show the register/element pairs a binding declaring
    PATTERN as its register and TEMPLATE as its element id would create.
    """
    try:
        if template is None:
            for name in expand_name(pattern):
                click.echo(name)
        else:
            for binding, element in expand_pair(pattern, template):
                click.echo(f"{binding}\t{element}")
    except ConfigurationError as e:
        click.echo(f"ERROR: {e.user_message}", err=True)
        if e.technical_message != e.user_message:
            click.echo(e.technical_message, err=True)
        raise SystemExit(1)
