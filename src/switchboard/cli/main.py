"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from switchboard import __version__

from .commands import check, config_group, expand, modules_group

logger = logging.getLogger(__name__)


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging
        log_file: Custom log file path (optional)
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    if debug or log_file:
        if log_file:
            level = getattr(logging, log_level.upper())
            log_path = log_file
        else:
            log_path = Path.cwd() / "switchboard-debug.log"

        # Rotating file handler (keeps last 5 files, max 10MB each)
        handler: logging.Handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=10 * 1024 * 1024,
            backupCount=5
        )
    elif verbose:
        log_path = None
        handler = logging.StreamHandler(sys.stderr)
    else:
        # Warnings and errors still reach stderr through logging.lastResort
        return

    handler.setLevel(level)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")


@click.group()
@click.version_option(version=__version__, prog_name="switchboard")
@click.option(
    '--config-path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Framework config file (default: ~/.switchboard/config.json)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./switchboard-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
@click.pass_context
def cli(
    ctx,
    config_path: Optional[Path],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    Switchboard - bind UI controls to device registers.

    \b
    Examples:
      # Show the names a range expands to
      switchboard expand 'AIN#(0:3)'

      # Pair registers with element ids
      switchboard expand 'AIN#(0:1)' 'ain-#(0:1)-display'

      # Validate a module's bindings
      switchboard check ./modules/analog_inputs

      # List installed modules
      switchboard modules list
    """
    setup_logging(verbose, debug, log_file, log_level)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


cli.add_command(expand)
cli.add_command(check)
cli.add_command(modules_group)
cli.add_command(config_group)

if __name__ == "__main__":
    cli()
