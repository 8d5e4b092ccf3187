"""CLI commands for switchboard."""

from .check import check
from .config import config_group
from .expand import expand
from .modules import modules_group

__all__ = ["check", "config_group", "expand", "modules_group"]
