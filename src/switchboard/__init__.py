"""Switchboard: declarative bindings between UI controls and device registers."""

__version__ = "0.1.0"

from .core import BindingTable, EventDispatcher, Framework, Refresher
from .models import BindingRecord, ConfigControl, Direction, FrameworkConfig, ModuleInfo
from .protocols import FrameworkEvent
from .ranges import expand_name, expand_pair

__all__ = [
    "BindingRecord",
    "BindingTable",
    "ConfigControl",
    "Direction",
    "EventDispatcher",
    "Framework",
    "FrameworkConfig",
    "FrameworkEvent",
    "ModuleInfo",
    "Refresher",
    "expand_name",
    "expand_pair",
]
