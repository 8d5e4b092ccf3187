"""Data models for bindings, modules and framework configuration."""

from .binding import BindingRecord, ConfigControl, element_selector
from .config import DEFAULT_REFRESH_RATE, FrameworkConfig
from .enums import Direction
from .module import ModuleInfo

__all__ = [
    "DEFAULT_REFRESH_RATE",
    "BindingRecord",
    "ConfigControl",
    "Direction",
    "FrameworkConfig",
    "ModuleInfo",
    "element_selector",
]
