"""Module asset loading and view rendering."""

from .loader import MODULE_DESC_FILENAME, MODULES_DESC_FILENAME, ModuleResources
from .renderer import JinjaTemplateRenderer

__all__ = [
    "MODULES_DESC_FILENAME",
    "MODULE_DESC_FILENAME",
    "JinjaTemplateRenderer",
    "ModuleResources",
]
