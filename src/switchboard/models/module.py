"""Module descriptor model (module.json)."""

from typing import Any

from pydantic import BaseModel, Field

from .binding import ConfigControl


class ModuleInfo(BaseModel):
    """
    Declarative description of a hardware configuration module.

    Bindings are kept as raw mappings so that one malformed binding is
    reported on its own when the module is loaded instead of rejecting
    the whole descriptor.
    """

    name: str
    description: str = ""
    template: str | None = Field(
        default=None, description="View template, relative to the module directory"
    )
    json_files: list[str] = Field(
        default_factory=list, description="JSON files exposed to the template as context.json"
    )
    bindings: list[dict[str, Any]] = Field(default_factory=list)
    config_controls: list[ConfigControl] = Field(default_factory=list)
    refresh_rate: int | None = Field(
        default=None, gt=0, description="Module specific read cycle period (ms)"
    )
