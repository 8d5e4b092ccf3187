"""Binding and config control models."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .enums import Direction


def element_selector(template: str) -> str:
    """Selector for the UI element whose identifier is `template`."""
    return f"#{template}"


class BindingRecord(BaseModel):
    """
    One association between a device register and a UI element.

    `template` and `binding` may still hold range notation when a record is
    declared; records stored in a binding table are always fully expanded.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    binding_class: str = Field(alias="class", description="Free-form category tag")
    template: str = Field(description="UI element identifier, e.g. ain-0-display")
    binding: str = Field(description="Device register name, e.g. AIN0")
    direction: Direction
    event: str | None = Field(
        default=None, description="UI event that triggers a write (write/hybrid only)"
    )

    @model_validator(mode="after")
    def _require_event_for_writes(self) -> "BindingRecord":
        if self.direction.is_writable and not self.event:
            raise ValueError(f"{self.direction.value} bindings require an event")
        return self

    @property
    def selector(self) -> str:
        return element_selector(self.template)

    @property
    def is_readable(self) -> bool:
        return self.direction.is_readable

    @property
    def is_writable(self) -> bool:
        return self.direction.is_writable

    def with_names(self, binding: str, template: str) -> "BindingRecord":
        """Copy this record's class, direction and event onto new names."""
        return self.model_copy(update={"binding": binding, "template": template})


class ConfigControl(BaseModel):
    """A UI event subscription that signals a generic device reconfiguration."""

    model_config = ConfigDict(frozen=True)

    selector: str = Field(description="Selector for the UI element(s) to listen on")
    event: str = Field(description="UI event name, e.g. click")
