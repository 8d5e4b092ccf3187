"""Protocols for the collaborators the framework drives.

The framework only ever talks to these interfaces. Concrete
implementations live in `switchboard.presentation`, `switchboard.devices`
and `switchboard.resources`; a host application can supply its own.
"""

from collections.abc import Callable, Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class PresentationSink(Protocol):
    """Listener attachment and value mutation surface of the UI."""

    def on(self, selector: str, event_name: str, handler: Callable[[Any], None]) -> None:
        """
        Attach a handler for `event_name` on the elements matched by `selector`.

        The handler receives the UI event object.
        """
        ...

    def off(self, selector: str, event_name: str) -> None:
        """Detach the handler previously attached for `event_name` on `selector`."""
        ...

    def set_html(self, selector: str, value: Any) -> None:
        """Replace the displayed content of the matched elements."""
        ...

    def get_value(self, selector: str) -> Any:
        """Return the current input value of the matched element."""
        ...


@runtime_checkable
class Device(Protocol):
    """Register-level access to a device."""

    def write(self, register: str, value: Any) -> None:
        """
        Write `value` to `register`.

        Raises:
            Exception: Any failure; the framework reports it on `config_error`.
        """
        ...

    def read(self, registers: list[str]) -> Mapping[str, Any]:
        """
        Read a snapshot of register values.

        Registers the device cannot report right now may be left out of the
        returned mapping.
        """
        ...


@runtime_checkable
class ResourceLoader(Protocol):
    """Locates and retrieves module assets."""

    def exists(self, path: str) -> bool:
        ...

    def read_text(self, path: str) -> str:
        """
        Raises:
            ResourceNotFoundError: If the file does not exist
        """
        ...

    def get_json(self, path: str) -> Any:
        """
        Raises:
            ResourceNotFoundError: If the file does not exist
            ResourceInvalidError: If the file is not valid JSON
        """
        ...

    def resolve_external_uri(self, resource: str) -> str:
        """Resolve a `module/resource` reference to a loadable path."""
        ...


@runtime_checkable
class TemplateRenderer(Protocol):
    """Renders view templates."""

    def render(self, template_text: str, context: Mapping[str, Any]) -> str:
        """
        Raises:
            TemplateRenderError: If the template cannot be compiled or rendered
        """
        ...
