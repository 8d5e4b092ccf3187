"""Resource-related exceptions (module assets, JSON files, templates)."""

from .base import SwitchboardError


class ResourceError(SwitchboardError):
    """A module resource could not be located, read or rendered."""

    def __init__(self, user_message: str, location: str | None = None, **kwargs):
        super().__init__(user_message, **kwargs)
        self.location = location


class ResourceNotFoundError(ResourceError):
    """A module resource does not exist."""

    def __init__(self, location: str, kind: str = "resource"):
        super().__init__(
            user_message=f"Could not find {kind} at {location}.",
            location=location,
            recoverable=True,
            recovery_hint="Check that the module is installed in the modules directory",
        )
        self.kind = kind


class ResourceInvalidError(ResourceError):
    """A module resource exists but its contents cannot be decoded."""

    def __init__(self, location: str, parse_error: str):
        super().__init__(
            user_message=f"Could not decode {location}",
            technical_message=f"Failed to decode {location}: {parse_error}",
            location=location,
            recoverable=True,
        )
        self.parse_error = parse_error


class TemplateRenderError(ResourceError):
    """A view template failed to compile or render."""

    def __init__(self, location: str | None, render_error: str):
        super().__init__(
            user_message=f"Template {location or '<inline>'} could not be rendered",
            technical_message=f"Template render error in {location}: {render_error}",
            location=location,
            recoverable=True,
        )
        self.render_error = render_error
