"""Protocol definitions: framework events and collaborator interfaces."""

from .collaborators import Device, PresentationSink, ResourceLoader, TemplateRenderer
from .events import FrameworkEvent

__all__ = [
    "Device",
    "FrameworkEvent",
    "PresentationSink",
    "ResourceLoader",
    "TemplateRenderer",
]
