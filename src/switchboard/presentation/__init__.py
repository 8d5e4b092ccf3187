"""Presentation sinks."""

from .memory import InMemoryPresentation

__all__ = ["InMemoryPresentation"]
