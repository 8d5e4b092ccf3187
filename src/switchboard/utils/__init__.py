"""Generic utility modules for switchboard."""

from .persistence import PydanticPersistence

__all__ = ["PydanticPersistence"]
