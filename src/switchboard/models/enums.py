"""Enumerations for binding declarations."""

from enum import Enum


class Direction(str, Enum):
    """Which way values flow between a register and a UI element."""

    READ = "read"  # Register value is displayed in the element on every read cycle
    WRITE = "write"  # Element event writes the element value to the register
    HYBRID = "hybrid"  # Both: displayed on read, written on element event

    @property
    def is_readable(self) -> bool:
        return self in (Direction.READ, Direction.HYBRID)

    @property
    def is_writable(self) -> bool:
        return self in (Direction.WRITE, Direction.HYBRID)
