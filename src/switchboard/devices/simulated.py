"""In-memory device used for headless runs and tests."""

import logging
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger(__name__)


class SimulatedDevice:
    """
    Device whose registers are a plain mapping.

    Registers that were never written or seeded are not reported by
    `read`, the same way a real device omits registers it cannot read.
    """

    def __init__(self, name: str = "simulated", registers: Mapping[str, Any] | None = None):
        self.name = name
        self.registers: dict[str, Any] = dict(registers or {})
        self.writes: list[tuple[str, Any]] = []

    def write(self, register: str, value: Any) -> None:
        self.writes.append((register, value))
        self.registers[register] = value
        logger.debug(f"{self.name}: {register} <- {value!r}")

    def read(self, registers: list[str]) -> dict[str, Any]:
        return {name: self.registers[name] for name in registers if name in self.registers}

    def __repr__(self) -> str:
        return f"SimulatedDevice(name={self.name!r}, registers={len(self.registers)})"
