"""Device implementations."""

from .simulated import SimulatedDevice

__all__ = ["SimulatedDevice"]
