"""Device-related exceptions.

These surface on the `config_error` and `refresh_error` events; the engine
never raises them to the code that triggered a read or write.
"""

from typing import Any, Optional

from .base import SwitchboardError


class DeviceError(SwitchboardError):
    """Base class for device I/O errors."""

    def __init__(self, user_message: str, register: Optional[str] = None, **kwargs):
        super().__init__(user_message, **kwargs)
        self.register = register


class NoDeviceSelectedError(DeviceError):
    """A write was requested while no device is selected."""

    def __init__(self, register: Optional[str] = None):
        super().__init__(
            user_message="No device selected",
            technical_message=f"Cannot access register {register}: no device selected",
            register=register,
            recoverable=True,
            recovery_hint="Select a device before changing its configuration",
        )


class DeviceWriteError(DeviceError):
    """Writing a register on the active device failed."""

    def __init__(self, register: str, value: Any, original_error: Optional[str] = None):
        super().__init__(
            user_message=f"Failed to write {register}",
            technical_message=f"Write {register}={value!r} failed: {original_error}",
            register=register,
            recoverable=True,
        )
        self.value = value
        self.original_error = original_error


class DeviceReadError(DeviceError):
    """Reading registers from the active device failed."""

    def __init__(self, registers: list[str], original_error: Optional[str] = None):
        super().__init__(
            user_message=f"Failed to read {len(registers)} register(s)",
            technical_message=f"Read of {registers} failed: {original_error}",
            recoverable=True,
        )
        self.registers = registers
        self.original_error = original_error
