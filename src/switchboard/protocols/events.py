"""Framework lifecycle events.

The set of events is closed: subscribing to a name outside this enum is a
configuration error, firing one is ignored.
"""

from enum import Enum


class FrameworkEvent(str, Enum):
    """Named lifecycle events a module can subscribe to."""

    MODULE_LOAD = "module_load"                # Module bindings registered
    LOAD_TEMPLATE = "load_template"            # Module view rendered
    DEVICE_SELECTION = "device_selection"      # Selected devices changed
    CONFIGURE_DEVICE = "configure_device"      # About to write to the device
    DEVICE_CONFIGURED = "device_configured"    # Write to the device completed
    REFRESH = "refresh"                        # Read snapshot received
    CLOSE_DEVICE = "close_device"              # Active device released
    UNLOAD_MODULE = "unload_module"            # Module torn down
    LOAD_ERROR = "load_error"                  # Bad binding, template or resource
    CONFIG_ERROR = "config_error"              # Device write failed
    REFRESH_ERROR = "refresh_error"            # Device read failed
    EXECUTION_ERROR = "execution_error"        # A handler raised

    @classmethod
    def lookup(cls, name: "str | FrameworkEvent") -> "FrameworkEvent | None":
        """Resolve an event member or its string value; None if unknown."""
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError:
            return None
