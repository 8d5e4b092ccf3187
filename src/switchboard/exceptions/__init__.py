"""
Custom exception hierarchy for Switchboard.

## Exception Hierarchy

```
SwitchboardError (base)
├── ConfigurationError
│   ├── BindingFieldMissingError
│   ├── InvalidDirectionError
│   ├── RangeNotationError
│   ├── ExpansionMismatchError
│   ├── UnknownBindingError
│   ├── UnknownEventError
│   ├── ConfigFileInvalidError
│   └── ConfigValidationError
├── ResourceError
│   ├── ResourceNotFoundError
│   ├── ResourceInvalidError
│   └── TemplateRenderError
├── DeviceError
│   ├── NoDeviceSelectedError
│   ├── DeviceWriteError
│   └── DeviceReadError
└── ExecutionError
```

Configuration, resource and device errors are normally delivered as the
payload of the framework's error events (`load_error`, `config_error`,
`refresh_error`). Only `ExecutionError` escalates by default.
"""

from .base import ExecutionError, SwitchboardError
from .config import (
    BindingFieldMissingError,
    ConfigFileInvalidError,
    ConfigurationError,
    ConfigValidationError,
    ExpansionMismatchError,
    InvalidDirectionError,
    RangeNotationError,
    UnknownBindingError,
    UnknownEventError,
)
from .device import DeviceError, DeviceReadError, DeviceWriteError, NoDeviceSelectedError
from .handlers import (
    ErrorCollector,
    ErrorContext,
    collect_errors,
    describe_validation_error,
    format_error_for_display,
    wrap_pydantic_error,
)
from .resource import (
    ResourceError,
    ResourceInvalidError,
    ResourceNotFoundError,
    TemplateRenderError,
)

__all__ = [
    # Base
    "SwitchboardError",
    "ExecutionError",
    # Config
    "BindingFieldMissingError",
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    "ExpansionMismatchError",
    "InvalidDirectionError",
    "RangeNotationError",
    "UnknownBindingError",
    "UnknownEventError",
    # Device
    "DeviceError",
    "DeviceReadError",
    "DeviceWriteError",
    "NoDeviceSelectedError",
    # Resource
    "ResourceError",
    "ResourceInvalidError",
    "ResourceNotFoundError",
    "TemplateRenderError",
    # Handlers
    "ErrorCollector",
    "ErrorContext",
    "collect_errors",
    "describe_validation_error",
    "format_error_for_display",
    "wrap_pydantic_error",
]
