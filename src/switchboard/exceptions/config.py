"""Configuration-related exceptions.

This module defines exceptions for configuration errors:
- ConfigurationError: Base class for configuration errors
- BindingFieldMissingError: A binding declaration lacks a required field
- InvalidDirectionError: A binding declares an unknown direction
- RangeNotationError: A name contains malformed range notation
- ExpansionMismatchError: Binding and template expand to different lengths
- UnknownBindingError: No binding is registered under a template name
- UnknownEventError: A subscriber was registered for an unknown event
- ConfigFileInvalidError: Config file has invalid syntax
- ConfigValidationError: Config values fail validation
"""

from typing import Any

from .base import SwitchboardError


class ConfigurationError(SwitchboardError):
    """Configuration is invalid or cannot be loaded."""
    pass


class BindingFieldMissingError(ConfigurationError):
    """A binding declaration is missing a required attribute."""

    def __init__(self, field: str, template: str | None = None):
        where = f" (template '{template}')" if template else ""
        super().__init__(
            user_message=f"Config binding missing {field}",
            technical_message=f"Config binding missing required field '{field}'{where}",
            recoverable=True,
            recovery_hint=(
                "Bindings need 'class', 'template', 'binding' and 'direction'; "
                "'event' is also required for write and hybrid bindings"
            ),
        )
        self.field = field
        self.template = template


class InvalidDirectionError(ConfigurationError):
    """A binding declares a direction other than read, write or hybrid."""

    def __init__(self, direction: Any, template: str | None = None):
        super().__init__(
            user_message="Config binding has invalid direction",
            technical_message=f"Invalid direction {direction!r} for binding '{template}'",
            recoverable=True,
            recovery_hint="Use one of: read, write, hybrid",
        )
        self.direction = direction
        self.template = template


class RangeNotationError(ConfigurationError):
    """A name contains range notation that cannot be parsed."""

    def __init__(self, pattern: str, reason: str):
        super().__init__(
            user_message=f"Invalid range notation in '{pattern}': {reason}",
            recoverable=True,
            recovery_hint="Ranges look like NAME#(0:3), NAME#(0:6:2) or NAME#(A,B,C)",
        )
        self.pattern = pattern
        self.reason = reason


class ExpansionMismatchError(ConfigurationError):
    """Binding and template patterns expand to a different number of names."""

    def __init__(self, binding: str, template: str, binding_count: int, template_count: int):
        super().__init__(
            user_message="Unexpected range expansion mismatch",
            technical_message=(
                f"Binding '{binding}' expands to {binding_count} names but "
                f"template '{template}' expands to {template_count}"
            ),
            recoverable=True,
            recovery_hint="Make the register and element ranges cover the same number of items",
        )
        self.binding = binding
        self.template = template
        self.binding_count = binding_count
        self.template_count = template_count


class UnknownBindingError(ConfigurationError):
    """No binding is registered under the given template name."""

    def __init__(self, template: str):
        super().__init__(
            user_message=f"No binding for {template}",
            recoverable=True,
        )
        self.template = template


class UnknownEventError(ConfigurationError):
    """A subscriber was registered for an event the framework does not know."""

    def __init__(self, event_name: Any):
        super().__init__(
            user_message=f"Unknown framework event: {event_name}",
            recoverable=True,
            recovery_hint="See switchboard.protocols.FrameworkEvent for the supported events",
        )
        self.event_name = event_name


class ConfigFileInvalidError(ConfigurationError):
    """Configuration file has invalid JSON syntax."""

    def __init__(self, file_path: str, parse_error: str):
        """
        Initialize config file invalid error.

        Args:
            file_path: Path to the invalid config file
            parse_error: The parsing error message
        """
        user_msg = "Configuration file has invalid syntax"
        recovery = "Check for common JSON errors:\n"
        recovery += "  - Trailing commas (remove commas after last item)\n"
        recovery += "  - Missing quotes around strings\n"
        recovery += "  - Unclosed braces or brackets\n"
        recovery += f"  - Edit: {file_path}"

        if "trailing comma" in parse_error.lower():
            user_msg = "Configuration file has a trailing comma"
            recovery = (
                f"Remove the trailing comma from {file_path}\n"
                "JSON doesn't allow commas after the last item in an object or array"
            )
        elif "expecting" in parse_error.lower():
            user_msg = "Configuration file has a syntax error"

        super().__init__(
            user_message=user_msg,
            technical_message=f"JSON parse error in {file_path}: {parse_error}",
            recoverable=True,
            recovery_hint=recovery
        )
        self.file_path = file_path
        self.parse_error = parse_error


class ConfigValidationError(ConfigurationError):
    """Configuration values fail validation."""

    def __init__(self, field: str, value: Any, error_msg: str, file_path: str | None = None):
        """
        Initialize config validation error.

        Args:
            field: The configuration field that failed validation
            value: The invalid value
            error_msg: Why the value is invalid
            file_path: Path to the config file (optional)
        """
        user_msg = f"Invalid configuration value for '{field}': {error_msg}"

        recovery = f"Update the '{field}' value in your configuration"
        if file_path:
            recovery += f"\nConfig file: {file_path}"

        if "refresh_rate" in field.lower():
            recovery += "\nThe refresh rate is in milliseconds and must be positive"
        elif "direction" in field.lower():
            recovery += "\nValid directions: read, write, hybrid"

        super().__init__(
            user_message=user_msg,
            technical_message=f"Config validation failed for {field}={value}: {error_msg}",
            recoverable=True,
            recovery_hint=recovery
        )
        self.field = field
        self.value = value
        self.file_path = file_path
