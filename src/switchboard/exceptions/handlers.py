"""
Error handling helpers shared by the framework, the read loop and the CLI.

| Scenario | Use This |
|----------|----------|
| Pydantic rejected a file or declaration | `wrap_pydantic_error(e, path)` / `describe_validation_error(e)` |
| Keep a loop alive across failures | `with ErrorContext("run read cycle", re_raise=False) as ctx: ...` |
| Gather errors fired on `load_error` | `collector.listener(name)` passed to `Framework.on` |
| Print an error for a user | `format_error_for_display(error)` |

Errors travel upwards: devices and files raise OSError, ValueError or
jinja2 errors; the framework converts them into SwitchboardError
instances and fires them on its error events; the CLI prints
`user_message` and `recovery_hint`.
"""

import logging
from collections.abc import Callable
from typing import Any, Optional

from pydantic import ValidationError

from .base import SwitchboardError
from .config import ConfigFileInvalidError, ConfigValidationError

logger = logging.getLogger(__name__)


class ErrorContext:
    """
    Context manager that logs a failing operation and optionally suppresses it.

    Example:
        ```python
        with ErrorContext("read registers", re_raise=False) as ctx:
            snapshot = device.read(names)

        if ctx.error:
            ...
        ```
    """

    def __init__(
        self,
        operation: str,
        logger_instance: Optional[logging.Logger] = None,
        re_raise: bool = True
    ):
        self.operation = operation
        self.logger = logger_instance or logger
        self.re_raise = re_raise
        self.error: Optional[BaseException] = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_val is None:
            return False

        self.error = exc_val
        if isinstance(exc_val, SwitchboardError):
            self.logger.error(f"Failed to {self.operation}: {exc_val.technical_message}")
        else:
            self.logger.error(f"Failed to {self.operation}: {exc_val}", exc_info=True)
        return not self.re_raise


def describe_validation_error(error: ValidationError) -> tuple[str, Any, str]:
    """
    Reduce a pydantic ValidationError to (field, input, message).

    Several errors are folded into one message with the field
    "multiple fields".
    """
    details = error.errors()
    if len(details) == 1:
        detail = details[0]
        field = ".".join(str(loc) for loc in detail.get("loc", ())) or "value"
        return field, detail.get("input"), detail.get("msg", "invalid")

    lines = [
        f"  - {'.'.join(str(loc) for loc in detail.get('loc', ())) or 'value'}: "
        f"{detail.get('msg', 'invalid')}"
        for detail in details
    ]
    return "multiple fields", None, f"{len(details)} validation errors:\n" + "\n".join(lines)


def wrap_pydantic_error(error: Exception, file_path: str) -> SwitchboardError:
    """
    Convert a pydantic error raised while loading `file_path`.

    Returns:
        ConfigFileInvalidError for JSON syntax errors, ConfigValidationError otherwise
    """
    if isinstance(error, ValidationError):
        details = error.errors()
        if details and details[0].get("type") == "json_invalid":
            return ConfigFileInvalidError(file_path, str(details[0].get("msg", error)))
        field, value, message = describe_validation_error(error)
        return ConfigValidationError(field, value, message, file_path=file_path)

    return ConfigValidationError("unknown", None, str(error), file_path=file_path)


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """Return (message, recovery hint or None) for showing an error to a user."""
    if isinstance(error, SwitchboardError):
        return error.user_message, error.recovery_hint
    return f"{type(error).__name__}: {error}", None


def collect_errors(operation: str) -> "ErrorCollector":
    """
    Create an error collector for a batch operation.

    Example:
        ```python
        collector = collect_errors("load module analog_inputs")
        framework.on("load_error", collector.listener("analog_inputs"))
        framework.load_module(info)

        if collector.has_errors:
            print(collector.get_summary())
        ```
    """
    return ErrorCollector(operation)


class ErrorCollector:
    """Gathers raised or event-delivered errors so all of them can be reported together."""

    def __init__(self, operation: str):
        self.operation = operation
        self.errors: list[tuple[str, Exception]] = []
        self.success_count = 0

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    def add_error(self, sub_operation: str, error: Exception) -> None:
        """Record an error that was reported rather than raised."""
        self.errors.append((sub_operation, error))

    def listener(self, sub_operation: str) -> Callable[[Exception], None]:
        """Event handler that records every error fired at it under `sub_operation`."""
        def record(error: Exception) -> None:
            self.add_error(sub_operation, error)
        return record

    def try_operation(self, sub_operation: str) -> "ErrorCollector._OperationContext":
        """Context manager that records an exception raised inside it and suppresses it."""
        return self._OperationContext(self, sub_operation)

    def get_summary(self) -> str:
        if not self.has_errors:
            return f"All operations completed successfully ({self.success_count} total)"

        lines = [f"Failed {self.error_count} of {self.error_count + self.success_count} operations:"]
        for sub_operation, error in self.errors:
            message = error.user_message if isinstance(error, SwitchboardError) else str(error)
            lines.append(f"  - {sub_operation}: {message}")
        return "\n".join(lines)

    class _OperationContext:
        def __init__(self, collector: "ErrorCollector", sub_operation: str):
            self.collector = collector
            self.sub_operation = sub_operation
            self.failed = False

        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc_val, exc_tb):
            if exc_val is None:
                if not self.failed:
                    self.collector.success_count += 1
                return False

            self.collector.add_error(self.sub_operation, exc_val)
            return True

        def fail(self, error: Exception) -> None:
            """Mark this operation failed without raising."""
            self.failed = True
            self.collector.add_error(self.sub_operation, error)
