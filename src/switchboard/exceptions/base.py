"""Base exception class for Switchboard.

All custom exceptions inherit from SwitchboardError to allow catching
all framework errors in one place. The base class provides:

- `user_message`: Human-friendly message for display to users
- `technical_message`: Detailed message for logging
- `recoverable`: Whether the error can be recovered from
- `recovery_hint`: Optional suggestion for how to fix the issue
"""

from typing import Any, Optional


class SwitchboardError(Exception):
    """
    Base exception for all Switchboard errors.

    Instances double as event payloads: configuration and resource errors
    are fired on the framework's error events rather than raised to callers.

    Attributes:
        user_message: Human-friendly message for display
        technical_message: Detailed message for logging
        recoverable: Whether the error can be recovered from
        recovery_hint: Optional hint for how to fix the issue
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
        *args,
        **kwargs
    ):
        """
        Initialize a Switchboard error.

        Args:
            user_message: Message to show to users
            technical_message: Detailed message for logs (defaults to user_message)
            recoverable: True if operation can be retried/recovered
            recovery_hint: Suggestion for how to fix the issue
        """
        super().__init__(user_message, *args, **kwargs)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        """Return user-friendly message."""
        return self.user_message

    @property
    def msg(self) -> str:
        """Short alias for the user message."""
        return self.user_message

    def get_full_message(self) -> str:
        """Get complete error message with recovery hint."""
        msg = self.user_message
        if self.recovery_hint:
            msg += f"\n\nSuggestion: {self.recovery_hint}"
        return msg


class ExecutionError(SwitchboardError):
    """An event handler failed while the framework was dispatching to it."""

    def __init__(self, event_name: str, original_error: Any = None):
        detail = f": {original_error}" if original_error is not None else ""
        super().__init__(
            user_message=f"Handler for '{event_name}' failed{detail}",
            technical_message=f"Execution error in '{event_name}' handler: {original_error!r}",
            recoverable=False,
        )
        self.event_name = event_name
        self.original_error = original_error
