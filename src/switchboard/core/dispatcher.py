"""Single-subscriber event registry for framework lifecycle events."""

import logging
from collections.abc import Callable
from typing import Any

from switchboard.exceptions import ExecutionError, UnknownEventError
from switchboard.protocols import FrameworkEvent

logger = logging.getLogger(__name__)

EventHandler = Callable[[Any], None]


def raise_execution_error(payload: Any) -> None:
    """Default `execution_error` handler: escalate the payload."""
    if isinstance(payload, BaseException):
        raise payload
    raise ExecutionError(FrameworkEvent.EXECUTION_ERROR.value, payload)


class EventDispatcher:
    """
    Fixed registry of named events, each with at most one handler.

    - `on` with an unknown name fires `load_error` instead of raising.
    - `fire` with an unknown name, or for an event nobody subscribed to,
      does nothing.
    - A handler that raises is reported on `execution_error`, whose default
      handler re-raises.

    Handlers run synchronously, once per `fire`, on the calling thread.
    """

    def __init__(self) -> None:
        self._handlers: dict[FrameworkEvent, EventHandler | None] = {
            event: None for event in FrameworkEvent
        }
        self._handlers[FrameworkEvent.EXECUTION_ERROR] = raise_execution_error

    def on(self, name: "str | FrameworkEvent", handler: EventHandler) -> bool:
        """
        Set the handler for an event, replacing any previous one.

        Returns:
            True if the handler was registered, False if the event is unknown
        """
        event = FrameworkEvent.lookup(name)
        if event is None:
            error = UnknownEventError(name)
            logger.warning(error.technical_message)
            self.fire(FrameworkEvent.LOAD_ERROR, error)
            return False

        self._handlers[event] = handler
        logger.debug(f"Handler registered for {event.value}")
        return True

    def off(self, name: "str | FrameworkEvent") -> None:
        """Restore the default handler for an event (none, or re-raise for execution_error)."""
        event = FrameworkEvent.lookup(name)
        if event is None:
            return
        if event is FrameworkEvent.EXECUTION_ERROR:
            self._handlers[event] = raise_execution_error
        else:
            self._handlers[event] = None

    def handler_for(self, name: "str | FrameworkEvent") -> EventHandler | None:
        event = FrameworkEvent.lookup(name)
        return self._handlers[event] if event is not None else None

    def fire(self, name: "str | FrameworkEvent", payload: Any = None) -> None:
        """Invoke the handler registered for `name` with `payload`."""
        event = FrameworkEvent.lookup(name)
        if event is None:
            logger.debug(f"Ignoring unknown event {name!r}")
            return

        handler = self._handlers[event]
        if handler is None:
            return

        if event is FrameworkEvent.EXECUTION_ERROR:
            handler(payload)
            return

        try:
            handler(payload)
        except ExecutionError:
            raise
        except Exception as e:
            logger.error(f"Handler for {event.value} raised: {e}", exc_info=True)
            error = ExecutionError(event.value, e)
            error.__cause__ = e
            self.fire(FrameworkEvent.EXECUTION_ERROR, error)
