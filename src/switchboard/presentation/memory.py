"""Headless presentation sink that keeps UI state in memory."""

import logging
from collections import defaultdict
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)


class InMemoryPresentation:
    """
    Presentation sink without a real UI.

    Mirrors the behaviour of a DOM event facade: several handlers may be
    attached to the same selector/event pair and `off` removes all of them.
    Used for headless runs (`switchboard check`) and in tests, where
    `set_value` and `trigger` stand in for user interaction.
    """

    def __init__(self) -> None:
        self.handlers: dict[tuple[str, str], list[Callable[[Any], None]]] = defaultdict(list)
        self.html: dict[str, Any] = {}
        self.values: dict[str, Any] = {}

    def on(self, selector: str, event_name: str, handler: Callable[[Any], None]) -> None:
        self.handlers[(selector, event_name)].append(handler)

    def off(self, selector: str, event_name: str) -> None:
        self.handlers.pop((selector, event_name), None)

    def set_html(self, selector: str, value: Any) -> None:
        self.html[selector] = value

    def get_value(self, selector: str) -> Any:
        return self.values.get(selector)

    def set_value(self, selector: str, value: Any) -> None:
        """Set an element's input value, as a user typing into it would."""
        self.values[selector] = value

    def trigger(self, selector: str, event_name: str, event: Any = None) -> int:
        """
        Dispatch a UI event to the handlers attached for it.

        Returns:
            Number of handlers called
        """
        handlers = list(self.handlers.get((selector, event_name), ()))
        payload = event if event is not None else {"type": event_name, "target": selector}
        for handler in handlers:
            handler(payload)
        logger.debug(f"Triggered {event_name} on {selector} ({len(handlers)} handler(s))")
        return len(handlers)

    def listener_count(self, selector: str | None = None) -> int:
        """Count attached handlers, optionally only those on `selector`."""
        return sum(
            len(handlers)
            for (handler_selector, _), handlers in self.handlers.items()
            if selector is None or handler_selector == selector
        )
