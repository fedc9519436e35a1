"""Synchronous event emitter shared by the coordinator and its workers."""

import typing as t

from .base import BaseEmitter, EventHandler

if t.TYPE_CHECKING:
    import loguru


class EventEmitter(BaseEmitter):
    """Dispatches events to subscribed handlers on the emitting thread.

    Workers emit from their own threads, so handlers must be thread-safe.
    A failing handler is logged and skipped; it never interrupts the worker
    or prevents the remaining handlers from running.

    Subscribe before the pool starts. Handler lists are copied on emit, so a
    late subscription is picked up by the next emission.
    """

    def __init__(self, logger: "loguru.Logger") -> None:
        self._handlers: dict[str, list[EventHandler]] = {}
        self._logger = logger

    def on(self, event_type: str, handler: EventHandler) -> None:
        """Subscribe ``handler`` to ``event_type``."""
        self._handlers.setdefault(event_type, []).append(handler)

    def off(self, event_type: str, handler: EventHandler) -> None:
        """Unsubscribe ``handler`` from ``event_type``.

        Removing a handler that was never registered only logs a warning.
        """
        handlers = self._handlers.get(event_type, [])
        if handler not in handlers:
            self._logger.warning(f"Handler {handler} not found for event {event_type}")
            return
        handlers.remove(handler)

    def emit(self, event_type: str, event_data: t.Any) -> None:
        """Call every handler subscribed to ``event_type`` with ``event_data``."""
        for handler in list(self._handlers.get(event_type, [])):
            try:
                handler(event_data)
            except Exception:
                self._logger.exception(f"Event handler {handler} failed for {event_type}")
