"""Emitter that drops every event."""

import typing as t

from .base import BaseEmitter, EventHandler


class NullEmitter(BaseEmitter):
    """Default for workers and pools built without an emitter.

    Subscriptions are accepted and ignored, so nothing is ever delivered.
    """

    def on(self, event_type: str, handler: EventHandler) -> None:
        pass

    def off(self, event_type: str, handler: EventHandler) -> None:
        pass

    def emit(self, event_type: str, event_data: t.Any) -> None:
        pass
