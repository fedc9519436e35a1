"""Emitter interface shared by the coordinator and its workers."""

import typing as t
from abc import ABC, abstractmethod

# Called with the event model (e.g. WorkerStartedEvent); return value ignored.
EventHandler = t.Callable[[t.Any], t.Any]


class BaseEmitter(ABC):
    """Publishes ``worker.*`` and ``pool.*`` events to subscribers.

    Implementations are called from worker threads as well as the
    coordinator's thread.
    """

    @abstractmethod
    def on(self, event_type: str, handler: EventHandler) -> None:
        """Subscribe ``handler`` to ``event_type``."""

    @abstractmethod
    def off(self, event_type: str, handler: EventHandler) -> None:
        """Unsubscribe ``handler`` from ``event_type``."""

    @abstractmethod
    def emit(self, event_type: str, event_data: t.Any) -> None:
        """Deliver ``event_data`` to every handler of ``event_type``."""
