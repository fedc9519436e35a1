"""Event infrastructure - event emitter and event types."""

from .base import BaseEmitter, EventHandler
from .emitter import EventEmitter
from .models import (
    BaseEvent,
    ErrorInfo,
    JobCompletedEvent,
    JobReceivedEvent,
    JobsDispatchedEvent,
    StopSentEvent,
    WorkerEvent,
    WorkerFailedEvent,
    WorkerStartedEvent,
    WorkerStoppedEvent,
)
from .null import NullEmitter

__all__ = [
    # Base and implementations
    "BaseEmitter",
    "EventHandler",
    "EventEmitter",
    "NullEmitter",
    # Event models
    "BaseEvent",
    "ErrorInfo",
    "WorkerEvent",
    "WorkerStartedEvent",
    "JobReceivedEvent",
    "JobCompletedEvent",
    "WorkerStoppedEvent",
    "WorkerFailedEvent",
    "JobsDispatchedEvent",
    "StopSentEvent",
]
