"""Event data models."""

from .base import BaseEvent
from .error_info import ErrorInfo
from .pool import JobsDispatchedEvent, StopSentEvent
from .worker import (
    JobCompletedEvent,
    JobReceivedEvent,
    WorkerEvent,
    WorkerFailedEvent,
    WorkerStartedEvent,
    WorkerStoppedEvent,
)

__all__ = [
    "BaseEvent",
    "ErrorInfo",
    "JobCompletedEvent",
    "JobReceivedEvent",
    "JobsDispatchedEvent",
    "StopSentEvent",
    "WorkerEvent",
    "WorkerFailedEvent",
    "WorkerStartedEvent",
    "WorkerStoppedEvent",
]
