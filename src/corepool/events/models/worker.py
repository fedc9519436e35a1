"""Events emitted by workers during their lifecycle."""

from pydantic import Field

from .base import BaseEvent
from .error_info import ErrorInfo


class WorkerEvent(BaseEvent):
    """Base class for worker lifecycle events.

    All worker events include worker_id so subscribers can tell which of the
    concurrently running workers the event came from.
    """

    worker_id: int = Field(ge=0, description="Stable id of the emitting worker")
    event_type: str = Field(default="worker.base")


class WorkerStartedEvent(WorkerEvent):
    """Emitted when a worker's thread enters its processing loop."""

    event_type: str = Field(default="worker.started")


class JobReceivedEvent(WorkerEvent):
    """Emitted when a worker dequeues a job and is about to process it."""

    event_type: str = Field(default="worker.job_received")
    job_data: str = Field(description="Payload of the received job")


class JobCompletedEvent(WorkerEvent):
    """Emitted after a worker has published a job's result."""

    event_type: str = Field(default="worker.job_completed")
    job_data: str = Field(description="Payload of the completed job")
    message: str = Field(default="", description="Published result message")


class WorkerStoppedEvent(WorkerEvent):
    """Emitted when a worker receives its stop signal and exits cleanly."""

    event_type: str = Field(default="worker.stopped")
    jobs_processed: int = Field(default=0, ge=0)


class WorkerFailedEvent(WorkerEvent):
    """Emitted when a worker terminates abnormally."""

    event_type: str = Field(default="worker.failed")
    error: ErrorInfo = Field(description="What went wrong")
    jobs_processed: int = Field(default=0, ge=0)
