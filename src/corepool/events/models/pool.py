"""Events emitted by the pool coordinator."""

from pydantic import Field

from .base import BaseEvent


class JobsDispatchedEvent(BaseEvent):
    """Emitted after a batch of jobs has been enqueued."""

    event_type: str = Field(default="pool.jobs_dispatched")
    count: int = Field(ge=0, description="Jobs enqueued in this batch")
    total_enqueued: int = Field(ge=0, description="Jobs enqueued since open")


class StopSentEvent(BaseEvent):
    """Emitted after one stop signal per worker has been enqueued."""

    event_type: str = Field(default="pool.stop_sent")
    count: int = Field(ge=0, description="Stop signals enqueued")
