"""Job queue entry models.

The job queue carries exactly two kinds of entry: a ``Job`` to process, or a
``Stop`` telling the worker that receives it to exit. Modelling them as two
types (rather than ``Job | None``) keeps the worker's dispatch exhaustive.
"""

import typing as t

from pydantic import BaseModel, ConfigDict, Field


class Job(BaseModel):
    """An immutable unit of work consumed by exactly one worker."""

    model_config = ConfigDict(frozen=True)

    data: str = Field(description="Opaque payload handed to the job handler")


class Stop(BaseModel):
    """Stop signal: instructs exactly one worker to leave its loop."""

    model_config = ConfigDict(frozen=True)


STOP: t.Final = Stop()

QueueEntry = Job | Stop


def synthesize_jobs(count: int) -> list[Job]:
    """Default job source producing ``Job #<i> data`` payloads for i in 0..count.

    Raises:
        ValueError: If count is negative.
    """
    if count < 0:
        raise ValueError(f"Job count must be >= 0, got {count}")
    return [Job(data=f"Job #{i} data") for i in range(count)]
