"""Worker lifecycle states."""

import enum


class WorkerState(enum.StrEnum):
    """Lifecycle of a worker.

    PENDING until its thread starts, RUNNING while looping over the job
    queue, then exactly one of TERMINATED (received a stop signal) or FAILED
    (handler or result delivery raised).
    """

    PENDING = "pending"
    RUNNING = "running"
    TERMINATED = "terminated"
    FAILED = "failed"

    @property
    def is_finished(self) -> bool:
        return self in (WorkerState.TERMINATED, WorkerState.FAILED)
