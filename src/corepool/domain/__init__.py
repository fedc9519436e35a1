"""Domain models - jobs, stop signals, results and errors."""

from .exceptions import (
    CorePoolError,
    PoolStateError,
    QueueDisconnectedError,
    QueueError,
    WorkerError,
    WorkerFailedError,
    WorkerPoolAlreadyStartedError,
)
from .job import STOP, Job, QueueEntry, Stop, synthesize_jobs
from .result import JobResult
from .worker_state import WorkerState

__all__ = [
    "STOP",
    "Job",
    "JobResult",
    "QueueEntry",
    "Stop",
    "synthesize_jobs",
    "CorePoolError",
    "PoolStateError",
    "QueueDisconnectedError",
    "QueueError",
    "WorkerError",
    "WorkerFailedError",
    "WorkerPoolAlreadyStartedError",
    "WorkerState",
]
