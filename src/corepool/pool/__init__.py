"""Pool operations - coordinator, worker pool, workers, and channels."""

from ..domain.exceptions import QueueDisconnectedError, WorkerFailedError
from .channels import JobQueue, ResultChannel
from .coordinator import PoolCoordinator
from .worker import BaseWorker, JobHandler, SimulatedWork, ThreadWorker
from .worker_pool import BaseWorkerPool, WorkerPool

__all__ = [
    # Core pool
    "PoolCoordinator",
    "WorkerPool",
    "BaseWorkerPool",
    # Channels
    "JobQueue",
    "ResultChannel",
    # Workers
    "BaseWorker",
    "ThreadWorker",
    "JobHandler",
    "SimulatedWork",
    # Errors
    "QueueDisconnectedError",
    "WorkerFailedError",
]
