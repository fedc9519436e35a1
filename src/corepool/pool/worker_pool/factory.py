"""Worker pool factory types for dependency injection."""

import typing as t

from ...events import BaseEmitter
from ..channels import JobQueue, ResultChannel
from ..worker.factory import WorkerFactory
from ..worker.handlers import JobHandler
from .base import BaseWorkerPool

if t.TYPE_CHECKING:
    import loguru


class WorkerPoolFactory(t.Protocol):
    """Factory protocol for creating worker pool instances.

    Any callable matching this signature can serve as a worker pool factory,
    including the WorkerPool class itself, lambda functions, or custom factory
    functions.
    """

    def __call__(
        self,
        job_queue: JobQueue,
        results: ResultChannel,
        worker_factory: WorkerFactory,
        handler: JobHandler,
        logger: "loguru.Logger",
        emitter: BaseEmitter,
        max_workers: int,
    ) -> BaseWorkerPool:
        """Create a worker pool instance with the given dependencies.

        Args:
            job_queue: Shared queue the workers consume
            results: Shared channel the workers publish results on
            worker_factory: Factory for creating worker instances
            handler: Processing step every worker applies to its jobs
            logger: Logger instance for recording pool events
            emitter: Emitter shared by all workers
            max_workers: Number of workers to spawn

        Returns:
            A BaseWorkerPool instance ready to be started
        """
        ...
