"""Concrete worker pool implementation managing worker lifecycle."""

import time
import typing as t

from ...domain.exceptions import WorkerPoolAlreadyStartedError
from ...events import BaseEmitter, NullEmitter
from ..channels import JobQueue, ResultChannel
from ..worker.base import BaseWorker
from ..worker.factory import WorkerFactory
from ..worker.handlers import JobHandler, SimulatedWork
from ..worker.worker import ThreadWorker
from .base import BaseWorkerPool

if t.TYPE_CHECKING:
    from loguru import Logger


class WorkerPool(BaseWorkerPool):
    """Spawns a fixed number of workers and shuts them down with stop signals.

    Every worker is bound to the same job queue (read end) and the same result
    channel (write end). Workers never talk to each other; the pool itself
    never touches jobs or results.

    Shutdown is sentinel based: ``stop_all()`` enqueues exactly one stop
    signal per worker the pool knows about. Delivery is competing-consumers,
    so it is not defined which worker gets which stop, only that there are as
    many stops as workers. Stops queue up behind any jobs already enqueued,
    so in-flight and pending work is finished first.

    Usage:
        pool = WorkerPool(
            job_queue=job_queue,
            results=results,
            worker_factory=ThreadWorker,
            handler=SimulatedWork(0.1),
            logger=logger,
            emitter=emitter,
            max_workers=4,
        )

        pool.start()
        # ... dispatch jobs, drain results ...
        pool.stop_all()
        pool.join()
    """

    def __init__(
        self,
        job_queue: JobQueue,
        results: ResultChannel,
        logger: "Logger",
        worker_factory: WorkerFactory | None = None,
        handler: JobHandler | None = None,
        emitter: BaseEmitter | None = None,
        max_workers: int = 1,
    ) -> None:
        """Initialise the worker pool.

        Args:
            job_queue: Shared queue of jobs and stop signals.
            results: Shared channel for completed job results.
            logger: Logger instance for recording pool and worker activity.
            worker_factory: Factory function or class for creating workers.
                Defaults to ThreadWorker.
            handler: Processing step applied to each job. Defaults to
                SimulatedWork.
            emitter: Emitter shared by every worker. Defaults to NullEmitter.
            max_workers: Number of workers to spawn. Must be at least 1.

        Raises:
            ValueError: If max_workers is less than 1.
        """
        if max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")
        self.job_queue = job_queue
        self.results = results
        self._logger = logger
        self._worker_factory: WorkerFactory = worker_factory or ThreadWorker
        self._handler = handler or SimulatedWork()
        self._emitter = emitter or NullEmitter()
        self._max_workers = max_workers
        self._workers: list[BaseWorker] = []
        self._is_running = False

    @property
    def max_workers(self) -> int:
        return self._max_workers

    @property
    def workers(self) -> tuple[BaseWorker, ...]:
        """Snapshot of spawned workers.

        Returns immutable tuple for safe inspection without affecting pool state.
        """
        return tuple(self._workers)

    @property
    def is_running(self) -> bool:
        """True if pool has been started and not yet joined."""
        return self._is_running

    def start(self) -> None:
        """Create max_workers workers with ids 0..max_workers-1 and start them.

        Workers begin consuming the job queue immediately.

        Raises:
            WorkerPoolAlreadyStartedError: If pool is already running
        """
        if self._is_running:
            raise WorkerPoolAlreadyStartedError("WorkerPool already started")

        self._is_running = True
        for worker_id in range(self._max_workers):
            self._logger.debug(f"Creating worker {worker_id}")
            worker = self.create_worker(worker_id)
            self._workers.append(worker)
            worker.start()

    def create_worker(self, worker_id: int) -> BaseWorker:
        """Create a worker bound to the pool's shared channels.

        Note:
            This method is public to support testing and custom worker creation
            scenarios, but is typically called only by start().
        """
        return self._worker_factory(
            worker_id,
            self.job_queue,
            self.results,
            self._handler,
            self._logger,
            self._emitter,
        )

    def stop_all(self) -> int:
        """Enqueue exactly one stop signal per known worker.

        Returns:
            Number of stop signals enqueued.
        """
        count = len(self._workers)
        for n in range(1, count + 1):
            self._logger.debug(f"Sending stop signal {n}/{count}")
            self.job_queue.put_stop()
        return count

    def join(self, timeout: float | None = None) -> bool:
        """Wait for every worker to finish.

        Args:
            timeout: Overall seconds to wait across all workers. None waits
                indefinitely.

        Returns:
            True once every worker has finished, False if the timeout expired
            first (the pool is then still considered running).
        """
        deadline = None if timeout is None else time.monotonic() + timeout
        for worker in self._workers:
            remaining = None if deadline is None else max(0.0, deadline - time.monotonic())
            if not worker.join(remaining):
                self._logger.warning(
                    f"Worker {worker.worker_id} still running after join timeout"
                )
                return False

        self._is_running = False
        return True
