"""Pool coordinator: sizes the pool, dispatches jobs, collects results, shuts down.

This module provides the PoolCoordinator class, which owns the producer end of
the job queue and the consumer end of the result channel for one bounded run
of work.
"""

import queue
import typing as t
from types import TracebackType

from ..config.settings import Settings
from ..domain.exceptions import (
    CorePoolError,
    PoolStateError,
    QueueDisconnectedError,
    WorkerFailedError,
)
from ..domain.job import Job
from ..domain.result import JobResult
from ..events import BaseEmitter, EventEmitter, JobsDispatchedEvent, StopSentEvent
from ..infrastructure.logging import get_logger
from ..infrastructure.system import CoreCounter, physical_core_count
from .channels import JobQueue, ResultChannel
from .worker.base import BaseWorker
from .worker.factory import WorkerFactory
from .worker.handlers import JobHandler, SimulatedWork
from .worker.worker import ThreadWorker
from .worker_pool.base import BaseWorkerPool
from .worker_pool.factory import WorkerPoolFactory
from .worker_pool.pool import WorkerPool

if t.TYPE_CHECKING:
    import loguru


class PoolCoordinator:
    """Owns the lifecycle of a bounded worker pool.

    Operations must happen in this order:
    1. ``open()``: size the pool (one worker per physical core unless told
       otherwise) and start the workers.
    2. ``dispatch(jobs)``: enqueue jobs. May be called repeatedly and may be
       interleaved with ``collect()``; workers consume immediately.
    3. ``collect()``: block for exactly the outstanding number of results.
    4. ``shutdown()``: enqueue one stop signal per worker. Only allowed once
       every dispatched job's result has been collected.
    5. ``join()``: wait for every worker to terminate and surface any worker
       failure.

    ``close()`` performs 4 and 5 and then closes both channels. The
    coordinator is single use: it cannot be reopened after close.

    The coordinator keeps the books on every entry it puts on the queue:
    ``jobs_enqueued`` must equal ``results_received`` before stops go out,
    and after join ``stops_sent`` must equal the number of workers spawned.
    With J jobs and C stops on the queue and J + C dequeues performed, no
    stop can be swallowed by a worker that still had work to do.

    Usage:
        with PoolCoordinator() as coordinator:
            coordinator.dispatch(synthesize_jobs(20))
            results = coordinator.collect()

    Or in one call:
        results = PoolCoordinator(workers=2).run(synthesize_jobs(4))
    """

    def __init__(
        self,
        workers: int | None = None,
        handler: JobHandler | None = None,
        core_counter: CoreCounter = physical_core_count,
        worker_factory: WorkerFactory | None = None,
        worker_pool_factory: WorkerPoolFactory | None = None,
        job_queue: JobQueue | None = None,
        results: ResultChannel | None = None,
        logger: t.Optional["loguru.Logger"] = None,
        emitter: BaseEmitter | None = None,
        poll_interval: float = 0.5,
    ) -> None:
        """Initialise the coordinator. No threads are started until open().

        Args:
            workers: Explicit worker count. If None, core_counter decides.
            handler: Processing step every worker applies to each job.
                Defaults to SimulatedWork with its default delay.
            core_counter: Returns the number of physical cores. Only consulted
                when workers is None.
            worker_factory: Factory for worker instances. Defaults to
                ThreadWorker.
            worker_pool_factory: Factory for the worker pool. Defaults to
                WorkerPool.
            job_queue: Shared job queue. Created if None.
            results: Shared result channel. Created if None.
            logger: Logger instance. Defaults to a module logger.
            emitter: Emitter shared with every worker. If None, an
                EventEmitter is created so callers can subscribe via
                ``coordinator.emitter.on(...)``.
            poll_interval: Seconds collect() waits for a result before
                re-checking worker health.

        Raises:
            ValueError: If workers is less than 1 or poll_interval is not
                positive.
        """
        if workers is not None and workers < 1:
            raise ValueError(f"workers must be >= 1, got {workers}")
        if poll_interval <= 0:
            raise ValueError(f"poll_interval must be > 0, got {poll_interval}")

        self._logger = logger or get_logger(__name__)
        self._requested_workers = workers
        self._handler = handler or SimulatedWork()
        self._core_counter = core_counter
        self._worker_factory: WorkerFactory = worker_factory or ThreadWorker
        self._pool_factory: WorkerPoolFactory = worker_pool_factory or WorkerPool
        self.job_queue = job_queue or JobQueue(logger=self._logger)
        self.results = results or ResultChannel()
        self._emitter = emitter if emitter is not None else EventEmitter(self._logger)
        self._poll_interval = poll_interval

        self._pool: BaseWorkerPool | None = None
        self._jobs_enqueued = 0
        self._results_received = 0
        self._stops_sent = 0
        self._is_shut_down = False
        self._is_joined = False
        self._is_closed = False

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: t.Any) -> "PoolCoordinator":
        """Build a coordinator from application settings.

        Keyword arguments override what the settings would provide.
        """
        kwargs.setdefault("workers", settings.max_workers)
        kwargs.setdefault("handler", SimulatedWork(settings.work_delay))
        kwargs.setdefault("poll_interval", settings.poll_interval)
        return cls(**kwargs)

    @property
    def emitter(self) -> BaseEmitter:
        """Emitter for pool.* and worker.* events."""
        return self._emitter

    @property
    def workers(self) -> tuple[BaseWorker, ...]:
        return self._pool.workers if self._pool is not None else ()

    @property
    def worker_count(self) -> int:
        """Number of workers spawned, 0 before open()."""
        return len(self.workers)

    @property
    def is_open(self) -> bool:
        """True between open() and close()."""
        return self._pool is not None and not self._is_closed

    @property
    def jobs_enqueued(self) -> int:
        return self._jobs_enqueued

    @property
    def results_received(self) -> int:
        return self._results_received

    @property
    def outstanding(self) -> int:
        """Results still owed by the workers for jobs already dispatched."""
        return self._jobs_enqueued - self._results_received

    @property
    def stops_sent(self) -> int:
        return self._stops_sent

    def __enter__(self) -> "PoolCoordinator":
        self.open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        """Shut down and join the pool.

        When an exception is already propagating, the pool is still shut down
        (stops go in behind any pending jobs) and joined, but pool errors are
        logged instead of raised so they do not replace the original error.
        """
        if exc_type is None:
            self.close()
            return

        try:
            self.close(force=True)
        except CorePoolError as close_error:
            self._logger.error(
                f"Error while closing pool after {exc_type.__name__}: {close_error}"
            )

    def open(self) -> None:
        """Size the pool and start its workers.

        If a worker fails to start, the workers already running are stopped
        and joined, the coordinator is left closed, and the error propagates.

        Raises:
            PoolStateError: If the coordinator was already opened.
            ValueError: If the core counter reports fewer than one core.
        """
        if self._pool is not None or self._is_closed:
            raise PoolStateError("PoolCoordinator can only be opened once")

        worker_count = self._resolve_worker_count()
        pool = self._pool_factory(
            job_queue=self.job_queue,
            results=self.results,
            handler=self._handler,
            logger=self._logger,
            emitter=self._emitter,
            max_workers=worker_count,
            worker_factory=self._worker_factory,
        )
        try:
            pool.start()
        except Exception:
            # __exit__ never runs when __enter__ raises, so stop whatever
            # did start here and leave the coordinator closed.
            self._logger.exception("Pool failed to start; stopping started workers")
            pool.stop_all()
            pool.join()
            self.job_queue.close()
            self.results.close()
            self._is_closed = True
            raise
        self._pool = pool
        self._logger.info(f"Started {worker_count} worker(s)")

    def dispatch(self, jobs: t.Iterable[Job]) -> int:
        """Enqueue jobs for the workers.

        Args:
            jobs: Any finite iterable of jobs.

        Returns:
            Number of jobs enqueued by this call.

        Raises:
            PoolStateError: If the pool is not open or already shut down.
            QueueDisconnectedError: If the job queue has been closed.
        """
        self._require_open("dispatch")
        if self._is_shut_down:
            raise PoolStateError(
                "Cannot dispatch after shutdown; jobs behind stop signals would "
                "never be processed"
            )

        count = 0
        for job in jobs:
            self.job_queue.put(job)
            self._jobs_enqueued += 1
            count += 1

        self._logger.debug(f"Dispatched {count} job(s)")
        self._emitter.emit(
            "pool.jobs_dispatched",
            JobsDispatchedEvent(count=count, total_enqueued=self._jobs_enqueued),
        )
        return count

    def collect(self, count: int | None = None) -> list[JobResult]:
        """Block until exactly ``count`` results have been received.

        Results come back in arrival order, which depends on scheduling;
        correlate them by ``result.job``, not by position.

        Args:
            count: Results to receive. Defaults to everything outstanding.

        Returns:
            The received results.

        Raises:
            PoolStateError: If the pool is not open, or count is negative or
                larger than the number of outstanding results.
            WorkerFailedError: If a worker terminated abnormally while results
                were still owed.
            QueueDisconnectedError: If every worker has exited while results
                were still owed.
        """
        self._require_open("collect")
        outstanding = self.outstanding
        if count is None:
            count = outstanding
        if count < 0 or count > outstanding:
            raise PoolStateError(
                f"Cannot collect {count} result(s); {outstanding} outstanding"
            )

        collected: list[JobResult] = []
        while len(collected) < count:
            result = self._receive_one()
            self._results_received += 1
            self._logger.debug(f"Received completed job data: {result.message}")
            collected.append(result)
        return collected

    def shutdown(self, force: bool = False) -> int:
        """Enqueue exactly one stop signal per worker.

        Args:
            force: Send stops even though results are still outstanding.
                Pending jobs are still processed, since stops queue up behind
                them, but their results are left uncollected.

        Returns:
            Number of stop signals sent.

        Raises:
            PoolStateError: If the pool is not open, was already shut down, or
                (without force) results are still outstanding.
        """
        self._require_open("shut down")
        if self._is_shut_down:
            raise PoolStateError("Pool already shut down")
        if self.outstanding and not force:
            raise PoolStateError(
                f"Cannot shut down with {self.outstanding} result(s) outstanding; "
                "collect() them first"
            )
        if self.outstanding:
            self._logger.warning(
                f"Forcing shutdown with {self.outstanding} result(s) uncollected"
            )

        assert self._pool is not None
        self._stops_sent = self._pool.stop_all()
        self._is_shut_down = True
        self._emitter.emit("pool.stop_sent", StopSentEvent(count=self._stops_sent))
        return self._stops_sent

    def join(self) -> None:
        """Wait for every worker to terminate.

        Raises:
            PoolStateError: If called before shutdown() (workers would never
                exit), or if the stop/worker balance does not hold.
            WorkerFailedError: If any worker terminated abnormally.
        """
        self._require_open("join")
        if not self._is_shut_down:
            raise PoolStateError("join() before shutdown() would wait forever")

        assert self._pool is not None
        self._pool.join()
        self._is_joined = True
        if self._stops_sent != self.worker_count:
            raise PoolStateError(
                f"Sent {self._stops_sent} stop signal(s) for "
                f"{self.worker_count} worker(s)"
            )

        failed = self._pool.failed_workers
        if failed:
            raise self._failure_of(failed[0])
        self._logger.info(f"All {self.worker_count} worker(s) terminated")

    def close(self, force: bool = False) -> None:
        """Shut down, join, and close both channels.

        Idempotent: calling it on a closed (or never opened) coordinator does
        nothing beyond closing the channels.

        Args:
            force: Passed to shutdown() if the pool is not yet shut down.
        """
        if self._is_closed:
            return
        try:
            if self._pool is not None:
                if not self._is_shut_down:
                    self.shutdown(force=force)
                if not self._is_joined:
                    self.join()
        finally:
            self.job_queue.close()
            self.results.close()
            self._is_closed = True

    def run(self, jobs: t.Iterable[Job]) -> list[JobResult]:
        """Open the pool, process every job, shut down, and return the results.

        Returns:
            One result per job, in arrival order.
        """
        with self:
            self.dispatch(jobs)
            return self.collect()

    def _resolve_worker_count(self) -> int:
        if self._requested_workers is not None:
            return self._requested_workers

        cores = self._core_counter()
        if cores < 1:
            raise ValueError(f"Core counter returned {cores}; expected >= 1")
        self._logger.info(f"Found {cores} physical cores")
        return cores

    def _receive_one(self) -> JobResult:
        while True:
            try:
                return self.results.receive(timeout=self._poll_interval)
            except queue.Empty:
                self._check_workers()

    def _check_workers(self) -> None:
        """Fail collect() instead of waiting on results that cannot arrive."""
        assert self._pool is not None
        failed = self._pool.failed_workers
        if failed:
            raise self._failure_of(failed[0])
        if self._pool.alive_count == 0:
            raise QueueDisconnectedError(
                f"All workers have exited with {self.outstanding} result(s) outstanding"
            )

    @staticmethod
    def _failure_of(worker: BaseWorker) -> WorkerFailedError:
        error = worker.error
        if error is None:
            error = RuntimeError(f"thread exited while {worker.state}")
        return WorkerFailedError(worker.worker_id, error)

    def _require_open(self, operation: str) -> None:
        if self._pool is None:
            raise PoolStateError(f"Cannot {operation}: pool is not open")
        if self._is_closed:
            raise PoolStateError(f"Cannot {operation}: pool is closed")
