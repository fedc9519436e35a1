"""Thread-backed worker that consumes the shared job queue."""

import threading
import typing as t

from ...domain.exceptions import WorkerError
from ...domain.job import Job, QueueEntry, Stop
from ...domain.result import JobResult
from ...domain.worker_state import WorkerState
from ...events import (
    BaseEmitter,
    ErrorInfo,
    JobCompletedEvent,
    JobReceivedEvent,
    NullEmitter,
    WorkerFailedEvent,
    WorkerStartedEvent,
    WorkerStoppedEvent,
)
from ...infrastructure.logging import get_logger
from ..channels import JobQueue, ResultChannel
from .base import BaseWorker
from .handlers import JobHandler, SimulatedWork

if t.TYPE_CHECKING:
    import loguru


class ThreadWorker(BaseWorker):
    """Worker running its loop on a dedicated daemon thread.

    The loop blocks on the job queue, and for each entry:
    - ``Job``: run the handler, send a ``JobResult`` on the result channel,
      then go back to the queue. Jobs are processed strictly sequentially.
    - ``Stop``: exit the loop and finish as TERMINATED. Nothing is dequeued
      after a stop signal.

    If the handler raises (SystemExit included), or the result cannot be
    delivered, the worker records the exception and finishes as FAILED. The
    result for that job is never silently dropped: the failure stays visible
    through ``error`` and ``state`` for the coordinator to surface.

    The worker never re-enqueues or re-processes a job, and never exits on
    its own while the queue is empty.

    Usage:
        worker = ThreadWorker(0, job_queue, results)
        worker.start()
        ...
        job_queue.put_stop()
        worker.join()
    """

    def __init__(
        self,
        worker_id: int,
        job_queue: JobQueue,
        results: ResultChannel,
        handler: JobHandler | None = None,
        logger: t.Optional["loguru.Logger"] = None,
        emitter: BaseEmitter | None = None,
    ) -> None:
        """Initialise the worker. The thread is not started until start().

        Args:
            worker_id: Stable identifier assigned by the pool (0..N-1).
            job_queue: Shared queue to consume jobs and stop signals from.
            results: Shared channel to publish results on.
            handler: Processing step applied to each job. Defaults to
                SimulatedWork with its default delay.
            logger: Logger instance. Defaults to a module logger.
            emitter: Event emitter for worker lifecycle events. If None,
                a NullEmitter is used (no events emitted).
        """
        self._worker_id = worker_id
        self._job_queue = job_queue
        self._results = results
        self._handler = handler or SimulatedWork()
        self._logger = logger or get_logger(__name__)
        self._emitter = emitter or NullEmitter()
        self._state = WorkerState.PENDING
        self._error: BaseException | None = None
        self._jobs_processed = 0
        self._thread = threading.Thread(
            target=self._run,
            name=f"corepool-worker-{worker_id}",
            daemon=True,
        )

    @property
    def worker_id(self) -> int:
        return self._worker_id

    @property
    def state(self) -> WorkerState:
        return self._state

    @property
    def error(self) -> BaseException | None:
        return self._error

    @property
    def jobs_processed(self) -> int:
        return self._jobs_processed

    @property
    def emitter(self) -> BaseEmitter:
        return self._emitter

    @property
    def is_alive(self) -> bool:
        return self._thread.is_alive()

    def start(self) -> None:
        """Start the worker thread.

        Raises:
            WorkerError: If the worker was already started.
        """
        if self._state != WorkerState.PENDING:
            raise WorkerError(f"Worker {self._worker_id} already started")
        self._state = WorkerState.RUNNING
        self._thread.start()

    def join(self, timeout: float | None = None) -> bool:
        if self._state == WorkerState.PENDING:
            return True
        self._thread.join(timeout)
        return not self._thread.is_alive()

    def _run(self) -> None:
        """Thread body: run the loop and record how it ended."""
        self._logger.debug(f"Worker {self._worker_id} starting")
        self._emitter.emit(
            "worker.started", WorkerStartedEvent(worker_id=self._worker_id)
        )
        try:
            self._process_queue()
        except BaseException as exc:
            self._fail(exc)
            # Recorded, then left to end the thread as usual.
            if not isinstance(exc, Exception):
                raise
            return

        self._state = WorkerState.TERMINATED
        self._logger.debug(
            f"Worker {self._worker_id} terminating after "
            f"{self._jobs_processed} job(s)"
        )
        self._emitter.emit(
            "worker.stopped",
            WorkerStoppedEvent(
                worker_id=self._worker_id, jobs_processed=self._jobs_processed
            ),
        )

    def _process_queue(self) -> None:
        while True:
            entry: QueueEntry = self._job_queue.get()
            if isinstance(entry, Stop):
                return
            if not isinstance(entry, Job):
                raise TypeError(
                    f"Worker {self._worker_id} received unexpected queue entry "
                    f"{entry!r}"
                )
            self._process(entry)

    def _process(self, job: Job) -> None:
        self._logger.debug(
            f"Worker {self._worker_id} received new job containing data: "
            f"'{job.data}'"
        )
        self._emitter.emit(
            "worker.job_received",
            JobReceivedEvent(worker_id=self._worker_id, job_data=job.data),
        )

        output = self._handler(job)
        result = JobResult(worker_id=self._worker_id, job=job, output=output)
        # Raises QueueDisconnectedError if the coordinator is gone; that is
        # fatal for this worker.
        self._results.send(result)
        self._jobs_processed += 1

        self._emitter.emit(
            "worker.job_completed",
            JobCompletedEvent(
                worker_id=self._worker_id, job_data=job.data, message=result.message
            ),
        )

    def _fail(self, exc: BaseException) -> None:
        self._error = exc
        self._state = WorkerState.FAILED
        self._logger.exception(
            f"Worker {self._worker_id} failed: {type(exc).__name__}: {exc}"
        )
        self._emitter.emit(
            "worker.failed",
            WorkerFailedEvent(
                worker_id=self._worker_id,
                error=ErrorInfo.from_exception(exc),
                jobs_processed=self._jobs_processed,
            ),
        )
