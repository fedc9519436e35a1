"""Job queue and result channel shared between the coordinator and workers.

Both channels wrap ``queue.Queue``, which already provides what the pool
needs: each ``get`` hands an entry to exactly one caller (competing
consumers), entries from a single producer come out in the order they were
put, and ``put``/``get`` are safe from any number of threads. No additional
locking happens here.

``queue.Queue`` has no notion of a dropped counterpart, so each channel keeps
a closed flag. The coordinator closes both channels once every worker has
been joined; anything put or sent after that raises
``QueueDisconnectedError``.
"""

import queue
import threading
import typing as t

from ..domain.exceptions import QueueDisconnectedError
from ..domain.job import STOP, Job, QueueEntry
from ..domain.result import JobResult
from ..infrastructure.logging import get_logger

if t.TYPE_CHECKING:
    import loguru


class JobQueue:
    """Multi-producer, multi-consumer queue of jobs and stop signals.

    Unbounded, so ``put`` never blocks. ``get`` blocks until an entry is
    available; there is no close-while-waiting path because workers are
    terminated with ``Stop`` entries, never by closing the queue.
    """

    def __init__(
        self,
        entries: "queue.Queue[QueueEntry] | None" = None,
        logger: t.Optional["loguru.Logger"] = None,
    ) -> None:
        """Initialise the job queue.

        Args:
            entries: Optional underlying queue. Created if None; injectable
                for tests.
            logger: Logger for queue operations. Defaults to a module logger.
        """
        self._entries: queue.Queue[QueueEntry] = (
            entries if entries is not None else queue.Queue()
        )
        self._logger = logger or get_logger(__name__)
        self._closed = threading.Event()

    def put(self, job: Job) -> None:
        """Enqueue a job for whichever worker dequeues it first.

        Raises:
            QueueDisconnectedError: If the queue has been closed.
        """
        self._put(job)
        self._logger.debug(f"Queued job with data '{job.data}'")

    def put_stop(self) -> None:
        """Enqueue one stop signal. Exactly one worker will receive it.

        Raises:
            QueueDisconnectedError: If the queue has been closed.
        """
        self._put(STOP)
        self._logger.debug("Queued stop signal")

    def get(self) -> QueueEntry:
        """Block until an entry is available and return it."""
        return self._entries.get()

    def close(self) -> None:
        """Refuse further puts. Idempotent."""
        self._closed.set()

    @property
    def is_closed(self) -> bool:
        return self._closed.is_set()

    def size(self) -> int:
        """Approximate number of entries waiting to be dequeued."""
        return self._entries.qsize()

    def _put(self, entry: QueueEntry) -> None:
        if self._closed.is_set():
            raise QueueDisconnectedError("Job queue is closed; no worker will receive")
        self._entries.put(entry)


class ResultChannel:
    """Multi-producer, single-consumer channel of completed job results.

    Workers send; only the coordinator receives. Arrival order across workers
    depends on scheduling and carries no meaning.
    """

    def __init__(
        self,
        results: "queue.Queue[JobResult] | None" = None,
    ) -> None:
        self._results: queue.Queue[JobResult] = (
            results if results is not None else queue.Queue()
        )
        self._closed = threading.Event()

    def send(self, result: JobResult) -> None:
        """Publish a result for the coordinator.

        Raises:
            QueueDisconnectedError: If the coordinator has closed the channel.
        """
        if self._closed.is_set():
            raise QueueDisconnectedError(
                f"Result channel is closed; cannot deliver '{result.message}'"
            )
        self._results.put(result)

    def receive(self, timeout: float | None = None) -> JobResult:
        """Block until a result arrives.

        Args:
            timeout: Seconds to wait. None waits indefinitely.

        Raises:
            queue.Empty: If no result arrived within ``timeout``.
            QueueDisconnectedError: If the channel is closed and drained.
        """
        if self._closed.is_set() and self._results.empty():
            raise QueueDisconnectedError("Result channel is closed and drained")
        return self._results.get(timeout=timeout)

    def close(self) -> None:
        """Refuse further sends. Results already sent can still be received."""
        self._closed.set()

    @property
    def is_closed(self) -> bool:
        return self._closed.is_set()

    def size(self) -> int:
        """Approximate number of results waiting to be received."""
        return self._results.qsize()
