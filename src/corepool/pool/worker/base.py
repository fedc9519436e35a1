"""Base interface for pool workers."""

from abc import ABC, abstractmethod

from ...domain.worker_state import WorkerState
from ...events import BaseEmitter


class BaseWorker(ABC):
    """Abstract base class for worker implementations.

    A worker owns one unit of concurrent execution. It repeatedly takes an
    entry from the shared job queue, processes jobs strictly one at a time,
    publishes a result per job, and exits when it receives a stop signal.
    """

    @property
    @abstractmethod
    def worker_id(self) -> int:
        """Stable identifier in 0..N-1 assigned by the pool."""
        pass

    @property
    @abstractmethod
    def state(self) -> WorkerState:
        pass

    @property
    @abstractmethod
    def error(self) -> BaseException | None:
        """Exception that terminated the worker, if it failed."""
        pass

    @property
    @abstractmethod
    def jobs_processed(self) -> int:
        pass

    @property
    @abstractmethod
    def emitter(self) -> BaseEmitter:
        """Event emitter for broadcasting worker events."""
        pass

    @abstractmethod
    def start(self) -> None:
        """Begin consuming the job queue."""
        pass

    @abstractmethod
    def join(self, timeout: float | None = None) -> bool:
        """Wait for the worker to finish.

        Args:
            timeout: Seconds to wait. None waits indefinitely.

        Returns:
            True if the worker has finished, False if the timeout expired.
        """
        pass

    @property
    @abstractmethod
    def is_alive(self) -> bool:
        pass
