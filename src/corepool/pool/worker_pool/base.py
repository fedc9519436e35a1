"""Base interface for worker pools."""

from abc import ABC, abstractmethod

from ...domain.worker_state import WorkerState
from ..worker.base import BaseWorker


class BaseWorkerPool(ABC):
    """Abstract base class for pools that own a fixed set of workers."""

    @property
    @abstractmethod
    def workers(self) -> tuple[BaseWorker, ...]:
        """Snapshot of the workers this pool has spawned."""
        pass

    @property
    @abstractmethod
    def is_running(self) -> bool:
        pass

    @abstractmethod
    def start(self) -> None:
        """Spawn and start every worker."""
        pass

    @abstractmethod
    def stop_all(self) -> int:
        """Enqueue one stop signal per known worker and return how many."""
        pass

    @abstractmethod
    def join(self, timeout: float | None = None) -> bool:
        """Wait for every worker to finish. Returns False on timeout."""
        pass

    @property
    def failed_workers(self) -> tuple[BaseWorker, ...]:
        """Workers that terminated abnormally.

        Besides workers that recorded an error, this includes any started
        worker whose thread is gone without reaching a finished state.
        """
        return tuple(
            w
            for w in self.workers
            if w.error is not None
            or (
                w.state != WorkerState.PENDING
                and not w.state.is_finished
                and not w.is_alive
            )
        )

    @property
    def alive_count(self) -> int:
        """Number of workers whose thread is still running."""
        return sum(1 for w in self.workers if w.is_alive)
