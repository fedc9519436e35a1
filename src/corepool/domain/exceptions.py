"""Custom exceptions for corepool."""


class CorePoolError(Exception):
    """Base exception for corepool errors."""

    pass


class QueueError(CorePoolError):
    """Base exception for channel-related errors."""

    pass


class QueueDisconnectedError(QueueError):
    """Raised when a send or receive targets a channel whose counterpart is gone.

    This covers putting onto a closed job queue, sending on a closed result
    channel, and collecting results after every worker has exited. It is
    terminal for the operation that observed it; nothing retries.
    """

    pass


class WorkerError(CorePoolError):
    """Base exception for worker-related errors."""

    pass


class WorkerFailedError(WorkerError):
    """Raised when a worker terminated abnormally.

    The worker's result for the job it was holding is lost, so the pool can no
    longer honour one result per job. Surfaced by collect and join.
    """

    def __init__(self, worker_id: int, error: BaseException) -> None:
        self.worker_id = worker_id
        self.error = error
        super().__init__(
            f"Worker {worker_id} failed: {type(error).__name__}: {error}"
        )


class PoolStateError(CorePoolError):
    """Raised when a pool operation is called out of lifecycle order.

    Examples: dispatching before the pool is open, collecting more results
    than are outstanding, or shutting down with results still undrained.
    """

    pass


class WorkerPoolAlreadyStartedError(PoolStateError):
    """Raised when start() is called on a pool that is already running."""

    pass
