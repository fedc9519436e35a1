"""Worker factory types for dependency injection."""

import typing as t

from ...events import BaseEmitter
from ..channels import JobQueue, ResultChannel
from .base import BaseWorker
from .handlers import JobHandler

if t.TYPE_CHECKING:
    import loguru


class WorkerFactory(t.Protocol):
    """Factory protocol for creating workers.

    Any callable matching this signature can serve as a worker factory,
    including the ThreadWorker class itself.
    """

    def __call__(
        self,
        worker_id: int,
        job_queue: JobQueue,
        results: ResultChannel,
        handler: JobHandler,
        logger: "loguru.Logger",
        emitter: BaseEmitter,
    ) -> BaseWorker: ...
