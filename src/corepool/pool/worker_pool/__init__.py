"""Worker pool package providing worker lifecycle abstractions."""

from .base import BaseWorkerPool
from .factory import WorkerPoolFactory
from .pool import WorkerPool

__all__ = ["BaseWorkerPool", "WorkerPool", "WorkerPoolFactory"]
