"""Pool worker implementations."""

from .base import BaseWorker
from .factory import WorkerFactory
from .handlers import JobHandler, SimulatedWork
from .worker import ThreadWorker

__all__ = ["BaseWorker", "JobHandler", "SimulatedWork", "ThreadWorker", "WorkerFactory"]
