"""corepool - bounded thread worker pool sized to the host's physical cores."""

from .domain import Job, JobResult, synthesize_jobs
from .pool import PoolCoordinator, SimulatedWork, WorkerPool

__all__ = [
    "Job",
    "JobResult",
    "PoolCoordinator",
    "SimulatedWork",
    "WorkerPool",
    "synthesize_jobs",
]
