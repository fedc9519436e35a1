"""Job handlers: the processing step a worker applies to each job."""

import time
import typing as t

from ...domain.job import Job

# Takes a job, returns its output. Runs on the worker's thread.
JobHandler = t.Callable[[Job], str]


class SimulatedWork:
    """Stand-in workload that sleeps for a fixed delay and echoes the payload.

    Deterministic and side-effect free apart from the delay, which keeps
    workers busy long enough for jobs to spread across the pool.
    """

    def __init__(self, delay: float = 0.1) -> None:
        if delay < 0:
            raise ValueError(f"delay must be >= 0, got {delay}")
        self.delay = delay

    def __call__(self, job: Job) -> str:
        if self.delay:
            time.sleep(self.delay)
        return job.data

    def __repr__(self) -> str:
        return f"SimulatedWork(delay={self.delay})"
