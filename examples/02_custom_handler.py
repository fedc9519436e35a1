#!/usr/bin/env python3
"""
02_custom_handler.py - Plugging in your own work

Demonstrates: Passing a job handler instead of the simulated sleep, and
correlating results by job rather than by arrival order
"""
import hashlib

from corepool import Job, PoolCoordinator


def checksum(job: Job) -> str:
    """Hash the job payload; runs on a worker thread."""
    return hashlib.sha256(job.data.encode()).hexdigest()[:12]


def main() -> None:
    words = ["alpha", "bravo", "charlie", "delta", "echo", "foxtrot"]
    jobs = [Job(data=word) for word in words]

    with PoolCoordinator(workers=3, handler=checksum) as coordinator:
        coordinator.dispatch(jobs)
        results = coordinator.collect()

    by_payload = {result.job.data: result for result in results}
    for word in words:
        result = by_payload[word]
        print(f"{word:>8} -> {result.output} (worker {result.worker_id})")


if __name__ == "__main__":
    main()
