#!/usr/bin/env python3
"""
04_single_worker_order.py - Ordering with a single worker

Demonstrates: With one worker, jobs run strictly in enqueue order, so results
arrive in that order too. With more workers no ordering is guaranteed.
"""
from corepool import PoolCoordinator, SimulatedWork, synthesize_jobs


def main() -> None:
    jobs = synthesize_jobs(5)
    results = PoolCoordinator(workers=1, handler=SimulatedWork(delay=0.01)).run(jobs)

    assert [r.job for r in results] == jobs
    for result in results:
        print(result)


if __name__ == "__main__":
    main()
