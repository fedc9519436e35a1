#!/usr/bin/env python3
"""
01_basic_pool.py - Simplest possible pool run

Demonstrates: One worker per physical core, 20 synthesized jobs, default
simulated work
"""
from corepool import PoolCoordinator, synthesize_jobs


def main() -> None:
    """Run 20 jobs and print every result."""
    print("Starting basic pool example...")

    results = PoolCoordinator().run(synthesize_jobs(20))

    for result in results:
        print(f"Received completed job data: {result}")
    print(f"Done: {len(results)} results")


if __name__ == "__main__":
    main()
