#!/usr/bin/env python3
"""
03_event_monitoring.py - Watching workers through events

Demonstrates: Subscribing to worker.* and pool.* events on the coordinator's
emitter. Handlers run on the emitting thread.
"""
from corepool import PoolCoordinator, SimulatedWork, synthesize_jobs
from corepool.events import (
    JobReceivedEvent,
    JobsDispatchedEvent,
    StopSentEvent,
    WorkerStoppedEvent,
)


def on_dispatched(event: JobsDispatchedEvent) -> None:
    print(f"[pool] dispatched {event.count} job(s)")


def on_received(event: JobReceivedEvent) -> None:
    print(f"[worker {event.worker_id}] picked up '{event.job_data}'")


def on_stop_sent(event: StopSentEvent) -> None:
    print(f"[pool] sent {event.count} stop signal(s)")


def on_stopped(event: WorkerStoppedEvent) -> None:
    print(f"[worker {event.worker_id}] terminated after {event.jobs_processed} job(s)")


def main() -> None:
    coordinator = PoolCoordinator(workers=2, handler=SimulatedWork(delay=0.05))
    coordinator.emitter.on("pool.jobs_dispatched", on_dispatched)
    coordinator.emitter.on("worker.job_received", on_received)
    coordinator.emitter.on("pool.stop_sent", on_stop_sent)
    coordinator.emitter.on("worker.stopped", on_stopped)

    results = coordinator.run(synthesize_jobs(6))
    print(f"Collected {len(results)} results")


if __name__ == "__main__":
    main()
