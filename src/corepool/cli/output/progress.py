"""Progress and result display functions for CLI."""

import typer

from ...domain.result import JobResult
from ...events import (
    BaseEmitter,
    JobReceivedEvent,
    WorkerFailedEvent,
    WorkerStoppedEvent,
)


def display_job_received(event: JobReceivedEvent) -> None:
    """Display that a worker picked up a job.

    Args:
        event: Job received event
    """
    typer.echo(f"Worker {event.worker_id} received job: '{event.job_data}'")


def display_worker_stopped(event: WorkerStoppedEvent) -> None:
    """Display a clean worker exit.

    Args:
        event: Worker stopped event
    """
    typer.echo(
        f"Worker {event.worker_id} terminated after {event.jobs_processed} job(s)"
    )


def display_worker_failed(event: WorkerFailedEvent) -> None:
    """Display an abnormal worker exit.

    Args:
        event: Worker failed event
    """
    typer.secho(f"✗ Worker {event.worker_id} failed", fg=typer.colors.RED, err=True)
    typer.secho(f"  Error: {event.error.message}", fg=typer.colors.RED, err=True)


def display_result(result: JobResult) -> None:
    """Echo one completed job result (the CLI's result sink)."""
    typer.echo(result.message)


def display_summary(job_count: int, worker_count: int) -> None:
    typer.secho(
        f"✓ Completed {job_count} job(s) on {worker_count} worker(s)",
        fg=typer.colors.GREEN,
    )


def subscribe_progress(emitter: BaseEmitter) -> None:
    """Wire the display functions to worker events."""
    emitter.on("worker.job_received", display_job_received)
    emitter.on("worker.stopped", display_worker_stopped)
    emitter.on("worker.failed", display_worker_failed)
