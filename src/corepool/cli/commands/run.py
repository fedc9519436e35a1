"""Run command - process a batch of synthesized jobs on the pool."""

from typing import Optional

import typer

from ...domain.exceptions import CorePoolError
from ...domain.job import synthesize_jobs
from ...pool.worker.handlers import SimulatedWork
from ..output.progress import display_result, display_summary, subscribe_progress
from ..state import CLIState


def run(
    ctx: typer.Context,
    jobs: Optional[int] = typer.Option(
        None,
        "--jobs",
        "-j",
        help="Number of jobs to dispatch (default from settings)",
        min=0,
    ),
    delay: Optional[float] = typer.Option(
        None,
        "--delay",
        "-d",
        help="Simulated work per job in seconds (default from settings)",
        min=0.0,
    ),
    progress: bool = typer.Option(
        False,
        "--progress",
        "-p",
        help="Show worker activity as it happens",
    ),
) -> None:
    """Dispatch jobs to the worker pool and print every result."""
    state: CLIState = ctx.obj
    job_count = jobs if jobs is not None else state.settings.job_count
    work_delay = delay if delay is not None else state.settings.work_delay

    coordinator = state.create_coordinator(handler=SimulatedWork(work_delay))
    if progress:
        subscribe_progress(coordinator.emitter)

    try:
        results = coordinator.run(synthesize_jobs(job_count))
    except CorePoolError as exc:
        typer.secho(f"✗ Pool failed: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc

    for result in results:
        display_result(result)
    display_summary(len(results), coordinator.worker_count)
