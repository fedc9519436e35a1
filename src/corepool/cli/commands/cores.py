"""Cores command - report the detected physical core count."""

import typer

from ..state import CLIState


def cores(ctx: typer.Context) -> None:
    """Print the number of physical cores (the default pool size)."""
    state: CLIState = ctx.obj
    typer.echo(state.core_counter())
