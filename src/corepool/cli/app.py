"""CLI application factory."""

from typing import Optional

import typer

from ..app import create_app
from ..config.settings import Environment, LogLevel, Settings, build_settings
from .commands.cores import cores
from .commands.run import run
from .state import CLIState


def create_cli_app(
    settings: Settings | None = None,
    state: CLIState | None = None,
) -> typer.Typer:
    """Create CLI application with optional settings or state override.

    Args:
        settings: Optional Settings override for testing. Bypasses CLI flags.
        state: Optional fully built CLIState for testing. Takes precedence
            over settings.

    Returns:
        Configured Typer application with commands registered
    """
    app = typer.Typer(
        name="corepool",
        help="Bounded worker pool - one worker thread per physical core",
        no_args_is_help=True,
    )

    @app.callback()
    def setup(
        ctx: typer.Context,
        workers: Optional[int] = typer.Option(
            None,
            "--workers",
            "-w",
            help="Number of workers (default: one per physical core)",
            min=1,
        ),
        verbose: bool = typer.Option(
            False,
            "--verbose",
            "-v",
            help="Enable verbose output (DEBUG logging)",
        ),
    ) -> None:
        """Global options available to all commands."""
        if state is not None:
            ctx.obj = state
            return

        if settings is not None:
            resolved_settings = settings
        else:
            resolved_settings = build_settings(
                environment=Environment.DEVELOPMENT,
                max_workers=workers,
                log_level=LogLevel.DEBUG if verbose else LogLevel.WARNING,
            )

        create_app(resolved_settings)
        ctx.obj = CLIState(resolved_settings)

    app.command()(run)
    app.command()(cores)
    return app
