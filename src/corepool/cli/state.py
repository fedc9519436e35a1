"""CLI state container."""

import typing as t

from ..config.settings import Settings
from ..infrastructure.system import CoreCounter, physical_core_count
from ..pool.coordinator import PoolCoordinator

CoordinatorFactory = t.Callable[..., PoolCoordinator]


class CLIState:
    """Application state container for CLI commands.

    Holds Settings plus the factories commands use, so tests can swap in
    fakes without patching modules.
    """

    def __init__(
        self,
        settings: Settings,
        coordinator_factory: CoordinatorFactory | None = None,
        core_counter: CoreCounter = physical_core_count,
    ):
        self.settings = settings
        self._coordinator_factory = coordinator_factory or PoolCoordinator.from_settings
        self.core_counter = core_counter

    def create_coordinator(self, **kwargs: t.Any) -> PoolCoordinator:
        """Create a coordinator configured from these settings."""
        return self._coordinator_factory(self.settings, **kwargs)
