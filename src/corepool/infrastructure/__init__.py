"""Infrastructure - logging and host system collaborators."""

from .logging import configure_logger, get_logger, reset_logging, setup_logging
from .system import CoreCounter, physical_core_count

__all__ = [
    "CoreCounter",
    "configure_logger",
    "get_logger",
    "physical_core_count",
    "reset_logging",
    "setup_logging",
]
