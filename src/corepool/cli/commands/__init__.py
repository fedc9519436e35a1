"""CLI commands."""

from .cores import cores
from .run import run

__all__ = ["cores", "run"]
