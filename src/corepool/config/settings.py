"""Application settings."""

import enum
import typing as t

from pydantic import BaseModel, ConfigDict, Field


class Environment(enum.StrEnum):
    """Runtime environment for the application.

    Kept small and explicit to support simple environment-driven behavior
    (log format selection) without introducing configuration dependencies.
    """

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(enum.StrEnum):
    """Log levels understood by loguru."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseModel):
    """Settings container used to bootstrap the app and the CLI.

    The app/CLI layer decides how values are populated (defaults, CLI flags,
    injected test settings); core code only depends on this shape.
    """

    model_config = ConfigDict(frozen=True)

    environment: Environment = Field(
        default=Environment.PRODUCTION, description="Runtime environment"
    )
    log_level: LogLevel = Field(default=LogLevel.INFO, description="Minimum log level")
    max_workers: int | None = Field(
        default=None,
        ge=1,
        description="Worker count override. None sizes the pool to physical cores",
    )
    job_count: int = Field(default=20, ge=0, description="Jobs for the demo source")
    work_delay: float = Field(
        default=0.1, ge=0, description="Simulated work duration per job in seconds"
    )
    poll_interval: float = Field(
        default=0.5,
        gt=0,
        description="How often collect re-checks worker health while waiting",
    )


def build_settings(**overrides: t.Any) -> Settings:
    """Build Settings, applying only the overrides that are not None.

    CLI options default to None when the user did not pass them, so filtering
    here lets Settings defaults win for anything left unspecified.
    """
    return Settings(**{k: v for k, v in overrides.items() if v is not None})
