"""Logging setup built on loguru.

A single stderr sink is installed lazily. Development gets a readable,
colourised format that includes the thread name (workers log from their own
threads); production emits serialised JSON records.
"""

import sys
import typing as t

from loguru import logger

from ..config.settings import Environment, LogLevel, Settings

if t.TYPE_CHECKING:
    import loguru

_DEV_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<magenta>{thread.name}</magenta> | "
    "<cyan>{extra[name]}</cyan> - <level>{message}</level>"
)

_configured = False


def configure_logger(
    level: LogLevel | str = LogLevel.INFO,
    environment: Environment = Environment.DEVELOPMENT,
) -> None:
    """Replace all loguru sinks with one configured for the environment."""
    global _configured

    logger.remove()
    logger.configure(extra={"name": "corepool"})
    if environment == Environment.PRODUCTION:
        logger.add(sys.stderr, level=str(level), serialize=True)
    else:
        logger.add(
            sys.stderr,
            level=str(level),
            format=_DEV_FORMAT,
            colorize=environment == Environment.DEVELOPMENT,
        )
    _configured = True


def setup_logging(settings: Settings) -> None:
    """Configure logging from application settings."""
    configure_logger(level=settings.log_level, environment=settings.environment)


def get_logger(name: str) -> "loguru.Logger":
    """Return a logger bound to ``name``, configuring defaults on first use."""
    if not _configured:
        configure_logger()
    return logger.bind(name=name)


def is_configured() -> bool:
    return _configured


def reset_logging() -> None:
    """Remove all sinks and mark logging as unconfigured."""
    global _configured

    logger.remove()
    _configured = False
