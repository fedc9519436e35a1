"""Pytest configuration and fixtures for corepool tests."""

import loguru
import pytest
from typer.testing import CliRunner

from corepool.app import create_app
from corepool.cli.app import create_cli_app
from corepool.config.settings import Environment, LogLevel, Settings
from corepool.events import BaseEmitter, EventEmitter
from corepool.infrastructure.logging import reset_logging
from corepool.pool.channels import JobQueue, ResultChannel

# Upper bound for any blocking wait in tests, so a deadlock fails instead of
# hanging the run.
JOIN_TIMEOUT = 5.0


@pytest.fixture
def test_settings():
    """Provide test-specific settings."""
    return Settings(
        environment=Environment.TESTING,
        log_level=LogLevel.CRITICAL,  # Minimal logging during tests
        max_workers=2,
        job_count=4,
        work_delay=0.0,
        poll_interval=0.05,
    )


@pytest.fixture
def test_app(test_settings):
    """Provide a test app with clean logging state."""
    reset_logging()
    app = create_app(settings=test_settings)
    yield app
    reset_logging()


@pytest.fixture
def mock_logger(mocker):
    """Provide a mock logger for testing that captures log calls."""
    logger = mocker.Mock(spec=loguru.logger)
    return logger


@pytest.fixture
def mock_emitter(mocker):
    """Provide a mock event emitter for testing event emission."""
    emitter = mocker.Mock(spec=BaseEmitter)
    return emitter


@pytest.fixture
def real_emitter(mock_logger):
    """Provide a real EventEmitter for tests that subscribe handlers.

    For simple tests that only verify emit() was called, use mock_emitter instead.
    """
    return EventEmitter(mock_logger)


@pytest.fixture
def job_queue(mock_logger):
    """Provide a real JobQueue with a mocked logger."""
    return JobQueue(logger=mock_logger)


@pytest.fixture
def results():
    """Provide a real ResultChannel."""
    return ResultChannel()


@pytest.fixture(autouse=True)
def clean_logging_state():
    """Automatically reset logging before each test for isolation."""
    reset_logging()
    yield
    reset_logging()


# CLI-specific fixtures (shared across all tests)


@pytest.fixture
def cli_runner():
    """Provide Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def default_app():
    """Provide CLI app with default settings."""
    return create_cli_app()
