"""Shared fixtures for CLI tests."""

import pytest

from corepool.cli.app import create_cli_app
from corepool.cli.state import CLIState
from corepool.domain.job import Job
from corepool.domain.result import JobResult
from corepool.events import NullEmitter
from corepool.pool.coordinator import PoolCoordinator


@pytest.fixture
def test_app(test_settings):
    """Provide CLI app with test settings injected."""
    return create_cli_app(settings=test_settings)


@pytest.fixture
def mock_coordinator(mocker):
    """Provide a mocked PoolCoordinator returning two canned results."""
    mock = mocker.Mock(spec=PoolCoordinator)
    mock.emitter = NullEmitter()
    mock.worker_count = 2
    mock.run.return_value = [
        JobResult(worker_id=1, job=Job(data="Job #0 data")),
        JobResult(worker_id=0, job=Job(data="Job #1 data")),
    ]
    return mock


@pytest.fixture
def coordinator_factory(mocker, mock_coordinator):
    """Factory returning mock_coordinator, recording how it was called."""
    return mocker.Mock(return_value=mock_coordinator)


@pytest.fixture
def app_with_mock_coordinator(test_settings, coordinator_factory):
    """CLI app whose commands receive the mocked coordinator."""
    state = CLIState(
        test_settings,
        coordinator_factory=coordinator_factory,
        core_counter=lambda: 6,
    )
    return create_cli_app(state=state)
