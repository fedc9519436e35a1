"""Shared fixtures for coordinator tests."""

import threading
import typing as t

import pytest

from corepool.pool.coordinator import PoolCoordinator
from corepool.pool.worker.handlers import SimulatedWork
from tests.conftest import JOIN_TIMEOUT


def call_bounded(fn: t.Callable[..., t.Any], *args: t.Any, **kwargs: t.Any) -> t.Any:
    """Run a blocking coordinator call on a helper thread.

    Fails the test if the call is still blocked after JOIN_TIMEOUT, so a
    deadlock shows up as a failure instead of hanging the run. Whatever the
    call returns or raises is passed through.
    """
    outcome: dict[str, t.Any] = {}

    def target() -> None:
        try:
            outcome["value"] = fn(*args, **kwargs)
        except BaseException as exc:
            outcome["error"] = exc

    thread = threading.Thread(target=target, daemon=True)
    thread.start()
    thread.join(JOIN_TIMEOUT)
    assert not thread.is_alive(), (
        f"{getattr(fn, '__name__', fn)} still blocked after {JOIN_TIMEOUT}s"
    )
    if "error" in outcome:
        raise outcome["error"]
    return outcome.get("value")


@pytest.fixture
def bounded() -> t.Callable[..., t.Any]:
    """Provide call_bounded to tests that exercise blocking operations."""
    return call_bounded


@pytest.fixture
def make_coordinator(mock_logger) -> t.Iterator[t.Callable[..., PoolCoordinator]]:
    """Factory fixture to create coordinators that are always closed afterwards."""
    created: list[PoolCoordinator] = []

    def _make(workers: int | None = 2, **kwargs: t.Any) -> PoolCoordinator:
        kwargs.setdefault("handler", SimulatedWork(delay=0))
        kwargs.setdefault("logger", mock_logger)
        kwargs.setdefault("poll_interval", 0.05)
        coordinator = PoolCoordinator(workers=workers, **kwargs)
        created.append(coordinator)
        return coordinator

    yield _make

    for coordinator in created:
        if coordinator.is_open:
            call_bounded(
                coordinator.__exit__, RuntimeError, RuntimeError("test cleanup"), None
            )
