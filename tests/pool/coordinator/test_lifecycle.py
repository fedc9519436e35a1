"""Tests for coordinator lifecycle ordering and bookkeeping."""

import pytest

from corepool.config.settings import Settings
from corepool.domain.exceptions import PoolStateError, QueueDisconnectedError
from corepool.domain.job import synthesize_jobs
from corepool.domain.worker_state import WorkerState
from corepool.pool.coordinator import PoolCoordinator
from corepool.pool.worker.handlers import SimulatedWork
from corepool.pool.worker_pool.base import BaseWorkerPool


class TestInitialization:
    def test_nothing_started_before_open(self, make_coordinator):
        coordinator = make_coordinator()

        assert not coordinator.is_open
        assert coordinator.worker_count == 0
        assert coordinator.workers == ()

    def test_rejects_zero_workers(self):
        with pytest.raises(ValueError, match=">= 1"):
            PoolCoordinator(workers=0)

    def test_rejects_non_positive_poll_interval(self):
        with pytest.raises(ValueError, match="poll_interval"):
            PoolCoordinator(poll_interval=0)


class TestSizing:
    def test_sizes_pool_from_core_counter(self, make_coordinator, mock_logger):
        coordinator = make_coordinator(workers=None, core_counter=lambda: 3)

        coordinator.open()

        assert coordinator.worker_count == 3
        mock_logger.info.assert_any_call("Found 3 physical cores")

    def test_explicit_workers_skip_core_counter(self, make_coordinator, mocker):
        core_counter = mocker.Mock(return_value=8)
        coordinator = make_coordinator(workers=2, core_counter=core_counter)

        coordinator.open()

        assert coordinator.worker_count == 2
        core_counter.assert_not_called()

    def test_invalid_core_count_raises(self, make_coordinator):
        coordinator = make_coordinator(workers=None, core_counter=lambda: 0)

        with pytest.raises(ValueError, match="expected >= 1"):
            coordinator.open()

    def test_from_settings(self, test_settings):
        coordinator = PoolCoordinator.from_settings(test_settings)

        results = coordinator.run(synthesize_jobs(3))

        assert coordinator.worker_count == test_settings.max_workers
        assert len(results) == 3

    def test_from_settings_kwargs_override(self, mock_logger):
        settings = Settings(max_workers=4, work_delay=0.0)
        handler = SimulatedWork(delay=0)

        coordinator = PoolCoordinator.from_settings(
            settings, workers=1, handler=handler, logger=mock_logger
        )
        coordinator.run(synthesize_jobs(1))

        assert coordinator.worker_count == 1

    def test_custom_pool_factory(self, make_coordinator, mocker, mock_logger):
        pool = mocker.Mock(spec=BaseWorkerPool)
        pool.workers = ()
        pool.failed_workers = ()
        pool.stop_all.return_value = 0
        pool_factory = mocker.Mock(return_value=pool)
        coordinator = make_coordinator(workers=5, worker_pool_factory=pool_factory)

        coordinator.open()

        kwargs = pool_factory.call_args.kwargs
        assert kwargs["max_workers"] == 5
        assert kwargs["job_queue"] is coordinator.job_queue
        assert kwargs["results"] is coordinator.results
        assert kwargs["logger"] is mock_logger
        pool.start.assert_called_once()


class TestOrdering:
    def test_open_twice_raises(self, make_coordinator):
        coordinator = make_coordinator()
        coordinator.open()

        with pytest.raises(PoolStateError, match="only be opened once"):
            coordinator.open()

    @pytest.mark.parametrize("operation", ["dispatch", "collect", "shutdown", "join"])
    def test_operations_require_open_pool(self, make_coordinator, operation):
        coordinator = make_coordinator()
        args = ([],) if operation == "dispatch" else ()

        with pytest.raises(PoolStateError, match="not open"):
            getattr(coordinator, operation)(*args)

    def test_collect_more_than_outstanding_raises(self, make_coordinator):
        coordinator = make_coordinator()
        coordinator.open()
        coordinator.dispatch(synthesize_jobs(2))

        with pytest.raises(PoolStateError, match="2 outstanding"):
            coordinator.collect(3)

    def test_shutdown_with_outstanding_results_raises(self, make_coordinator):
        coordinator = make_coordinator()
        coordinator.open()
        coordinator.dispatch(synthesize_jobs(2))

        with pytest.raises(PoolStateError, match="outstanding"):
            coordinator.shutdown()
        assert coordinator.stops_sent == 0

    def test_shutdown_twice_raises(self, make_coordinator):
        coordinator = make_coordinator()
        coordinator.open()
        coordinator.shutdown()

        with pytest.raises(PoolStateError, match="already shut down"):
            coordinator.shutdown()

    def test_join_before_shutdown_raises(self, make_coordinator):
        coordinator = make_coordinator()
        coordinator.open()

        with pytest.raises(PoolStateError, match="wait forever"):
            coordinator.join()

    def test_dispatch_after_shutdown_raises(self, make_coordinator):
        coordinator = make_coordinator()
        coordinator.open()
        coordinator.shutdown()

        with pytest.raises(PoolStateError, match="after shutdown"):
            coordinator.dispatch(synthesize_jobs(1))

    def test_cannot_reopen_after_close(self, make_coordinator):
        coordinator = make_coordinator()
        coordinator.open()
        coordinator.close()

        with pytest.raises(PoolStateError):
            coordinator.open()


class TestExplicitLifecycle:
    def test_full_sequence(self, make_coordinator):
        coordinator = make_coordinator(workers=3)

        coordinator.open()
        assert coordinator.dispatch(synthesize_jobs(5)) == 5
        results = coordinator.collect()
        assert coordinator.shutdown() == 3
        coordinator.join()

        assert len(results) == 5
        assert coordinator.jobs_enqueued == coordinator.results_received == 5
        assert coordinator.stops_sent == 3
        assert all(w.state == WorkerState.TERMINATED for w in coordinator.workers)

    def test_interleaved_dispatch_and_collect(self, make_coordinator):
        coordinator = make_coordinator()
        coordinator.open()

        coordinator.dispatch(synthesize_jobs(3))
        first = coordinator.collect(2)
        assert coordinator.outstanding == 1

        coordinator.dispatch(synthesize_jobs(2))
        rest = coordinator.collect()
        coordinator.close()

        assert len(first) == 2
        assert len(rest) == 3
        assert coordinator.results_received == 5

    def test_collect_zero_returns_immediately(self, make_coordinator):
        coordinator = make_coordinator()
        coordinator.open()

        assert coordinator.collect(0) == []


class TestClose:
    def test_close_closes_channels(self, make_coordinator):
        coordinator = make_coordinator()
        coordinator.open()

        coordinator.close()

        assert not coordinator.is_open
        assert coordinator.job_queue.is_closed
        assert coordinator.results.is_closed
        with pytest.raises(QueueDisconnectedError):
            coordinator.job_queue.put_stop()

    def test_close_is_idempotent(self, make_coordinator):
        coordinator = make_coordinator()
        coordinator.open()

        coordinator.close()
        coordinator.close()

        assert coordinator.stops_sent == 2

    def test_close_after_manual_join_does_not_rejoin(self, make_coordinator, mock_logger):
        coordinator = make_coordinator()
        coordinator.open()
        coordinator.shutdown()
        coordinator.join()

        coordinator.close()

        terminated_logs = [
            c for c in mock_logger.info.call_args_list if "terminated" in c.args[0]
        ]
        assert len(terminated_logs) == 1

    def test_close_without_open(self, make_coordinator):
        coordinator = make_coordinator()

        coordinator.close()

        assert coordinator.results.is_closed

    def test_operations_after_close_raise(self, make_coordinator):
        coordinator = make_coordinator()
        coordinator.run(synthesize_jobs(1))

        with pytest.raises(PoolStateError, match="closed"):
            coordinator.dispatch(synthesize_jobs(1))


class TestEvents:
    def test_pool_events_emitted(self, make_coordinator, real_emitter):
        seen = []
        real_emitter.on("pool.jobs_dispatched", seen.append)
        real_emitter.on("pool.stop_sent", seen.append)
        coordinator = make_coordinator(workers=2, emitter=real_emitter)

        coordinator.run(synthesize_jobs(3))

        assert [e.event_type for e in seen] == ["pool.jobs_dispatched", "pool.stop_sent"]
        assert seen[0].count == 3
        assert seen[1].count == 2

    def test_workers_share_coordinator_emitter(self, make_coordinator, real_emitter):
        stopped = []
        real_emitter.on("worker.stopped", stopped.append)
        coordinator = make_coordinator(workers=3, emitter=real_emitter)

        coordinator.run(synthesize_jobs(6))

        assert sorted(e.worker_id for e in stopped) == [0, 1, 2]
        assert sum(e.jobs_processed for e in stopped) == 6
