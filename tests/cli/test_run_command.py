"""Tests for the run and cores commands."""

from corepool.domain.exceptions import WorkerFailedError
from corepool.pool.worker.handlers import SimulatedWork


class TestRunCommandWithMock:
    def test_prints_every_result_and_summary(
        self, cli_runner, app_with_mock_coordinator
    ):
        result = cli_runner.invoke(app_with_mock_coordinator, ["run"])

        assert result.exit_code == 0
        assert "Worker 1 completed job with data 'Job #0 data'" in result.output
        assert "Worker 0 completed job with data 'Job #1 data'" in result.output
        assert "Completed 2 job(s) on 2 worker(s)" in result.output

    def test_uses_settings_job_count_by_default(
        self, cli_runner, app_with_mock_coordinator, mock_coordinator, test_settings
    ):
        cli_runner.invoke(app_with_mock_coordinator, ["run"])

        jobs = mock_coordinator.run.call_args.args[0]
        assert len(jobs) == test_settings.job_count

    def test_jobs_option_overrides_count(
        self, cli_runner, app_with_mock_coordinator, mock_coordinator
    ):
        cli_runner.invoke(app_with_mock_coordinator, ["run", "--jobs", "7"])

        jobs = mock_coordinator.run.call_args.args[0]
        assert [job.data for job in jobs] == [f"Job #{i} data" for i in range(7)]

    def test_delay_option_builds_handler(
        self, cli_runner, app_with_mock_coordinator, coordinator_factory
    ):
        cli_runner.invoke(app_with_mock_coordinator, ["run", "--delay", "0.25"])

        handler = coordinator_factory.call_args.kwargs["handler"]
        assert isinstance(handler, SimulatedWork)
        assert handler.delay == 0.25

    def test_pool_failure_exits_nonzero(
        self, cli_runner, app_with_mock_coordinator, mock_coordinator
    ):
        mock_coordinator.run.side_effect = WorkerFailedError(1, ValueError("boom"))

        result = cli_runner.invoke(app_with_mock_coordinator, ["run"])

        assert result.exit_code == 1
        assert "Pool failed" in result.output
        assert "Worker 1 failed: ValueError: boom" in result.output


class TestRunCommandEndToEnd:
    def test_runs_real_pool(self, cli_runner, test_app):
        result = cli_runner.invoke(test_app, ["run", "--jobs", "5", "--delay", "0"])

        assert result.exit_code == 0
        assert result.output.count("completed job with data") == 5
        assert "Completed 5 job(s) on 2 worker(s)" in result.output

    def test_progress_shows_worker_activity(self, cli_runner, test_app):
        result = cli_runner.invoke(
            test_app, ["run", "--jobs", "3", "--delay", "0", "--progress"]
        )

        assert result.exit_code == 0
        assert result.output.count("received job") == 3
        assert result.output.count("terminated after") == 2


class TestCoresCommand:
    def test_prints_core_count(self, cli_runner, app_with_mock_coordinator):
        result = cli_runner.invoke(app_with_mock_coordinator, ["cores"])

        assert result.exit_code == 0
        assert result.output.strip() == "6"
