"""Unit tests for the background poll loop behind RoutineScheduler.start()."""

import threading

from conftest import FakeClock, dt

from cadence import RoutineScheduler, SchedulerSettings


class FlakyClock(FakeClock):
    """Raises on the first ``failures`` reads, then behaves like FakeClock."""

    def __init__(self, now, failures):
        super().__init__(now)
        self.failures = failures
        self.reads = 0

    def __call__(self):
        self.reads += 1
        if self.reads <= self.failures:
            raise RuntimeError("clock unavailable")
        return super().__call__()


class TestPollThread:
    def test_runs_on_named_daemon_thread(self, scheduler, mock_runner):
        seen = {}
        polled = threading.Event()

        def on_due(name):
            seen["thread"] = threading.current_thread()
            polled.set()

        mock_runner.on_due.side_effect = on_due
        scheduler.register_job("report", "0 9 * * 1")

        scheduler.start()
        try:
            assert polled.wait(timeout=5)
        finally:
            scheduler.stop()

        assert seen["thread"].name == "cadence-polling"
        assert seen["thread"].daemon
        assert not seen["thread"].is_alive()

    def test_restart_uses_fresh_thread(self, scheduler):
        scheduler.start()
        first = scheduler._poll_thread.thread
        scheduler.stop()

        scheduler.start()
        try:
            assert scheduler._poll_thread.thread is not first
            assert scheduler._poll_thread.thread.is_alive()
        finally:
            scheduler.stop()

        assert scheduler._poll_thread is None


class TestPollFailures:
    def test_clock_error_is_logged_and_loop_continues(
        self, production_settings, mock_runner, mock_logger
    ):
        clock = FlakyClock(dt(2025, 6, 16, 9, 0), failures=2)
        polled = threading.Event()
        mock_runner.on_due.side_effect = lambda name: polled.set()

        scheduler = RoutineScheduler(
            settings=production_settings, runner=mock_runner, clock=clock, logger=mock_logger
        )
        scheduler.register_job("report", "0 9 * * 1")

        scheduler.start()
        try:
            assert polled.wait(timeout=5)
        finally:
            scheduler.stop()

        assert clock.reads >= 3
        failures = [
            c for c in mock_logger.error.call_args_list if c.args == ("Poll failed",)
        ]
        assert len(failures) == 2
        assert failures[0].kwargs == {"exc_info": True, "error": "clock unavailable"}
        mock_runner.on_due.assert_called_once_with("report")

    def test_handler_error_is_logged_per_job(self, scheduler, mock_runner, mock_logger):
        calls = threading.Event()

        def on_due(name):
            calls.set()
            raise RuntimeError("handler down")

        mock_runner.on_due.side_effect = on_due
        scheduler.register_job("report", "0 9 * * 1")

        scheduler.start()
        try:
            assert calls.wait(timeout=5)
        finally:
            scheduler.stop()

        mock_logger.error.assert_any_call(
            "Due job handler raised", exc_info=True, job_name="report", error="handler down"
        )
        assert scheduler.get_job("report").last_fired_at == dt(2025, 6, 16, 9, 0)

    def test_stop_without_polls(self, mock_runner, mock_logger):
        scheduler = RoutineScheduler(
            SchedulerSettings(),
            runner=mock_runner,
            clock=FakeClock(dt(2025, 6, 16, 9, 0)),
            logger=mock_logger,
        )
        scheduler.start()

        assert scheduler.stop() == {"was_running": True}
        mock_runner.on_due.assert_not_called()
        mock_logger.info.assert_any_call("Routine scheduler stopped")
        mock_logger.error.assert_not_called()
        mock_logger.warning.assert_not_called()
