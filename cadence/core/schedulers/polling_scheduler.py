"""Polling-based routine job scheduler."""

import threading
from collections.abc import Callable, Iterable, Mapping
from datetime import datetime
from typing import Any

from pydantic import ValidationError

from cadence.config import SchedulerSettings
from cadence.core.common.exceptions import (
    JobAlreadyExistsError,
    MalformedScheduleError,
    SchedulerConfigurationError,
    SchedulerStateError,
)
from cadence.core.execution.callbacks import DueJobHandler
from cadence.core.execution.job_runner import JobRunner
from cadence.core.jobs import RoutineJob, RoutineJobDefinition
from cadence.core.registry import JobRegistry
from cadence.core.triggers import DEDUP_WINDOW
from cadence.utils.logging import ContextLogger, get_logger
from cadence.utils.time import Clock, make_clock


class _PollThread:
    """
    Calls ``poll`` on a daemon thread every ``interval`` seconds until stopped.

    Ticks never overlap: the next wait starts after the previous poll returns.
    """

    def __init__(
        self, poll: Callable[[], Any], interval: float, logger: ContextLogger
    ) -> None:
        self._poll = poll
        self._interval = interval
        self._logger = logger
        self._stop_event = threading.Event()
        self._thread = threading.Thread(target=self._run, daemon=True, name="cadence-polling")

    @property
    def thread(self) -> threading.Thread:
        return self._thread

    def start(self) -> None:
        self._thread.start()

    def _run(self) -> None:
        while not self._stop_event.wait(timeout=self._interval):
            try:
                self._poll()
            except Exception as e:
                # A failed tick (e.g. the clock raised) must not end the loop
                self._logger.error("Poll failed", exc_info=True, error=str(e))

    def stop(self, timeout: float = 5.0) -> bool:
        """Signal the loop and wait for it. Returns False if it is still alive."""
        self._stop_event.set()
        if self._thread is not threading.current_thread():
            self._thread.join(timeout=timeout)
        return not self._thread.is_alive()


class RoutineScheduler:
    """
    Polls registered routine jobs and hands due ones to a DueJobHandler.

    One poll loop owns every job's evaluator; ``poll`` must not run
    concurrently with itself. Registration is safe from other threads.

    Usage:
        >>> scheduler = RoutineScheduler(SchedulerSettings(environment="production"))
        >>> scheduler.register_job("weekly-report", "0 9 * * 1", send_weekly_report)
        >>> scheduler.start()
    """

    def __init__(
        self,
        settings: SchedulerSettings | None = None,
        runner: DueJobHandler | None = None,
        clock: Clock | None = None,
        logger: ContextLogger | None = None,
    ) -> None:
        """
        Initialize routine scheduler.

        Args:
            settings: Scheduler settings (reads the environment if None)
            runner: Handler for due jobs (JobRunner if None)
            clock: Source of "now" for polls (wall clock in settings.timezone if None)
            logger: Custom logger (uses default if None)
        """
        self.settings = settings or SchedulerSettings.from_env()
        self.logger = logger or get_logger()
        self.runner: DueJobHandler = runner or JobRunner(self.settings, logger=self.logger)
        self.clock = clock or make_clock(self.settings.timezone)

        self._registry = JobRegistry()
        self._poll_thread: _PollThread | None = None
        self._running = False

    # ------------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------------

    def register_job(
        self,
        name: str,
        cron_expression: str,
        func: Callable[[], Any] | None = None,
        enabled: bool = True,
    ) -> RoutineJob:
        """
        Register a routine job.

        Args:
            name: Unique job name
            cron_expression: Five-field cron expression
            func: Job body (requires a runner that accepts functions)
            enabled: Disabled jobs are kept but never fire

        Returns:
            The registered job

        Raises:
            MalformedScheduleError: If the expression does not have five fields
            JobAlreadyExistsError: If the name is taken
            SchedulerConfigurationError: If func is given but the runner cannot take it
        """
        try:
            job = RoutineJob(name, cron_expression, enabled=enabled, logger=self.logger)
        except MalformedScheduleError as e:
            self.logger.error(
                "Rejected routine job with malformed schedule",
                job_name=name,
                expression=cron_expression,
                field_count=e.field_count,
            )
            raise

        if func is not None and not isinstance(self.runner, JobRunner):
            raise SchedulerConfigurationError(
                f"Cannot attach a function to '{name}': "
                f"{type(self.runner).__name__} does not accept job functions"
            )

        self._registry.add(job)
        if func is not None:
            self.runner.register_function(name, func)  # type: ignore[attr-defined]

        self.logger.info(
            "Routine job registered",
            job_name=name,
            expression=cron_expression,
            enabled=enabled,
        )
        return job

    def register_jobs(
        self, definitions: Iterable[RoutineJobDefinition | Mapping[str, Any]]
    ) -> list[RoutineJob]:
        """
        Register many jobs, skipping the ones that fail.

        Args:
            definitions: Definitions or raw records (``name``, ``cronExpression``, ``enabled``)

        Returns:
            Jobs that were registered
        """
        registered = []
        for raw in definitions:
            try:
                definition = (
                    raw
                    if isinstance(raw, RoutineJobDefinition)
                    else RoutineJobDefinition.model_validate(raw)
                )
                job = self.register_job(
                    definition.name, definition.cron_expression, enabled=definition.enabled
                )
            except (MalformedScheduleError, JobAlreadyExistsError, ValidationError) as e:
                name, expression = _identify(raw)
                self.logger.error(
                    "Skipping routine job",
                    job_name=name,
                    expression=expression,
                    reason=type(e).__name__,
                    error=str(e),
                )
                continue
            registered.append(job)
        return registered

    def unregister_job(self, name: str) -> None:
        """
        Remove a job.

        Raises:
            JobNotFoundError: If no job has that name
        """
        self._registry.remove(name)
        if isinstance(self.runner, JobRunner):
            self.runner.unregister_function(name)
        self.logger.info("Routine job unregistered", job_name=name)

    def get_job(self, name: str) -> RoutineJob:
        return self._registry.get(name)

    def list_jobs(self) -> list[RoutineJob]:
        return self._registry.snapshot()

    def enable_job(self, name: str) -> None:
        self._registry.get(name).enabled = True
        self.logger.info("Routine job enabled", job_name=name)

    def disable_job(self, name: str) -> None:
        self._registry.get(name).enabled = False
        self.logger.info("Routine job disabled", job_name=name)

    def update_schedule(self, name: str, cron_expression: str) -> RoutineJob:
        """
        Change a job's cron expression. The last fire time carries over.

        Raises:
            JobNotFoundError: If no job has that name
            MalformedScheduleError: If the new expression is malformed (old schedule stays)
        """
        job = self._registry.get(name)
        try:
            job.reschedule(cron_expression, logger=self.logger)
        except MalformedScheduleError as e:
            self.logger.error(
                "Rejected schedule update",
                job_name=name,
                expression=cron_expression,
                field_count=e.field_count,
            )
            raise
        self.logger.info("Routine job rescheduled", job_name=name, expression=cron_expression)
        return job

    def get_next_run_time(self, name: str, after: datetime | None = None) -> datetime | None:
        """Next minute the job's schedule matches, or None if disabled or never."""
        return self._registry.get(name).next_run_time(after or self.clock())

    # ------------------------------------------------------------------------
    # Polling
    # ------------------------------------------------------------------------

    def poll(self, now: datetime | None = None) -> list[str]:
        """
        Evaluate every enabled job once and dispatch the due ones.

        Args:
            now: Poll time (reads the clock if None)

        Returns:
            Names of the jobs that fired, in registration order
        """
        now = now or self.clock()
        fired = []

        for job in self._registry.snapshot():
            try:
                due = job.should_run(now)
            except Exception as e:
                self.logger.error(
                    "Routine job evaluation failed", exc_info=True, job_name=job.name, error=str(e)
                )
                continue
            if not due:
                continue

            fired.append(job.name)
            if self.settings.verbose:
                self.logger.info("Routine job due", job_name=job.name, fired_at=now.isoformat())

            try:
                self.runner.on_due(job.name)
            except Exception as e:
                self.logger.error(
                    "Due job handler raised", exc_info=True, job_name=job.name, error=str(e)
                )

        return fired

    def start(self) -> None:
        """
        Start polling on a daemon thread (non-blocking).

        Raises:
            SchedulerStateError: If already running
        """
        if self._running:
            raise SchedulerStateError(
                "Scheduler is already running. Call scheduler.stop() first to restart."
            )

        interval = self.settings.polling_interval_seconds
        if interval > DEDUP_WINDOW.total_seconds():
            self.logger.warning(
                "Polling interval exceeds the de-duplication window; due minutes may be skipped",
                polling_interval_seconds=interval,
            )

        self._poll_thread = _PollThread(self.poll, interval, self.logger)
        self._poll_thread.start()
        self._running = True

        self.logger.info(
            "Routine scheduler started",
            jobs=len(self._registry),
            polling_interval_seconds=interval,
            environment=self.settings.environment,
        )

    def stop(self) -> dict[str, Any]:
        """
        Stop polling. Job bodies already handed to the runner are not awaited.

        Returns:
            Dictionary with ``was_running``
        """
        if not self._running:
            return {"was_running": False}

        stopped = self._poll_thread.stop()
        self._poll_thread = None
        self._running = False
        if not stopped:
            self.logger.warning("Poll thread did not exit within the stop timeout")
        self.logger.info("Routine scheduler stopped")
        return {"was_running": True}

    def is_running(self) -> bool:
        return self._running


def _identify(raw: RoutineJobDefinition | Mapping[str, Any] | Any) -> tuple[Any, Any]:
    """Best-effort (name, expression) of a definition that failed to load."""
    if isinstance(raw, RoutineJobDefinition):
        return raw.name, raw.cron_expression
    if isinstance(raw, Mapping):
        return raw.get("name"), raw.get("cron_expression", raw.get("cronExpression"))
    return None, None
