"""A named job bound to its schedule and trigger evaluator."""

from datetime import datetime

from cadence.core.common.exceptions import MalformedScheduleError
from cadence.core.triggers import Schedule, TriggerEvaluator
from cadence.utils.logging import ContextLogger


class RoutineJob:
    """
    Routine job: name, cron schedule, de-duplicating evaluator and enabled flag.

    Usage:
        >>> job = RoutineJob("weekly-report", "0 9 * * 1")
        >>> job.should_run(now)
    """

    def __init__(
        self,
        name: str,
        cron_expression: str,
        enabled: bool = True,
        logger: ContextLogger | None = None,
    ) -> None:
        """
        Initialize routine job.

        Args:
            name: Unique job name
            cron_expression: Five-field cron expression
            enabled: Disabled jobs never fire
            logger: Logger for schedule warnings

        Raises:
            MalformedScheduleError: If the expression does not have five fields
        """
        self.name = name
        self.enabled = enabled
        self._evaluator = TriggerEvaluator(_parse_for(name, cron_expression, logger))

    @property
    def schedule(self) -> Schedule:
        return self._evaluator.schedule

    @property
    def cron_expression(self) -> str:
        return self._evaluator.schedule.expression

    @property
    def last_fired_at(self) -> datetime | None:
        return self._evaluator.last_fired_at

    def should_run(self, now: datetime) -> bool:
        """Check whether the job fires at ``now`` (records the fire if so)."""
        if not self.enabled:
            return False
        return self._evaluator.evaluate(now)

    def reschedule(self, cron_expression: str, logger: ContextLogger | None = None) -> None:
        """
        Replace the schedule, keeping the last fire time.

        Raises:
            MalformedScheduleError: If the new expression is malformed (old schedule stays)
        """
        schedule = _parse_for(self.name, cron_expression, logger)
        self._evaluator = TriggerEvaluator(schedule, last_fired_at=self._evaluator.last_fired_at)

    def next_run_time(self, after: datetime) -> datetime | None:
        """Next minute the schedule matches after ``after``, ignoring de-duplication."""
        if not self.enabled:
            return None
        return self.schedule.next_match(after)

    def __repr__(self) -> str:
        return (
            f"RoutineJob(name={self.name!r}, cron_expression={self.cron_expression!r}, "
            f"enabled={self.enabled})"
        )


def _parse_for(name: str, cron_expression: str, logger: ContextLogger | None) -> Schedule:
    try:
        return Schedule.parse(cron_expression, logger=logger)
    except MalformedScheduleError as e:
        raise MalformedScheduleError(e.expression, e.field_count, job_name=name) from None
