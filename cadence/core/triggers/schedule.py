"""Five-field cron schedule."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from cadence.core.common.exceptions import MalformedScheduleError
from cadence.core.triggers.patterns import Pattern, classify_field
from cadence.utils.logging import ContextLogger, get_logger

FIELD_NAMES = ("minute", "hour", "day_of_month", "month", "day_of_week")

# Inclusive value domains, used to spot fields that can never match
FIELD_BOUNDS = {
    "minute": (0, 59),
    "hour": (0, 23),
    "day_of_month": (1, 31),
    "month": (1, 12),
    "day_of_week": (0, 6),
}

DEFAULT_HORIZON = timedelta(days=366)


def day_of_week(dt: datetime) -> int:
    """
    Day-of-week number used by schedules.

    0 = Sunday, 1 = Monday, ..., 6 = Saturday. 7 is not accepted as Sunday.
    """
    return dt.isoweekday() % 7


@dataclass(frozen=True)
class Schedule:
    """
    Parsed cron-style schedule: minute hour day-of-month month day-of-week.

    Each field is matched independently against the corresponding calendar
    component of a datetime; all five must match. Months are 1-12 and days of
    the week are 0-6 starting on Sunday.
    """

    expression: str
    minute: Pattern
    hour: Pattern
    day_of_month: Pattern
    month: Pattern
    day_of_week: Pattern

    @classmethod
    def parse(cls, expression: str, logger: ContextLogger | None = None) -> Schedule:
        """
        Parse a five-field cron expression.

        Args:
            expression: e.g. "0 9 * * 1" (09:00 every Monday)
            logger: Logger for warnings about fields that can never match

        Returns:
            Parsed schedule

        Raises:
            MalformedScheduleError: If the expression does not have exactly five fields
        """
        tokens = expression.split()
        if len(tokens) != len(FIELD_NAMES):
            raise MalformedScheduleError(expression, len(tokens))

        schedule = cls(expression, *(classify_field(token) for token in tokens))

        dead_fields = schedule.unmatchable_fields()
        if dead_fields:
            log = logger or get_logger()
            for name in dead_fields:
                log.warning(
                    "Schedule field can never match; job will not fire",
                    expression=expression,
                    field=name,
                    value=getattr(schedule, name).source,
                )
        return schedule

    @property
    def patterns(self) -> tuple[Pattern, ...]:
        return tuple(getattr(self, name) for name in FIELD_NAMES)

    def unmatchable_fields(self) -> list[str]:
        """Names of fields that no value in their calendar domain satisfies."""
        dead = []
        for name in FIELD_NAMES:
            pattern = getattr(self, name)
            low, high = FIELD_BOUNDS[name]
            if not pattern.can_match or not any(
                pattern.matches(v) for v in range(low, high + 1)
            ):
                dead.append(name)
        return dead

    def matches(self, dt: datetime) -> bool:
        return self._matches_date(dt) and self.hour.matches(dt.hour) and self.minute.matches(
            dt.minute
        )

    def _matches_date(self, dt: datetime) -> bool:
        return (
            self.day_of_month.matches(dt.day)
            and self.month.matches(dt.month)
            and self.day_of_week.matches(day_of_week(dt))
        )

    def next_match(
        self, after: datetime, horizon: timedelta = DEFAULT_HORIZON
    ) -> datetime | None:
        """
        Find the first whole minute strictly after ``after`` that matches.

        Args:
            after: Starting point (naive or timezone-aware)
            horizon: How far ahead to search

        Returns:
            Matching datetime in the same timezone as ``after``, or None
        """
        if self.unmatchable_fields():
            return None

        candidate = after.replace(second=0, microsecond=0) + timedelta(minutes=1)
        limit = after + horizon

        while candidate <= limit:
            if not self._matches_date(candidate):
                candidate = (candidate + timedelta(days=1)).replace(hour=0, minute=0)
            elif not self.hour.matches(candidate.hour):
                candidate = candidate.replace(minute=0) + timedelta(hours=1)
            elif not self.minute.matches(candidate.minute):
                candidate += timedelta(minutes=1)
            else:
                return candidate
        return None

    def __str__(self) -> str:
        return self.expression
