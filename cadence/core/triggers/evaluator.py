"""Fire-now decision for a single job."""

from datetime import datetime, timedelta

from cadence.core.triggers.schedule import Schedule

DEDUP_WINDOW = timedelta(seconds=60)


class TriggerEvaluator:
    """
    Decides on each poll whether a job should fire.

    A job fires when its schedule matches ``now`` and it has not fired within
    the de-duplication window. Without the window, a one-minute cron field would
    fire on every poll during that minute.

    Single writer: callers must not run ``evaluate`` concurrently on the same
    instance. ``last_fired_at`` lives in memory only; a restart inside the window
    can fire the same minute twice.
    """

    def __init__(
        self,
        schedule: Schedule,
        last_fired_at: datetime | None = None,
        dedup_window: timedelta = DEDUP_WINDOW,
    ) -> None:
        self._schedule = schedule
        self._dedup_window = dedup_window
        self._last_fired_at = last_fired_at

    @property
    def schedule(self) -> Schedule:
        return self._schedule

    @property
    def last_fired_at(self) -> datetime | None:
        return self._last_fired_at

    @property
    def dedup_window(self) -> timedelta:
        return self._dedup_window

    def evaluate(self, now: datetime) -> bool:
        """
        Decide whether the job fires at ``now``.

        Args:
            now: Current wall-clock time

        Returns:
            True exactly when the job should run; ``last_fired_at`` is set to ``now``
        """
        # Also rejects a clock that went backwards, keeping last_fired_at increasing
        if self._last_fired_at is not None and self._elapsed_since_fire(now) <= self._dedup_window:
            return False

        if not self._schedule.matches(now):
            return False

        self._last_fired_at = now
        return True

    def _elapsed_since_fire(self, now: datetime) -> timedelta:
        # POSIX timestamps compare naive (host local) and aware datetimes alike
        return timedelta(seconds=now.timestamp() - self._last_fired_at.timestamp())

    def __repr__(self) -> str:
        return (
            f"TriggerEvaluator(schedule={self._schedule.expression!r}, "
            f"last_fired_at={self._last_fired_at!r})"
        )
