"""
Cadence - Cron-style routine job scheduler driven by polling

Usage:
    from cadence import RoutineScheduler, SchedulerSettings

    settings = SchedulerSettings(environment="production", polling_interval_seconds=30)
    scheduler = RoutineScheduler(settings)

    # 09:00 every Monday (day-of-week: 0 = Sunday ... 6 = Saturday)
    scheduler.register_job("weekly-report", "0 9 * * 1", send_weekly_report)

    # Every 15 minutes during office hours
    scheduler.register_job("sync-inbox", "0,15,30,45 9-17 * * *", sync_inbox)

    scheduler.start()

    # Or drive polls yourself
    fired = scheduler.poll()

Each due minute fires a job at most once: after a fire, further polls within
60 seconds are ignored even if the schedule still matches.
"""

from cadence.config import SchedulerSettings
from cadence.core import (
    DEDUP_WINDOW,
    JobAlreadyExistsError,
    JobNotFoundError,
    JobRunner,
    MalformedScheduleError,
    RoutineJob,
    RoutineJobDefinition,
    RoutineScheduler,
    Schedule,
    SchedulerError,
    TriggerEvaluator,
)

__all__ = [
    # Core
    "RoutineScheduler",
    "RoutineJob",
    "RoutineJobDefinition",
    "JobRunner",
    "Schedule",
    "TriggerEvaluator",
    "DEDUP_WINDOW",
    # Configuration
    "SchedulerSettings",
    # Exceptions
    "SchedulerError",
    "MalformedScheduleError",
    "JobAlreadyExistsError",
    "JobNotFoundError",
]
