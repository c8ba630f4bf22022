"""Custom exceptions for Cadence."""


class SchedulerError(Exception):
    """Base exception for scheduler errors."""

    pass


class SchedulerConfigurationError(SchedulerError):
    """Invalid job or scheduler configuration."""

    pass


class MalformedScheduleError(SchedulerConfigurationError, ValueError):
    """Cron expression does not split into exactly five fields."""

    def __init__(self, expression: str, field_count: int, job_name: str | None = None) -> None:
        self.expression = expression
        self.field_count = field_count
        self.job_name = job_name
        target = f" for job '{job_name}'" if job_name else ""
        super().__init__(
            f"Malformed schedule{target}: '{expression}' has {field_count} field(s), "
            "expected 5 (minute hour day-of-month month day-of-week)"
        )


class SchedulerLookupError(SchedulerError):
    """Job lookup failed."""

    pass


class JobAlreadyExistsError(SchedulerLookupError):
    """Job already exists."""

    pass


class JobNotFoundError(SchedulerLookupError):
    """Job not found."""

    pass


class SchedulerStateError(SchedulerError):
    """Operation not allowed in the scheduler's current state."""

    pass
