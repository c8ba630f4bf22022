"""Common test fixtures and utilities."""

from datetime import datetime, timedelta
from unittest.mock import Mock
from zoneinfo import ZoneInfo

import pytest

from cadence import RoutineScheduler, SchedulerSettings

UTC = ZoneInfo("UTC")


def dt(year, month, day, hour=0, minute=0, second=0, tz=UTC):
    return datetime(year, month, day, hour, minute, second, tzinfo=tz)


class FakeClock:
    """
    Controllable "now" for schedulers and evaluators.

    Example:
        clock = FakeClock(dt(2025, 6, 16, 9, 0))
        clock.advance(seconds=30)
    """

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **delta: float) -> datetime:
        self.now += timedelta(**delta)
        return self.now

    def set(self, now: datetime) -> None:
        self.now = now


@pytest.fixture
def clock():
    """Clock pinned to Monday 2025-06-16 09:00:00 UTC."""
    return FakeClock(dt(2025, 6, 16, 9, 0))


@pytest.fixture
def mock_logger():
    """Create a mock logger."""
    logger = Mock()
    logger.info = Mock()
    logger.warning = Mock()
    logger.error = Mock()
    logger.debug = Mock()
    logger.with_context = Mock(return_value=logger)
    return logger


@pytest.fixture
def mock_runner():
    """Create a mock due-job handler."""
    runner = Mock(spec=["on_due"])
    runner.on_due = Mock(return_value=None)
    return runner


@pytest.fixture
def production_settings():
    return SchedulerSettings(environment="production", polling_interval_seconds=0.05)


@pytest.fixture
def scheduler(production_settings, mock_runner, clock, mock_logger):
    """
    Scheduler wired to a fake clock and a mock handler.

    Not started - tests call poll() directly.
    """
    scheduler = RoutineScheduler(
        settings=production_settings,
        runner=mock_runner,
        clock=clock,
        logger=mock_logger,
    )
    yield scheduler
    if scheduler.is_running():
        scheduler.stop()
