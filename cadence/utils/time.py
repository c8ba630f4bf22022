"""Time utilities for Cadence."""

from collections.abc import Callable
from datetime import datetime, tzinfo
from zoneinfo import ZoneInfo

# A clock returns the "now" a scheduler polls with. Tests swap in a fixed one.
Clock = Callable[[], datetime]


def local_now() -> datetime:
    """
    Get current host local time (timezone-aware).

    Returns:
        Current local datetime
    """
    return datetime.now().astimezone()


def get_timezone(tz_name: str) -> tzinfo:
    """
    Get timezone object from IANA timezone name.

    Args:
        tz_name: IANA timezone name (e.g., "Asia/Seoul", "America/New_York")

    Returns:
        Timezone object

    Raises:
        ValueError: Invalid timezone name
    """
    try:
        return ZoneInfo(tz_name)
    except Exception as e:
        raise ValueError(f"Invalid timezone '{tz_name}': {e}") from e


def make_clock(tz_name: str | None = None) -> Clock:
    """
    Build a wall clock for the given timezone.

    Args:
        tz_name: IANA timezone name, or None for host local time

    Returns:
        Zero-argument callable returning the current aware datetime
    """
    if tz_name is None:
        return local_now

    tz = get_timezone(tz_name)

    def _now() -> datetime:
        return datetime.now(tz)

    return _now
