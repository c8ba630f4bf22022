"""Utility modules for Cadence."""

from cadence.utils.logging import ContextLogger, get_logger, setup_logger
from cadence.utils.time import Clock, get_timezone, local_now, make_clock

__all__ = [
    "setup_logger",
    "get_logger",
    "ContextLogger",
    "Clock",
    "get_timezone",
    "local_now",
    "make_clock",
]
