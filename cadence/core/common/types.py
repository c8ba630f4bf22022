"""Common type definitions for Cadence."""

from enum import Enum


class PatternKind(Enum):
    """Form a single cron field was classified as."""

    ANY = "any"  # "*"
    LIST = "list"  # "1,15,30"
    RANGE = "range"  # "9-17"
    EXACT = "exact"  # "5"
