"""Cron schedule parsing and fire-now evaluation."""

from cadence.core.triggers.evaluator import DEDUP_WINDOW, TriggerEvaluator
from cadence.core.triggers.patterns import (
    AnyPattern,
    ExactPattern,
    ListPattern,
    Pattern,
    RangePattern,
    classify_field,
    matches,
)
from cadence.core.triggers.schedule import FIELD_NAMES, Schedule, day_of_week

__all__ = [
    "Pattern",
    "AnyPattern",
    "ListPattern",
    "RangePattern",
    "ExactPattern",
    "classify_field",
    "matches",
    "FIELD_NAMES",
    "Schedule",
    "day_of_week",
    "DEDUP_WINDOW",
    "TriggerEvaluator",
]
