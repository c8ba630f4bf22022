"""
Cron field patterns and the field matcher.

A raw field is classified once, at parse time, into one of four forms:

    "*"         -> AnyPattern
    "1,15,30"   -> ListPattern     (checked before ranges)
    "9-17"      -> RangePattern    (checked before exact values)
    "5"         -> ExactPattern

Classification is substring based and never fails. A token such as "1-3,5"
contains a comma, so it becomes a ListPattern split on commas; the sub-token
"1-3" is not a plain integer and is dropped, leaving {5}. Tokens that cannot be
read as integers produce patterns that never match anything.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from cadence.core.common.types import PatternKind

PLAIN_INT = re.compile(r"[0-9]+")


def _asint(text: str) -> int | None:
    if PLAIN_INT.fullmatch(text):
        return int(text)
    return None


@dataclass(frozen=True)
class AnyPattern:
    source: str = "*"
    kind = PatternKind.ANY

    @property
    def can_match(self) -> bool:
        return True

    def matches(self, value: int) -> bool:
        return True


@dataclass(frozen=True)
class ListPattern:
    values: frozenset[int]
    source: str
    kind = PatternKind.LIST

    @classmethod
    def from_text(cls, text: str) -> ListPattern:
        parsed = (_asint(token) for token in text.split(","))
        return cls(frozenset(v for v in parsed if v is not None), text)

    @property
    def can_match(self) -> bool:
        return bool(self.values)

    def matches(self, value: int) -> bool:
        return value in self.values


@dataclass(frozen=True)
class RangePattern:
    start: int | None
    end: int | None
    source: str
    kind = PatternKind.RANGE

    @classmethod
    def from_text(cls, text: str) -> RangePattern:
        parts = text.split("-")
        if len(parts) != 2:
            return cls(None, None, text)
        return cls(_asint(parts[0]), _asint(parts[1]), text)

    @property
    def can_match(self) -> bool:
        return self.start is not None and self.end is not None and self.start <= self.end

    def matches(self, value: int) -> bool:
        # Inclusive, no wraparound: a reversed range matches nothing
        if self.start is None or self.end is None:
            return False
        return self.start <= value <= self.end


@dataclass(frozen=True)
class ExactPattern:
    value: int | None
    source: str
    kind = PatternKind.EXACT

    @classmethod
    def from_text(cls, text: str) -> ExactPattern:
        return cls(_asint(text), text)

    @property
    def can_match(self) -> bool:
        return self.value is not None

    def matches(self, value: int) -> bool:
        return self.value is not None and self.value == value


Pattern = AnyPattern | ListPattern | RangePattern | ExactPattern


def classify_field(raw: str) -> Pattern:
    """
    Classify one raw cron field.

    Args:
        raw: Field text as it appears in the expression

    Returns:
        Pattern for the field (List wins over Range, Range wins over Exact)
    """
    if raw == "*":
        return AnyPattern()
    if "," in raw:
        return ListPattern.from_text(raw)
    if "-" in raw:
        return RangePattern.from_text(raw)
    return ExactPattern.from_text(raw)


def matches(value: int, pattern: Pattern) -> bool:
    """Check whether an observed calendar value satisfies a pattern."""
    return pattern.matches(value)
