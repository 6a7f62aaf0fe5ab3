"""Round rules: conditions, records, threshold parsing and the roll draw."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable, Union

MIN_VALUE = 1
MAX_VALUE = 100

_DIGITS = re.compile(r"\d+", re.ASCII)


class ValidationError(ValueError):
    """Raised when round input cannot start a round."""


class Condition(str, Enum):
    """How the roll is compared against the threshold."""

    MORE = "more"
    LESS = "less"

    @classmethod
    def coerce(cls, value: Union["Condition", str]) -> "Condition":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValidationError(f"Unknown condition: {value!r}") from None


@dataclass(frozen=True)
class RoundRecord:
    """Outcome of a single resolved round."""

    id: int
    threshold: int
    condition: Condition
    roll: int
    won: bool
    occurred_at: datetime


def parse_threshold(text: str) -> int:
    """Parse *text* into a threshold in [1, 100] or raise ValidationError."""
    cleaned = (text or "").strip()
    if not cleaned:
        raise ValidationError("Threshold is required")
    if not _DIGITS.fullmatch(cleaned):
        raise ValidationError(f"Threshold must be a whole number, got {cleaned!r}")
    value = int(cleaned)
    if not MIN_VALUE <= value <= MAX_VALUE:
        raise ValidationError(f"Threshold must be between {MIN_VALUE} and {MAX_VALUE}, got {value}")
    return value


def is_win(threshold: int, condition: Condition, roll: int) -> bool:
    """Return True if *roll* satisfies *condition* against *threshold*. Ties lose."""
    if condition is Condition.MORE:
        return roll > threshold
    return roll < threshold


def draw_roll(random_source: Callable[[], float]) -> int:
    """Map a uniform draw in [0, 1) onto 1..100, capping a stray 1.0 at 100."""
    roll = int(random_source() * MAX_VALUE) + MIN_VALUE
    return max(MIN_VALUE, min(MAX_VALUE, roll))
