"""Pydantic models for world record progressions."""

from trackrecords.models.progression import (
    DAYS_PER_MONTH,
    DAYS_PER_YEAR,
    AnnotatedRecord,
    Direction,
    DurationBreakdown,
    Progression,
)
from trackrecords.models.record import (
    EVENT_ORDER,
    Event,
    Gender,
    LoadResult,
    PaceUnit,
    Record,
    RowIssue,
)

__all__ = [
    # Record
    "EVENT_ORDER",
    "Event",
    "Gender",
    "LoadResult",
    "PaceUnit",
    "Record",
    "RowIssue",
    # Progression
    "AnnotatedRecord",
    "DAYS_PER_MONTH",
    "DAYS_PER_YEAR",
    "Direction",
    "DurationBreakdown",
    "Progression",
]
