"""Derived progression models. Computed on demand, never persisted."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from trackrecords.models.record import Event, Gender, Record

DAYS_PER_YEAR = 365
DAYS_PER_MONTH = 30


class Direction(StrEnum):
    """Output ordering of a progression."""

    ASCENDING = "asc"  # oldest first, for charting
    DESCENDING = "desc"  # latest first, for list display


class DurationBreakdown(BaseModel):
    """A day count split into years, months and days.

    Uses fixed 365-day years and 30-day months. This is an approximation of
    calendar time and drifts from true calendar months over long spans.
    """

    model_config = ConfigDict(frozen=True)

    years: int
    months: int
    days: int

    @classmethod
    def from_days(cls, total_days: int) -> "DurationBreakdown":
        if total_days < 0:
            raise ValueError(f"Duration cannot be negative: {total_days} days")
        years, remainder = divmod(total_days, DAYS_PER_YEAR)
        months, days = divmod(remainder, DAYS_PER_MONTH)
        return cls(years=years, months=months, days=days)

    @property
    def total_days(self) -> int:
        return self.years * DAYS_PER_YEAR + self.months * DAYS_PER_MONTH + self.days

    @property
    def compact(self) -> str:
        """Short label: "3y 2mon 5d", "2mon 5d" or "12 days"."""
        if self.years:
            return f"{self.years}y {self.months}mon {self.days}d"
        if self.months:
            return f"{self.months}mon {self.days}d"
        return f"{self.days} days"


class AnnotatedRecord(BaseModel):
    """A record annotated relative to the record it superseded.

    The oldest record in a progression has no predecessor, so its
    improvement and interval are None. Only the most recent record carries
    days_standing.
    """

    model_config = ConfigDict(frozen=True)

    record: Record

    # Predecessor mark minus this mark, in seconds (positive = faster)
    improvement_seconds: float | None = None
    is_anomaly: bool = False

    # Days since the superseded record was set
    interval_days: int | None = None
    interval: DurationBreakdown | None = None

    # Days between the evaluation date and this record, current record only
    days_standing: int | None = None

    @property
    def is_current(self) -> bool:
        return self.days_standing is not None

    @property
    def improvement_display(self) -> str | None:
        """Improvement label, "N/A" for anomalies and None for the oldest record."""
        if self.improvement_seconds is None:
            return None
        # formatters imports this module
        from trackrecords.services.formatters import format_improvement

        return format_improvement(self.improvement_seconds)

    @property
    def interval_display(self) -> str | None:
        return self.interval.compact if self.interval is not None else None


class Progression(BaseModel):
    """The ordered record history of one (event, gender) pair."""

    event: Event
    gender: Gender
    direction: Direction = Direction.DESCENDING
    records: list[AnnotatedRecord] = []

    @property
    def current(self) -> AnnotatedRecord | None:
        """The standing record, regardless of direction."""
        for entry in self.records:
            if entry.is_current:
                return entry
        return None

    @property
    def anomalies(self) -> list[AnnotatedRecord]:
        return [entry for entry in self.records if entry.is_anomaly]
