"""World record model and the enums it is keyed by."""

from datetime import date
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class Event(StrEnum):
    """Running events with a tracked world record progression."""

    M100 = "100m"
    M200 = "200m"
    M400 = "400m"
    M800 = "800m"
    M1500 = "1500m"
    MILE = "Mile"
    M5000 = "5000m"
    M10000 = "10000m"
    HALF_MARATHON = "Half Marathon"
    MARATHON = "Marathon"


# Display order, shortest race first
EVENT_ORDER: tuple[Event, ...] = tuple(Event)


class Gender(StrEnum):
    """Competition category."""

    MEN = "Men"
    WOMEN = "Women"


class PaceUnit(StrEnum):
    """Distance unit a pace is expressed against."""

    PER_KM = "min/km"
    PER_MILE = "min/mile"


class Record(BaseModel):
    """A single world record performance.

    Examples:
    - 100m Men: 9.58, Usain Bolt, Berlin, 2009-08-16
    - Marathon Men: 2:01:39, Eliud Kipchoge, Berlin, 2018-09-16
    """

    model_config = ConfigDict(frozen=True)

    id: str | None = None  # UI key, assigned by the parser when a row number is known

    event: Event
    gender: Gender
    record_type: str = ""  # e.g. "World Record"

    athlete: str
    nationality: str = ""

    # Raw mark as written in the source, plus its validated value
    mark: str
    mark_seconds: float = Field(ge=0)

    date: date
    location: str = ""
    notes: str | None = None

    def __str__(self) -> str:
        return f"{self.event.value} {self.gender.value}: {self.mark} {self.athlete} ({self.date.isoformat()})"


class RowIssue(BaseModel):
    """A source row that was skipped during loading."""

    row_number: int
    field: str
    value: str | None = None
    message: str
    kind: str


class LoadResult(BaseModel):
    """Records parsed from one read of the source, plus the rows that were skipped."""

    records: list[Record] = []
    skipped: list[RowIssue] = []

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)

    def add_skipped(
        self, row_number: int, field: str, value: object, message: str, kind: str
    ) -> None:
        """Record a skipped row."""
        self.skipped.append(
            RowIssue(
                row_number=row_number,
                field=field,
                value=None if value is None else str(value),
                message=message,
                kind=kind,
            )
        )
