"""Parse raw source rows into Record models."""

import re
from collections.abc import Sequence
from datetime import date, datetime

from trackrecords.errors import InvalidDate, InvalidGender, UnknownDistanceClass
from trackrecords.models.record import Event, Gender, Record
from trackrecords.services.formatters import mark_to_seconds

# Positional column order of a source row
FIELD_ORDER: tuple[str, ...] = (
    "distance",
    "record_type",
    "mark",
    "athlete",
    "nationality",
    "location",
    "date",
    "notes",
    "gender",
)

# Named distance aliases for flexible parsing
EVENT_ALIASES: dict[str, Event] = {
    "mile": Event.MILE,
    "half marathon": Event.HALF_MARATHON,
    "half": Event.HALF_MARATHON,
    "marathon": Event.MARATHON,
}

KILOMETER_TOKEN = re.compile(r"^(\d+)\s*k$", re.IGNORECASE)
METER_TOKEN = re.compile(r"^(\d+)\s*m$", re.IGNORECASE)

DATE_FORMATS = (
    "%Y-%m-%d",  # 2009-08-16
    "%B %d, %Y",  # August 16, 2009
    "%b %d, %Y",  # Aug 16, 2009
    "%d %B %Y",  # 16 August 2009
    "%d %b %Y",  # 16 Aug 2009
    "%m/%d/%Y",  # 08/16/2009
)


def normalize_event(token: str) -> Event:
    """Canonicalize a distance token to an Event.

    Examples:
        "5k" -> Event.M5000
        "100m" -> Event.M100
        "Half Marathon" -> Event.HALF_MARATHON

    Raises:
        UnknownDistanceClass: If the token does not name a tracked event
    """
    cleaned = (token or "").strip()

    alias = EVENT_ALIASES.get(cleaned.lower())
    if alias is not None:
        return alias

    match = KILOMETER_TOKEN.match(cleaned)
    if match:
        cleaned = f"{match.group(1)}000m"
    else:
        match = METER_TOKEN.match(cleaned)
        if match:
            cleaned = f"{match.group(1)}m"

    try:
        return Event(cleaned)
    except ValueError:
        raise UnknownDistanceClass(token) from None


def parse_gender(value: str) -> Gender:
    """Validate a gender column. Only 'Men' and 'Women' are accepted."""
    try:
        return Gender(value)
    except ValueError:
        raise InvalidGender(value) from None


def parse_record_date(value: str) -> date:
    """Parse a record date in ISO or common written form.

    Raises:
        InvalidDate: If no known format matches
    """
    text = (value or "").strip()
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    raise InvalidDate(value)


def _record_id(event: Event, gender: Gender, row_number: int) -> str:
    return f"{event.value.lower().replace(' ', '-')}-{gender.value.lower()}-{row_number}"


def parse_row(row: Sequence[str], row_number: int | None = None) -> Record:
    """Convert one positional source row into a Record.

    Fields are expected in FIELD_ORDER. Missing trailing fields count as
    empty, extra fields are ignored.

    Args:
        row: Raw field values
        row_number: Source line number, used to assign a stable id

    Returns:
        Parsed Record

    Raises:
        RecordParseError: The first invalid field found, as InvalidGender,
            UnparseableMark, UnknownDistanceClass or InvalidDate
    """
    padded = [value.strip() for value in row[: len(FIELD_ORDER)]]
    padded += [""] * (len(FIELD_ORDER) - len(padded))
    values = dict(zip(FIELD_ORDER, padded))

    gender = parse_gender(values["gender"])
    event = normalize_event(values["distance"])
    mark_seconds = mark_to_seconds(values["mark"])
    record_date = parse_record_date(values["date"])

    return Record(
        id=_record_id(event, gender, row_number) if row_number is not None else None,
        event=event,
        gender=gender,
        record_type=values["record_type"],
        athlete=values["athlete"],
        nationality=values["nationality"],
        mark=values["mark"],
        mark_seconds=mark_seconds,
        date=record_date,
        location=values["location"],
        notes=values["notes"] or None,
    )
