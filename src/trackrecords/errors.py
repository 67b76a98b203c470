"""Exceptions raised while loading and interpreting world record data.

Row-level problems (``RecordParseError`` and its subclasses) are also
``ValueError`` instances, so callers that only care about "bad input" can
catch the builtin.
"""

from pathlib import Path


class TrackRecordsError(Exception):
    """Base class for all trackrecords errors."""


class SourceUnavailable(TrackRecordsError):
    """The record source could not be read. Fatal for the whole query."""

    def __init__(self, source: Path | str, reason: str):
        self.source = str(source)
        self.reason = reason
        super().__init__(f"Record source '{self.source}' is unavailable: {reason}")


class RecordParseError(TrackRecordsError, ValueError):
    """A single field of a record row could not be interpreted."""

    kind = "parse_error"

    def __init__(self, field: str, value: object, message: str | None = None):
        self.field = field
        self.value = value
        super().__init__(message or f"Invalid {field}: {value!r}")


class InvalidGender(RecordParseError):
    kind = "invalid_gender"

    def __init__(self, value: object):
        super().__init__("gender", value, f"Invalid gender value: {value!r}. Expected 'Men' or 'Women'")


class UnparseableMark(RecordParseError):
    kind = "unparseable_mark"

    def __init__(self, value: object):
        super().__init__(
            "mark",
            value,
            f"Unparseable mark: {value!r}. Expected 'SS.cc', 'MM:SS.cc' or 'HH:MM:SS'",
        )


class UnknownDistanceClass(RecordParseError):
    kind = "unknown_distance_class"

    def __init__(self, value: object, field: str = "distance"):
        super().__init__(field, value, f"Unknown distance class: {value!r}")


class InvalidDate(RecordParseError):
    kind = "invalid_date"

    def __init__(self, value: object):
        super().__init__("date", value, f"Invalid date: {value!r}")
