"""Data Access Objects for the record source."""

from trackrecords.dao.record_dao import (
    RecordDAO,
    by_event,
    by_event_and_gender,
    distinct_events,
    sorted_events,
)

__all__ = [
    "RecordDAO",
    "by_event",
    "by_event_and_gender",
    "distinct_events",
    "sorted_events",
]
