"""Service layer for parsing records and deriving progressions."""

from trackrecords.services.formatters import (
    days_to_human_duration,
    decompose_days,
    distance_to_meters,
    format_improvement,
    format_interval_compact,
    mark_to_seconds,
    seconds_to_pace,
)
from trackrecords.services.presentation import (
    DEFAULT_COUNTRY_CODES,
    athlete_url,
    country_code,
    flag_emoji,
)
from trackrecords.services.progression import build_progression, derive_progression
from trackrecords.services.record_parser import (
    FIELD_ORDER,
    normalize_event,
    parse_record_date,
    parse_row,
)

__all__ = [
    "athlete_url",
    "build_progression",
    "country_code",
    "days_to_human_duration",
    "decompose_days",
    "DEFAULT_COUNTRY_CODES",
    "derive_progression",
    "distance_to_meters",
    "FIELD_ORDER",
    "flag_emoji",
    "format_improvement",
    "format_interval_compact",
    "mark_to_seconds",
    "normalize_event",
    "parse_record_date",
    "parse_row",
    "seconds_to_pace",
]
