"""Utilities for converting marks, paces and durations."""

import re

from trackrecords.errors import UnknownDistanceClass, UnparseableMark
from trackrecords.models.progression import DurationBreakdown
from trackrecords.models.record import Event, PaceUnit

METERS_PER_KILOMETER = 1000.0
METERS_PER_MILE = 1609.34

# Named distance classes -> meters
NAMED_DISTANCES: dict[str, float] = {
    "marathon": 42195.0,
    "half marathon": 21097.5,
    "half": 21097.5,
    "mile": METERS_PER_MILE,
}

# Regex patterns for mark components
# Hours and minutes are whole numbers, the final component may carry a fraction
WHOLE_COMPONENT = re.compile(r"^\d+$")
SECONDS_COMPONENT = re.compile(r"^\d+(?:\.\d+)?$")

DISTANCE_METERS = re.compile(r"^(\d+(?:\.\d+)?)\s*m$", re.IGNORECASE)
DISTANCE_KILOMETERS = re.compile(r"^(\d+(?:\.\d+)?)\s*km?$", re.IGNORECASE)


def mark_to_seconds(mark: str) -> float:
    """Parse a mark string into total seconds.

    Supports formats:
    - "9.58" -> 9.58
    - "3:43.13" -> 223.13
    - "2:01:39" -> 7299.0

    Minutes and seconds after the leading component must be below 60.

    Args:
        mark: Mark with zero, one or two ':' separators

    Returns:
        Total seconds, rounded to hundredths

    Raises:
        UnparseableMark: If the mark has another shape, a non-numeric component
            or a minutes or seconds component of 60 or more
    """
    if mark is None:
        raise UnparseableMark(mark)

    parts = mark.strip().split(":")
    if len(parts) > 3:
        raise UnparseableMark(mark)

    *leading, seconds_part = parts
    if not SECONDS_COMPONENT.match(seconds_part):
        raise UnparseableMark(mark)
    if any(not WHOLE_COMPONENT.match(part) for part in leading):
        raise UnparseableMark(mark)
    # Only the leading component may reach 60
    if any(float(part) >= 60 for part in parts[1:]):
        raise UnparseableMark(mark)

    total = 0.0
    for part in leading:
        total = total * 60 + int(part)
    total = total * 60 + float(seconds_part)

    return round(total, 2)


def distance_to_meters(distance_class: str | Event) -> float:
    """Resolve a distance class to meters.

    Supports:
    - "Marathon", "Half Marathon", "Mile"
    - "<n>m" tokens, e.g. "800m" -> 800
    - "<n>k" tokens, e.g. "10k" -> 10000

    Raises:
        UnknownDistanceClass: If the distance class is not recognized
    """
    token = str(distance_class).strip()
    key = token.lower()

    if key in NAMED_DISTANCES:
        return NAMED_DISTANCES[key]

    match = DISTANCE_METERS.match(token)
    if match:
        meters = float(match.group(1))
    else:
        match = DISTANCE_KILOMETERS.match(token)
        if not match:
            raise UnknownDistanceClass(distance_class)
        meters = float(match.group(1)) * METERS_PER_KILOMETER

    if meters <= 0:
        raise UnknownDistanceClass(distance_class)
    return meters


def seconds_to_pace(
    seconds: float,
    distance_class: str | Event,
    unit: PaceUnit = PaceUnit.PER_KM,
) -> str:
    """Format the average pace of a performance as 'M:SS'.

    Partial seconds are truncated, e.g. a 7200s Marathon is 170.6 s/km -> "2:50".

    Args:
        seconds: Total time of the performance
        distance_class: Event or distance token the time was run over
        unit: Per-kilometer or per-mile pace

    Returns:
        Pace string with zero-padded seconds
    """
    if seconds < 0:
        raise ValueError(f"Time cannot be negative: {seconds}")

    meters = distance_to_meters(distance_class)
    unit_meters = METERS_PER_KILOMETER if unit == PaceUnit.PER_KM else METERS_PER_MILE
    pace_seconds = int(seconds * unit_meters / meters)

    minutes, secs = divmod(pace_seconds, 60)
    return f"{minutes}:{secs:02d}"


def decompose_days(days: int) -> DurationBreakdown:
    """Split a day count into 365-day years, 30-day months and days."""
    return DurationBreakdown.from_days(days)


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def days_to_human_duration(days: int) -> str:
    """Format a day count as e.g. '2 years, 3 months, 5 days'.

    Zero components are left out, except that days are always shown when
    there are no years or months, so the result is never empty.
    """
    breakdown = decompose_days(days)

    parts = []
    if breakdown.years:
        parts.append(_plural(breakdown.years, "year"))
    if breakdown.months:
        parts.append(_plural(breakdown.months, "month"))
    if breakdown.days or not (breakdown.years or breakdown.months):
        parts.append(_plural(breakdown.days, "day"))

    return ", ".join(parts)


def format_interval_compact(days: int) -> str:
    """Short interval label for timeline entries: '3y 2mon 5d', '2mon 5d' or '12 days'."""
    return decompose_days(days).compact


def format_improvement(improvement_seconds: float | None) -> str:
    """Format an improvement in seconds for display.

    Non-positive or missing improvements are not real record improvements
    and render as "N/A".

    Examples:
        0.2 -> "0.20s"
        63.0 -> "1m 3.00s"
    """
    if improvement_seconds is None or improvement_seconds <= 0:
        return "N/A"

    if improvement_seconds < 60:
        return f"{improvement_seconds:.2f}s"

    minutes = int(improvement_seconds // 60)
    seconds = improvement_seconds % 60
    return f"{minutes}m {seconds:.2f}s"
