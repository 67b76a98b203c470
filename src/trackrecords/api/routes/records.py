"""World record API endpoints.

Read-only. Every request re-reads the record source.
"""

from datetime import date

from fastapi import APIRouter, HTTPException, Query, Response, status
from pydantic import BaseModel

from trackrecords import get_logger
from trackrecords.api.dependencies import RecordDAODep, SettingsDep
from trackrecords.dao.record_dao import (
    RecordDAO,
    by_event,
    by_event_and_gender,
    distinct_events,
    sorted_events,
)
from trackrecords.errors import UnknownDistanceClass
from trackrecords.models import (
    AnnotatedRecord,
    Direction,
    Event,
    Gender,
    LoadResult,
    PaceUnit,
    Record,
)
from trackrecords.services.formatters import days_to_human_duration, seconds_to_pace
from trackrecords.services.presentation import athlete_url, country_code
from trackrecords.services.progression import build_progression
from trackrecords.services.record_parser import normalize_event

logger = get_logger(__name__)

router = APIRouter(prefix="/records", tags=["records"])

SKIPPED_ROWS_HEADER = "X-Skipped-Rows"


class ProgressionEntry(BaseModel):
    """One record of a progression with display values."""

    id: str | None
    date: date
    mark: str
    mark_seconds: float
    pace: str
    athlete: str
    athlete_url: str
    nationality: str
    country_code: str | None
    location: str
    record_type: str
    notes: str | None

    improvement_seconds: float | None
    improvement: str | None  # "N/A" for anomalies, None for the first record
    is_anomaly: bool
    interval_days: int | None
    interval: str | None

    days_standing: int | None
    standing: str | None


class ProgressionResponse(BaseModel):
    """Annotated progression for one event and gender."""

    event: Event
    gender: Gender
    direction: Direction
    pace_unit: PaceUnit
    current: ProgressionEntry | None
    records: list[ProgressionEntry]
    skipped_rows: int


def _load(dao: RecordDAO, response: Response) -> LoadResult:
    """Load the source and report the skipped row count in a header.

    SourceUnavailable propagates to the app's 503 handler.
    """
    result = dao.load_all()
    response.headers[SKIPPED_ROWS_HEADER] = str(result.skipped_count)
    return result


def _resolve_event(token: str) -> Event:
    """Normalize a query token such as "5k" or "marathon", 400 when unknown."""
    try:
        return normalize_event(token)
    except UnknownDistanceClass as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e


def _to_entry(entry: AnnotatedRecord, pace_unit: PaceUnit) -> ProgressionEntry:
    record = entry.record
    return ProgressionEntry(
        id=record.id,
        date=record.date,
        mark=record.mark,
        mark_seconds=record.mark_seconds,
        pace=seconds_to_pace(record.mark_seconds, record.event, pace_unit),
        athlete=record.athlete,
        athlete_url=athlete_url(record.athlete),
        nationality=record.nationality,
        country_code=country_code(record.nationality),
        location=record.location,
        record_type=record.record_type,
        notes=record.notes,
        improvement_seconds=entry.improvement_seconds,
        improvement=entry.improvement_display,
        is_anomaly=entry.is_anomaly,
        interval_days=entry.interval_days,
        interval=entry.interval_display,
        days_standing=entry.days_standing,
        standing=days_to_human_duration(entry.days_standing)
        if entry.days_standing is not None
        else None,
    )


# =============================================================================
# READ - Events
# =============================================================================


@router.get("/events", response_model=list[Event])
def list_events(dao: RecordDAODep, response: Response) -> list[Event]:
    """List the distinct events present in the source, shortest first."""
    records = _load(dao, response).records
    return sorted_events(distinct_events(records))


# =============================================================================
# READ - Records
# =============================================================================


@router.get("", response_model=list[Record])
def list_records(
    dao: RecordDAODep,
    response: Response,
    event: str | None = Query(None, description="Event, e.g. '100m', '5k', 'Marathon'"),
    gender: Gender | None = Query(None, description="Filter by gender"),
) -> list[Record]:
    """List records, optionally for one event and gender."""
    records = _load(dao, response).records

    if event is not None:
        target = _resolve_event(event)
        records = by_event(records, target)
    if gender is not None:
        records = [record for record in records if record.gender == gender]

    return records


# =============================================================================
# READ - Progression
# =============================================================================


@router.get("/progression", response_model=ProgressionResponse)
def get_progression(
    settings: SettingsDep,
    dao: RecordDAODep,
    response: Response,
    event: str = Query(..., description="Event, e.g. '100m', '5k', 'Marathon'"),
    gender: Gender = Query(..., description="Men or Women"),
    direction: Direction = Query(Direction.DESCENDING, description="asc or desc"),
    pace_unit: PaceUnit | None = Query(None, description="min/km or min/mile"),
) -> ProgressionResponse:
    """Get the annotated record progression for one event and gender."""
    target = _resolve_event(event)
    unit = pace_unit or settings.default_pace_unit

    result = _load(dao, response)
    selected = by_event_and_gender(result.records, target, gender)
    if not selected:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No records for {target.value} {gender.value}",
        )

    progression = build_progression(selected, target, gender, direction=direction)
    current = progression.current

    logger.info(
        "progression_served",
        track_event=target.value,
        gender=gender.value,
        count=len(progression.records),
        anomalies=len(progression.anomalies),
    )

    return ProgressionResponse(
        event=target,
        gender=gender,
        direction=direction,
        pace_unit=unit,
        current=_to_entry(current, unit) if current else None,
        records=[_to_entry(entry, unit) for entry in progression.records],
        skipped_rows=result.skipped_count,
    )
