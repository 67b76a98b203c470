"""Derive annotated world record progressions."""

from collections.abc import Iterable
from datetime import date

from trackrecords import get_logger
from trackrecords.models.progression import (
    AnnotatedRecord,
    Direction,
    DurationBreakdown,
    Progression,
)
from trackrecords.models.record import Event, Gender, Record

logger = get_logger(__name__)


def _check_single_group(records: list[Record]) -> None:
    groups = {(record.event, record.gender) for record in records}
    if len(groups) > 1:
        labels = sorted(f"{event.value} {gender.value}" for event, gender in groups)
        raise ValueError(f"Progression needs a single event and gender, got: {', '.join(labels)}")


def derive_progression(
    records: Iterable[Record],
    direction: Direction = Direction.DESCENDING,
    today: date | None = None,
) -> list[AnnotatedRecord]:
    """Order records by date and annotate each against the one it superseded.

    Records are sorted by date with a stable sort, so records sharing a date
    keep their input order. Annotations are always computed oldest-first;
    descending output is that same list reversed.

    Args:
        records: Records of a single event and gender
        direction: Output ordering
        today: Evaluation date for days_standing, defaults to date.today()

    Returns:
        Annotated records in the requested order

    Raises:
        ValueError: If the records span more than one event/gender pair
    """
    records = list(records)
    if not records:
        return []
    _check_single_group(records)

    ordered = sorted(records, key=lambda record: record.date)
    evaluation_date = today or date.today()
    last_index = len(ordered) - 1

    annotated: list[AnnotatedRecord] = []
    previous: Record | None = None
    for index, record in enumerate(ordered):
        fields: dict = {"record": record}

        if previous is not None:
            improvement = round(previous.mark_seconds - record.mark_seconds, 2)
            interval_days = (record.date - previous.date).days
            fields.update(
                improvement_seconds=improvement,
                is_anomaly=improvement <= 0,
                interval_days=interval_days,
                interval=DurationBreakdown.from_days(interval_days),
            )
            if improvement <= 0:
                logger.warning(
                    "progression_anomaly",
                    track_event=record.event.value,
                    gender=record.gender.value,
                    athlete=record.athlete,
                    mark=record.mark,
                    previous_mark=previous.mark,
                    improvement=improvement,
                )

        if index == last_index:
            standing = (evaluation_date - record.date).days
            if standing < 0:
                logger.warning(
                    "record_dated_after_evaluation",
                    athlete=record.athlete,
                    date=record.date.isoformat(),
                    evaluation_date=evaluation_date.isoformat(),
                )
                standing = 0
            fields["days_standing"] = standing

        annotated.append(AnnotatedRecord(**fields))
        previous = record

    if direction == Direction.DESCENDING:
        annotated.reverse()
    return annotated


def build_progression(
    records: Iterable[Record],
    event: Event,
    gender: Gender,
    direction: Direction = Direction.DESCENDING,
    today: date | None = None,
) -> Progression:
    """Derive a progression and wrap it with its event and gender."""
    records = list(records)
    mismatched = [r for r in records if r.event != event or r.gender != gender]
    if mismatched:
        raise ValueError(
            f"{len(mismatched)} record(s) do not belong to {event.value} {gender.value}"
        )

    entries = derive_progression(records, direction=direction, today=today)
    logger.debug(
        "progression_derived",
        track_event=event.value,
        gender=gender.value,
        direction=direction.value,
        count=len(entries),
    )
    return Progression(event=event, gender=gender, direction=direction, records=entries)
