"""Data Access Object for world records stored in a delimited file."""

import csv
from collections.abc import Iterable
from pathlib import Path

from trackrecords import get_logger
from trackrecords.config import get_settings
from trackrecords.errors import RecordParseError, SourceUnavailable
from trackrecords.models.record import EVENT_ORDER, Event, Gender, LoadResult, Record
from trackrecords.services.record_parser import normalize_event, parse_row

logger = get_logger(__name__)


def distinct_events(records: Iterable[Record]) -> set[Event]:
    """Events present in a record collection."""
    return {record.event for record in records}


def sorted_events(events: Iterable[Event]) -> list[Event]:
    """Order events shortest race first for display."""
    return sorted(set(events), key=EVENT_ORDER.index)


def by_event(records: Iterable[Record], event: Event | str) -> list[Record]:
    """Records whose event matches exactly.

    A raw token such as "5k" is normalized first.

    Raises:
        UnknownDistanceClass: If the token does not name a tracked event
    """
    target = event if isinstance(event, Event) else normalize_event(event)
    return [record for record in records if record.event == target]


def by_event_and_gender(
    records: Iterable[Record], event: Event | str, gender: Gender
) -> list[Record]:
    """Records for one (event, gender) pair, ready for progression."""
    return [record for record in by_event(records, event) if record.gender == gender]


class RecordDAO:
    """Reads the record source.

    Nothing is cached: every load re-reads and re-parses the file.
    """

    def __init__(self, source: Path | str | None = None, delimiter: str | None = None):
        """Initialize the DAO.

        Args:
            source: Path to the delimited file. Defaults to settings.data_file.
            delimiter: Field delimiter. Defaults to settings.csv_delimiter.
        """
        settings = get_settings()
        self.source = Path(source) if source is not None else settings.data_file
        self.delimiter = delimiter or settings.csv_delimiter

    def read_rows(self) -> list[tuple[int, list[str]]]:
        """Read every row of the source with its line number.

        Raises:
            SourceUnavailable: If the source cannot be read
        """
        try:
            with open(self.source, newline="", encoding="utf-8-sig") as f:
                reader = csv.reader(f, delimiter=self.delimiter)
                return [(reader.line_num, row) for row in reader]
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            logger.error("source_unavailable", source=str(self.source), error=str(e))
            raise SourceUnavailable(self.source, str(e)) from e

    def data_rows(self) -> list[tuple[int, list[str]]]:
        """Rows below the header, blank rows removed.

        The header is the first non-blank row, so leading blank lines are
        not mistaken for it.
        """
        rows = [(number, row) for number, row in self.read_rows() if any(v.strip() for v in row)]
        return rows[1:]

    def load_all(self) -> LoadResult:
        """Parse every data row of the source.

        The header row and blank rows are discarded. Rows that fail to parse
        are skipped and reported in the result rather than aborting the load.

        Returns:
            LoadResult with the parsed records and skipped rows
        """
        result = LoadResult()

        for row_number, row in self.data_rows():
            try:
                result.records.append(parse_row(row, row_number=row_number))
            except RecordParseError as e:
                logger.warning(
                    "row_skipped",
                    source=str(self.source),
                    row_number=row_number,
                    field=e.field,
                    value=e.value,
                    kind=e.kind,
                )
                result.add_skipped(row_number, e.field, e.value, str(e), e.kind)

        logger.info(
            "records_loaded",
            source=str(self.source),
            count=len(result.records),
            skipped=result.skipped_count,
        )
        return result

    def list_events(self) -> list[Event]:
        """Distinct events in the source, in display order."""
        return sorted_events(distinct_events(self.load_all().records))

    def find_by_event(self, event: Event | str, gender: Gender | None = None) -> list[Record]:
        """Records for an event, optionally narrowed to one gender."""
        records = self.load_all().records
        if gender is None:
            return by_event(records, event)
        return by_event_and_gender(records, event, gender)
