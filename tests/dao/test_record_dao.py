"""Tests for loading and querying the record source."""

import pytest

from trackrecords.dao.record_dao import (
    RecordDAO,
    by_event,
    by_event_and_gender,
    distinct_events,
    sorted_events,
)
from trackrecords.errors import SourceUnavailable, UnknownDistanceClass
from trackrecords.models import Event, Gender


class TestLoadAll:
    """Tests for reading the whole source."""

    def test_loads_every_row(self, records_csv):
        """Load all nine sample rows with nothing skipped."""
        result = RecordDAO(records_csv).load_all()
        assert len(result.records) == 9
        assert result.skipped_count == 0

    def test_header_is_not_a_record(self, records_csv):
        """The header row is not parsed as a record."""
        result = RecordDAO(records_csv).load_all()
        assert all(record.athlete != "Athlete" for record in result.records)

    def test_ids_use_line_numbers(self, records_csv):
        """The first data row is line 2."""
        result = RecordDAO(records_csv).load_all()
        assert result.records[0].id == "100m-men-2"

    def test_skips_blank_and_malformed_rows(self, messy_csv):
        """Blank rows vanish, malformed rows are skipped with their line."""
        result = RecordDAO(messy_csv).load_all()
        assert [record.mark for record in result.records] == ["9.72", "9.58"]
        assert result.skipped_count == 4
        assert [issue.row_number for issue in result.skipped] == [4, 7, 8, 9]
        assert [issue.kind for issue in result.skipped] == [
            "invalid_gender",
            "unparseable_mark",
            "unknown_distance_class",
            "invalid_date",
        ]

    def test_skipped_rows_carry_field_and_value(self, messy_csv):
        """Skipped rows report the failing field and value."""
        issue = RecordDAO(messy_csv).load_all().skipped[0]
        assert issue.field == "gender"
        assert issue.value == "X"
        assert "Invalid gender" in issue.message

    def test_custom_delimiter(self, csv_writer):
        """Load a semicolon-delimited file."""
        path = csv_writer(
            "semicolon.csv",
            ["Mile,World Record,3:43.13,Hicham El Guerrouj,Morocco,Rome,1999-07-07,,Men"],
            delimiter=";",
        )
        result = RecordDAO(path, delimiter=";").load_all()
        assert len(result.records) == 1
        assert result.records[0].event == Event.MILE

    def test_quoted_fields(self, csv_writer):
        """Quoted fields may contain the delimiter."""
        path = csv_writer(
            "quoted.csv",
            ['Marathon,World Record,2:01:39,Eliud Kipchoge,Kenya,"Berlin, Germany",2018-09-16,,Men'],
        )
        (record,) = RecordDAO(path).load_all().records
        assert record.location == "Berlin, Germany"

    def test_header_only(self, csv_writer):
        """A header with no rows loads nothing."""
        result = RecordDAO(csv_writer("empty.csv", [])).load_all()
        assert result.records == []
        assert result.skipped == []

    def test_leading_blank_lines_before_header(self, csv_writer):
        """The first non-blank row is the header, even after blank lines."""
        header = "Distance,Record Type,Record Time,Athlete,Nationality,Location,Date,Event,Gender"
        row = "100m,World Record,9.58,Usain Bolt,Jamaica,Berlin,2009-08-16,,Men"
        path = csv_writer("padded.csv", [row], header="\n\n" + header)
        result = RecordDAO(path).load_all()
        assert result.skipped == []
        (record,) = result.records
        assert record.id == "100m-men-4"

    def test_rereads_on_every_load(self, csv_writer):
        """Each load sees the file as it is now."""
        path = csv_writer("growing.csv", [])
        dao = RecordDAO(path)
        assert dao.load_all().records == []

        csv_writer("growing.csv", ["100m,World Record,9.58,Usain Bolt,Jamaica,Berlin,2009-08-16,,Men"])
        assert len(dao.load_all().records) == 1

    def test_missing_source(self, tmp_path):
        """Error for a missing file, naming the path."""
        with pytest.raises(SourceUnavailable) as exc_info:
            RecordDAO(tmp_path / "missing.csv").load_all()
        assert "missing.csv" in str(exc_info.value)

    def test_directory_source(self, tmp_path):
        """Error for a directory."""
        with pytest.raises(SourceUnavailable):
            RecordDAO(tmp_path).load_all()

    def test_defaults_from_settings(self, monkeypatch, records_csv):
        """Source and delimiter default to settings."""
        from trackrecords.config import get_settings

        monkeypatch.setenv("DATA_FILE", str(records_csv))
        get_settings.cache_clear()
        try:
            dao = RecordDAO()
            assert dao.source == records_csv
            assert dao.delimiter == ","
        finally:
            get_settings.cache_clear()


class TestQueries:
    """Tests for filtering a loaded collection."""

    @pytest.fixture
    def records(self, records_csv):
        return RecordDAO(records_csv).load_all().records

    def test_distinct_events(self, records):
        """Each event appears once."""
        assert distinct_events(records) == {Event.M100, Event.M5000, Event.MARATHON}

    def test_sorted_events_use_display_order(self):
        """Events sort shortest race first."""
        events = {Event.MARATHON, Event.M100, Event.MILE, Event.M5000, Event.HALF_MARATHON}
        assert sorted_events(events) == [
            Event.M100,
            Event.MILE,
            Event.M5000,
            Event.HALF_MARATHON,
            Event.MARATHON,
        ]

    def test_by_event(self, records):
        """Filter 100m to its four records."""
        assert len(by_event(records, Event.M100)) == 4
        assert len(by_event(records, Event.MARATHON)) == 3

    def test_by_event_normalizes_token(self, records):
        """Token '5k' selects 5000m records."""
        assert len(by_event(records, "5k")) == 2
        assert by_event(records, "5k") == by_event(records, Event.M5000)

    def test_by_event_no_match(self, records):
        """No records for an absent event."""
        assert by_event(records, Event.M800) == []

    def test_by_event_unknown_token(self, records):
        """Error for an untracked distance token."""
        with pytest.raises(UnknownDistanceClass):
            by_event(records, "3000m")

    def test_by_event_and_gender(self, records):
        """Filter 100m Women to one record."""
        women = by_event_and_gender(records, Event.M100, Gender.WOMEN)
        assert [record.athlete for record in women] == ["Florence Griffith-Joyner"]
        assert len(by_event_and_gender(records, Event.M100, Gender.MEN)) == 3


class TestDAOQueries:
    """Tests for the query operations that load on every call."""

    def test_list_events(self, records_csv):
        """DAO lists events in display order."""
        assert RecordDAO(records_csv).list_events() == [Event.M100, Event.M5000, Event.MARATHON]

    def test_find_by_event(self, records_csv):
        """DAO finds records, optionally by gender."""
        dao = RecordDAO(records_csv)
        assert len(dao.find_by_event("100m")) == 4
        assert len(dao.find_by_event("100m", Gender.MEN)) == 3

    def test_find_by_event_missing_source(self, tmp_path):
        """Error for a missing file."""
        with pytest.raises(SourceUnavailable):
            RecordDAO(tmp_path / "missing.csv").find_by_event(Event.M100)
