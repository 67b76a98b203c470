"""Shared fixtures for trackrecords tests."""

from datetime import date
from pathlib import Path

import pytest

from trackrecords.models import Event, Gender, Record
from trackrecords.services.formatters import mark_to_seconds

HEADER = "Distance,Record Type,Record Time,Athlete,Nationality,Location,Date,Event,Gender"

SAMPLE_ROWS = [
    "100m,World Record,9.72,Usain Bolt,Jamaica,New York,2008-05-31,Reebok Grand Prix,Men",
    "100m,World Record,9.58,Usain Bolt,Jamaica,Berlin,2009-08-16,World Championships,Men",
    "100m,World Record,9.69,Usain Bolt,Jamaica,Beijing,2008-08-16,Olympic Games,Men",
    "100m,World Record,10.49,Florence Griffith-Joyner,United States,Indianapolis,1988-07-16,,Women",
    "5k,World Record,12:37.35,Kenenisa Bekele,Ethiopia,Hengelo,2004-05-31,FBK Games,Men",
    "5k,World Record,12:35.36,Joshua Cheptegei,Uganda,Monaco,2020-08-14,Herculis,Men",
    "Marathon,World Record,2:01:39,Eliud Kipchoge,Kenya,Berlin,2018-09-16,Berlin Marathon,Men",
    "Marathon,World Record,2:01:09,Eliud Kipchoge,Kenya,Berlin,2022-09-25,Berlin Marathon,Men",
    "Marathon,World Record,2:00:35,Kelvin Kiptum,Kenya,Chicago,2023-10-08,Chicago Marathon,Men",
]

MALFORMED_ROWS = [
    "100m,World Record,9.80,Nobody,Nowhere,Somewhere,2010-01-01,,X",
    "200m,World Record,fast,Somebody,Nowhere,Somewhere,2010-01-01,,Men",
    "3000m,World Record,7:20.67,Daniel Komen,Kenya,Rieti,1996-09-01,,Men",
    "400m,World Record,43.03,Wayde van Niekerk,South Africa,Rio,not a date,,Men",
]


def write_csv(path: Path, rows: list[str], header: str = HEADER, delimiter: str = ",") -> Path:
    lines = [header, *rows]
    if delimiter != ",":
        lines = [line.replace(",", delimiter) for line in lines]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def records_csv(tmp_path: Path) -> Path:
    """A well-formed record file."""
    return write_csv(tmp_path / "records.csv", SAMPLE_ROWS)


@pytest.fixture
def messy_csv(tmp_path: Path) -> Path:
    """A record file with blank lines and malformed rows mixed in."""
    rows = [SAMPLE_ROWS[0], "", MALFORMED_ROWS[0], SAMPLE_ROWS[1], ",,,,,,,,", *MALFORMED_ROWS[1:]]
    return write_csv(tmp_path / "messy.csv", rows)


@pytest.fixture
def make_record():
    """Factory for Record models with sensible defaults."""

    def _make(
        mark: str,
        on: date,
        event: Event = Event.M100,
        gender: Gender = Gender.MEN,
        athlete: str = "Test Athlete",
        **kwargs,
    ) -> Record:
        return Record(
            event=event,
            gender=gender,
            athlete=athlete,
            mark=mark,
            mark_seconds=mark_to_seconds(mark),
            date=on,
            **kwargs,
        )

    return _make


@pytest.fixture
def csv_writer(tmp_path: Path):
    """Write a record file under tmp_path: csv_writer(name, rows, header=..., delimiter=...)."""

    def _write(name: str, rows: list[str], **kwargs) -> Path:
        return write_csv(tmp_path / name, rows, **kwargs)

    return _write
