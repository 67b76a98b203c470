"""Track Records CLI application.

Usage:
    track-records events
    track-records records 100m --gender Men
    track-records timeline Marathon --gender Women --pace-unit min/mile
    track-records timeline 5k --gender Men --order asc
    track-records skipped
"""

from collections.abc import Mapping
from datetime import date
from pathlib import Path

import typer
from dotenv import load_dotenv

# Load .env file for DATA_FILE, LOG_LEVEL, etc.
load_dotenv()
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from trackrecords import configure_logging
from trackrecords.config import get_settings
from trackrecords.dao.record_dao import (
    RecordDAO,
    by_event,
    by_event_and_gender,
    distinct_events,
    sorted_events,
)
from trackrecords.errors import SourceUnavailable, UnknownDistanceClass
from trackrecords.models import Direction, Event, Gender, LoadResult, PaceUnit, Progression
from trackrecords.services.formatters import (
    days_to_human_duration,
    seconds_to_pace,
)
from trackrecords.services.presentation import athlete_url, country_code, flag_emoji
from trackrecords.services.progression import build_progression
from trackrecords.services.record_parser import normalize_event

console = Console()
app = typer.Typer(
    name="track-records",
    help="Track and field world record progressions",
    no_args_is_help=True,
)

FILE_HELP = "Record file (defaults to DATA_FILE setting)"


@app.callback()
def main() -> None:
    """Track and field world record progressions."""
    configure_logging()


# =============================================================================
# HELPERS
# =============================================================================


def _load(file: Path | None) -> LoadResult:
    """Load the record file, exiting on an unreadable source."""
    dao = RecordDAO(file)
    try:
        result = dao.load_all()
    except SourceUnavailable as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1) from None

    if result.skipped_count:
        console.print(
            f"[yellow]Skipped {result.skipped_count} malformed row(s). "
            "Run: track-records skipped[/yellow]"
        )
    return result


def _resolve_event(token: str) -> Event:
    try:
        return normalize_event(token)
    except UnknownDistanceClass as e:
        valid = ", ".join(event.value for event in Event)
        console.print(f"[red]{escape(str(e))}[/red]")
        console.print(f"[dim]Valid events: {valid}[/dim]")
        raise typer.Exit(1) from None


def _long_date(value: date) -> str:
    return f"{value:%B} {value.day}, {value.year}"


def _short_date(value: date) -> str:
    return f"{value:%b} {value.day}, {value.year}"


def render_timeline(
    progression: Progression,
    pace_unit: PaceUnit,
    country_codes: Mapping[str, str] | None = None,
) -> None:
    """Print a progression as a timeline, current record first in the header."""
    current = progression.current
    if current is not None:
        record = current.record
        record_type = record.record_type or "World Record"
        console.print(
            f"[bold]{progression.event.value} {progression.gender.value} "
            f"{escape(record_type)}: {escape(record.mark)}[/bold]"
        )
        console.print(
            f"Record has stood for {days_to_human_duration(current.days_standing)} "
            f"(since {_long_date(record.date)})"
        )
        console.print()

    for entry in progression.records:
        record = entry.record
        pace = seconds_to_pace(record.mark_seconds, record.event, pace_unit)
        flag = flag_emoji(country_code(record.nationality, country_codes))

        console.print(
            f"[bold]{escape(record.mark)}[/bold] · {_short_date(record.date)}"
            f"   [dim]Pace: {pace} {pace_unit.value}[/dim]"
        )
        athlete = f"[link={athlete_url(record.athlete)}]{escape(record.athlete)}[/link]"
        nationality = f"{flag} {escape(record.nationality)}".strip()
        console.print(f"  {athlete}  {nationality}  [dim]{escape(record.location)}[/dim]")
        if record.notes:
            console.print(f"  [italic]{escape(record.notes)}[/italic]")

        if entry.improvement_seconds is not None:
            style = "red" if entry.is_anomaly else "green"
            console.print(
                f"  [{style}]↑ {entry.improvement_display}[/{style}]"
                f"  Previous record stood {entry.interval_display}"
            )
        console.print()


# =============================================================================
# COMMANDS
# =============================================================================


@app.command("events")
def list_events(
    file: Path = typer.Option(None, "--file", "-f", help=FILE_HELP),
):
    """List the events present in the record file."""
    result = _load(file)
    events = sorted_events(distinct_events(result.records))

    if not events:
        console.print("[yellow]No records found[/yellow]")
        return

    for event in events:
        count = len(by_event(result.records, event))
        console.print(f"{event.value} [dim]({count} records)[/dim]")


@app.command("records")
def list_records(
    event: str = typer.Argument(..., help="Event, e.g. 100m, 5k, Marathon"),
    gender: Gender = typer.Option(None, "--gender", "-g", help="Men or Women"),
    file: Path = typer.Option(None, "--file", "-f", help=FILE_HELP),
):
    """Show the records for an event, latest first."""
    target = _resolve_event(event)
    result = _load(file)

    if gender is None:
        records = by_event(result.records, target)
        title = target.value
    else:
        records = by_event_and_gender(result.records, target, gender)
        title = f"{target.value} - {gender.value}"

    if not records:
        console.print(f"[yellow]No records for {title}[/yellow]")
        raise typer.Exit(1)

    table = Table(title=title)
    table.add_column("Date", style="cyan")
    table.add_column("Gender")
    table.add_column("Athlete")
    table.add_column("Nationality")
    table.add_column("Mark", justify="right")
    table.add_column("Location")
    table.add_column("Notes", style="dim")

    for record in sorted(records, key=lambda r: r.date, reverse=True):
        table.add_row(
            record.date.isoformat(),
            record.gender.value,
            escape(record.athlete),
            escape(record.nationality),
            escape(record.mark),
            escape(record.location),
            escape(record.notes or "-"),
        )

    console.print(table)


@app.command("timeline")
def show_timeline(
    event: str = typer.Argument(..., help="Event, e.g. 100m, 5k, Marathon"),
    gender: Gender = typer.Option(..., "--gender", "-g", help="Men or Women"),
    order: Direction = typer.Option(Direction.DESCENDING, "--order", "-o", help="asc or desc"),
    pace_unit: PaceUnit = typer.Option(None, "--pace-unit", "-p", help="min/km or min/mile"),
    file: Path = typer.Option(None, "--file", "-f", help=FILE_HELP),
):
    """Show the record progression for an event and gender."""
    target = _resolve_event(event)
    unit = pace_unit or get_settings().default_pace_unit
    result = _load(file)

    records = by_event_and_gender(result.records, target, gender)
    if not records:
        console.print(f"[yellow]No records for {target.value} {gender.value}[/yellow]")
        raise typer.Exit(1)

    progression = build_progression(records, target, gender, direction=order)
    render_timeline(progression, unit)


@app.command("skipped")
def list_skipped(
    file: Path = typer.Option(None, "--file", "-f", help=FILE_HELP),
):
    """List rows of the record file that could not be parsed."""
    result = _load(file)

    if not result.skipped:
        console.print("[green]All rows parsed[/green]")
        return

    table = Table(title=f"Skipped Rows ({result.skipped_count})")
    table.add_column("Row", justify="right", style="cyan")
    table.add_column("Field")
    table.add_column("Value")
    table.add_column("Problem")

    for issue in result.skipped:
        table.add_row(
            str(issue.row_number),
            issue.field,
            escape(issue.value or ""),
            escape(issue.message),
        )

    console.print(table)


if __name__ == "__main__":
    app()
