# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer

from timesheet.export.spreadsheet import ExportError, write_spreadsheet
from timesheet.repository.configuration import CONFIGURATION_REPO
from timesheet.repository.time_entry import get_time_entry_store
from timesheet.service.date_range import normalize_date_range
from timesheet.service.export import (
    build_export_report,
    generate_filename_with_date_range,
    generate_page_filename,
)
from timesheet.service.summary import summarize_predefined_ranges
from timesheet.service.time_entry import (
    DEFAULT_PAGE_SIZE,
    filter_time_entries,
    paginate_time_entries,
)
from timesheet.terminal.auth import get_current_user
from timesheet.terminal.custom_typer import SessionAwareTyperGroup
from timesheet.terminal.entry import resolve_user_id
from timesheet.terminal.parse import resolve_date_bounds
from timesheet.time import today_local
from timesheet.view.summary import export_summary_view, summary_cards_view

app = typer.Typer(cls=SessionAwareTyperGroup, no_args_is_help=True)


def _resolve_output_path(output: Optional[Path], filename: str) -> Path:
    """
    Pick the file to write.

    The configured export_path and any --output without an .xlsx suffix are
    directories, created when missing.
    """
    if output is not None and output.suffix == ".xlsx":
        return output
    if output is None:
        export_path = CONFIGURATION_REPO.get_config()["export_path"]
        output = Path(export_path) if export_path is not None else Path.cwd()
    try:
        output.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ExportError(f"Cannot create export directory: {output}") from e
    return output / filename


@app.command("summary, s")
def summary(
    user_id: Annotated[
        Optional[str], typer.Option("--user", "-u", help="Employers only")
    ] = None,
) -> None:
    """Entry count and worked time for today, this week, this month and the last 30 days."""
    user = get_current_user()
    owner_id = resolve_user_id(user, user_id)

    entries = filter_time_entries(
        get_time_entry_store().list_entries(), {"user_id": owner_id}
    )
    summary_cards_view(user, summarize_predefined_ranges(entries, today_local()))


@app.command("export, x")
def export(
    start: Annotated[Optional[str], typer.Option("--start", "-s")] = None,
    end: Annotated[Optional[str], typer.Option("--end", "-e")] = None,
    range_name: Annotated[
        Optional[str],
        typer.Option(
            "--range", "-r", help="today, this_week, this_month, last_30_days"
        ),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="File or directory to write to"),
    ] = None,
    worksheet_name: Annotated[
        str, typer.Option("--worksheet-name", "-w")
    ] = "Time Entries",
    include_summary: Annotated[
        bool, typer.Option("--summary/--no-summary")
    ] = True,
    page: Annotated[
        Optional[int], typer.Option("--page", "-p", help="Export one page of entries")
    ] = None,
    page_size: Annotated[int, typer.Option("--page-size", "-ps")] = DEFAULT_PAGE_SIZE,
    user_id: Annotated[
        Optional[str], typer.Option("--user", "-u", help="Employers only")
    ] = None,
) -> None:
    """Export time entries to an Excel spreadsheet."""
    user = get_current_user()
    owner_id = resolve_user_id(user, user_id)
    start_date, end_date = resolve_date_bounds(start, end, range_name)
    today = today_local()

    entries = filter_time_entries(
        get_time_entry_store().list_entries(),
        {"user_id": owner_id, "start_date": start_date, "end_date": end_date},
    )
    date_range = None
    if page is not None:
        # A page covers only the span of its own entries
        try:
            entries = paginate_time_entries(entries, page, page_size)["data"]
        except ValueError as e:
            raise typer.BadParameter(str(e))
        filename = generate_page_filename(page - 1, today)
    else:
        if start_date is not None and end_date is not None:
            date_range = normalize_date_range(start_date, end_date)
        filename = generate_filename_with_date_range(start_date, end_date, today)
    report = build_export_report(entries, date_range, today)

    try:
        output = _resolve_output_path(output, f"{filename}.xlsx")
        written = write_spreadsheet(report, output, worksheet_name, include_summary)
    except ExportError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)

    export_summary_view(user, report["summary"], written)
