# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from timesheet.model.report import EntrySummary
from timesheet.model.status import EntryStatus
from timesheet.model.time_entry import TimeEntry, TimeEntryPage
from timesheet.model.user import User
from timesheet.service.status import get_entry_status, is_placeholder_entry, is_weekend_day
from timesheet.service.worked_time import calculate_worked_time
from timesheet.time import (
    date_to_display_str,
    datetime_to_display_local_datetime_str_optional,
)
from timesheet.view.header import header

SHORT_ID_LENGTH = 8

STATUS_STYLES: dict[EntryStatus, str] = {
    EntryStatus.COMPLETE: "green",
    EntryStatus.IN_PROGRESS: "dark_orange",
    EntryStatus.PENDING: "grey62",
    EntryStatus.NO_ENTRY: "red",
}


def short_id(entry: TimeEntry) -> str:
    if is_placeholder_entry(entry):
        return ""
    return entry["id"][:SHORT_ID_LENGTH]


def format_status(entry: TimeEntry) -> str:
    status = get_entry_status(entry)
    style = STATUS_STYLES[status]
    return f"[{style}]{status}[/{style}]"


def time_entries_view(
    user: User,
    report_name: str,
    page: TimeEntryPage,
    summary: Optional[EntrySummary] = None,
) -> None:
    header(user, report_name)

    entries_table = Table(box=box.SIMPLE)
    for column in ["id", "date", "start", "end", "break", "worked", "status"]:
        entries_table.add_column(column)

    for entry in page["data"]:
        row_style = None
        if is_weekend_day(entry["date"]):
            row_style = "light_goldenrod3"
        if is_placeholder_entry(entry):
            row_style = "dim"
        entries_table.add_row(
            short_id(entry),
            date_to_display_str(entry["date"]),
            entry["start_time"],
            entry["end_time"],
            entry["break_duration"],
            calculate_worked_time(
                entry["start_time"], entry["end_time"], entry["break_duration"]
            ),
            format_status(entry),
            style=row_style,
        )

    page_count = max(1, -(-page["total"] // page["page_size"]))
    caption = f"page {page['page']} of {page_count} ({page['total']} rows)"
    if summary is not None:
        caption += (
            f" | entries: {summary['entries']} | worked: {summary['total_hours']}"
        )
    entries_table.caption = caption

    console = Console()
    console.print(entries_table)


def single_time_entry_view(user: User, entry: TimeEntry) -> None:
    header(user, "time entry")

    entry_table = Table(box=box.SIMPLE)
    entry_table.add_column("property")
    entry_table.add_column("value")

    entry_table.add_row("id", entry["id"])
    entry_table.add_row("user", entry["user_id"])
    entry_table.add_row("date", date_to_display_str(entry["date"]))
    entry_table.add_row("start", entry["start_time"])
    entry_table.add_row("end", entry["end_time"])
    entry_table.add_row("break", entry["break_duration"])
    entry_table.add_row(
        "worked",
        calculate_worked_time(
            entry["start_time"], entry["end_time"], entry["break_duration"]
        ),
    )
    entry_table.add_row("status", format_status(entry))
    entry_table.add_row(
        "created", datetime_to_display_local_datetime_str_optional(entry["created"])
    )
    entry_table.add_row(
        "updated", datetime_to_display_local_datetime_str_optional(entry["updated"])
    )

    console = Console()
    console.print(entry_table)
