# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from timesheet.model.date_range import DateRange
from timesheet.model.report import ExportReport, ExportRow, ExportSummary
from timesheet.model.time_entry import TimeEntry
from timesheet.service.reconcile import reconcile_for_export
from timesheet.service.status import (
    get_entry_status,
    get_status_breakdown,
    is_placeholder_entry,
    is_weekend_day,
)
from timesheet.service.summary import filter_entries_by_range
from timesheet.service.worked_time import (
    calculate_worked_time,
    entry_worked_minutes,
    format_total_minutes,
)
from timesheet.time import (
    date_to_display_str,
    date_to_iso_str,
    date_to_weekday_name,
    datetime_to_display_local_datetime_str,
    today_local,
)


def build_export_row(entry: TimeEntry) -> ExportRow:
    return {
        "date": date_to_display_str(entry["date"]),
        "day_of_week": date_to_weekday_name(entry["date"]),
        "start_time": entry["start_time"] or "",
        "end_time": entry["end_time"] or "",
        "break_duration": entry["break_duration"] or "",
        "total_worked": calculate_worked_time(
            entry["start_time"], entry["end_time"], entry["break_duration"]
        ),
        "status": get_entry_status(entry),
        "created": datetime_to_display_local_datetime_str(entry["created"]),
        "is_weekend": is_weekend_day(entry["date"]),
    }


def build_export_rows(complete_entries: list[TimeEntry]) -> list[ExportRow]:
    return [build_export_row(entry) for entry in complete_entries]


def build_export_summary(
    entries: list[TimeEntry],
    complete_entries: list[TimeEntry],
    export_date: pendulum.Date,
) -> ExportSummary:
    """
    Totals come from real entries only, while the status breakdown covers
    the reconciled sequence including weekend placeholders.
    """
    real_entries = [entry for entry in entries if not is_placeholder_entry(entry)]
    total_entries = len(real_entries)
    total_minutes = sum(entry_worked_minutes(entry) for entry in real_entries)

    average_hours_per_day = "0"
    if total_entries > 0:
        average_hours_per_day = f"{total_minutes / total_entries / 60:.1f}"

    return {
        "total_entries": total_entries,
        "total_hours": format_total_minutes(total_minutes),
        "average_hours_per_day": average_hours_per_day,
        "status_counts": get_status_breakdown(complete_entries),
        "export_date": date_to_iso_str(export_date),
    }


def build_export_report(
    entries: list[TimeEntry],
    date_range: Optional[DateRange] = None,
    export_date: Optional[pendulum.Date] = None,
) -> ExportReport:
    entries = filter_entries_by_range(entries, date_range)
    complete_entries = reconcile_for_export(entries, date_range)
    return {
        "rows": build_export_rows(complete_entries),
        "summary": build_export_summary(
            entries,
            complete_entries,
            export_date if export_date is not None else today_local(),
        ),
    }


def generate_default_filename(today: pendulum.Date) -> str:
    return f"timesheet_export_{date_to_iso_str(today)}"


def generate_filename_with_date_range(
    start_date: Optional[pendulum.Date],
    end_date: Optional[pendulum.Date],
    today: pendulum.Date,
) -> str:
    if start_date is not None and end_date is not None:
        return (
            f"timesheet_{date_to_iso_str(start_date)}_to_{date_to_iso_str(end_date)}"
        )
    return generate_default_filename(today)


def generate_page_filename(page_index: int, today: pendulum.Date) -> str:
    return f"timesheet_page_{page_index + 1}_{date_to_iso_str(today)}"
