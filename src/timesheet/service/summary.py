# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from timesheet.model.date_range import DateRange, PredefinedRange
from timesheet.model.report import EntrySummary
from timesheet.model.time_entry import TimeEntry
from timesheet.service.date_range import date_in_range, normalize_date_range
from timesheet.service.status import is_placeholder_entry
from timesheet.service.worked_time import entry_worked_minutes, format_total_minutes

PREDEFINED_RANGES: list[PredefinedRange] = [
    "today",
    "this_week",
    "this_month",
    "last_30_days",
]


def get_predefined_range(name: PredefinedRange, today: pendulum.Date) -> DateRange:
    """
    Resolve a named range relative to today.

    Weeks run Sunday through Saturday. last_30_days spans today minus 30
    days through today, so it covers 31 calendar days.
    """
    match name:
        case "today":
            return normalize_date_range(today, today)
        case "this_week":
            days_since_sunday = today.isoweekday() % 7
            start_of_week = today.subtract(days=days_since_sunday)
            return normalize_date_range(start_of_week, start_of_week.add(days=6))
        case "this_month":
            return normalize_date_range(
                today.start_of("month"), today.end_of("month")
            )
        case "last_30_days":
            return normalize_date_range(today.subtract(days=30), today)
    raise ValueError(f"Unknown range: {name}")


def filter_entries_by_range(
    entries: list[TimeEntry], date_range: Optional[DateRange]
) -> list[TimeEntry]:
    if date_range is None:
        return list(entries)
    return [entry for entry in entries if date_in_range(entry["date"], date_range)]


def summarize_entries(
    entries: list[TimeEntry], date_range: Optional[DateRange] = None
) -> EntrySummary:
    """
    Count entries and sum their worked time.

    Placeholders are left out entirely. Entries without a start or end time
    are counted but add nothing to the total.
    """
    real_entries = [
        entry
        for entry in filter_entries_by_range(entries, date_range)
        if not is_placeholder_entry(entry)
    ]

    total_minutes = sum(entry_worked_minutes(entry) for entry in real_entries)

    return {
        "entries": len(real_entries),
        "total_minutes": total_minutes,
        "total_hours": format_total_minutes(total_minutes),
    }


def summarize_predefined_ranges(
    entries: list[TimeEntry], today: pendulum.Date
) -> dict[PredefinedRange, EntrySummary]:
    return {
        name: summarize_entries(entries, get_predefined_range(name, today))
        for name in PREDEFINED_RANGES
    }
