# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from timesheet.model.date_range import DateRange
from timesheet.model.time_entry import TimeEntry
from timesheet.service.date_range import (
    date_in_range,
    normalize_date_range,
    range_end_date,
    range_start_date,
)
from timesheet.service.status import is_weekend_day
from timesheet.template.time_entry import get_placeholder_entry


def generate_date_range(
    start_date: pendulum.Date, end_date: pendulum.Date
) -> list[pendulum.Date]:
    """Every calendar day from start_date to end_date, both included."""
    dates = []
    current_date = start_date
    while current_date <= end_date:
        dates.append(current_date)
        current_date = current_date.add(days=1)
    return dates


def _entries_by_date(entries: list[TimeEntry]) -> dict[pendulum.Date, TimeEntry]:
    # Later entries for the same day replace earlier ones
    lookup: dict[pendulum.Date, TimeEntry] = {}
    for entry in entries:
        lookup[entry["date"]] = entry
    return lookup


def reconcile_entries(
    entries: list[TimeEntry],
    date_range: DateRange,
    weekends_only: bool = False,
) -> list[TimeEntry]:
    """
    Pair every day of date_range with its real entry or a placeholder.

    With weekends_only, placeholders are made only for weekend days and
    weekdays without an entry are left out. The result is sorted by date.
    """
    lookup = _entries_by_date(
        [entry for entry in entries if date_in_range(entry["date"], date_range)]
    )

    reconciled: list[TimeEntry] = []
    for date in generate_date_range(
        range_start_date(date_range), range_end_date(date_range)
    ):
        existing_entry = lookup.get(date)
        if existing_entry is not None:
            reconciled.append(existing_entry)
        elif not weekends_only:
            reconciled.append(get_placeholder_entry(date))
        elif is_weekend_day(date):
            reconciled.append(get_placeholder_entry(date, weekend=True))

    return reconciled


def reconcile_for_table(
    entries: list[TimeEntry], date_range: DateRange
) -> list[TimeEntry]:
    """On-screen variant: a placeholder for every day without an entry."""
    return reconcile_entries(entries, date_range)


def reconcile_for_export(
    entries: list[TimeEntry], date_range: Optional[DateRange] = None
) -> list[TimeEntry]:
    """
    Spreadsheet variant: placeholders only for missing weekend days.

    Without an explicit range the span of the given entries is used.
    """
    if date_range is None:
        if len(entries) == 0:
            return []
        dates = [entry["date"] for entry in entries]
        date_range = normalize_date_range(min(dates), max(dates))
    return reconcile_entries(entries, date_range, weekends_only=True)
