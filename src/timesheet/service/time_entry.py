# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from timesheet.model.time_entry import TimeEntry, TimeEntryFilter, TimeEntryPage
from timesheet.service.worked_time import is_valid_time, normalize_time, parse_time
from timesheet.template.time_entry import get_time_entry_template

DEFAULT_PAGE_SIZE = 10


class TimeEntryValidationError(Exception):
    """Raised when time entry validation fails."""

    pass


def validate_time_entry(start_time: str, end_time: str, break_duration: str) -> bool:
    """
    Check the time fields of an entry before it is stored.

    - start, end and break must all be HH:MM on a 24 hour clock
    - end must be after start

    Returns True if valid, raises TimeEntryValidationError if not.
    """
    for label, value in (
        ("Start time", start_time),
        ("End time", end_time),
        ("Break duration", break_duration),
    ):
        if not value:
            raise TimeEntryValidationError(f"{label} is required.")
        if not is_valid_time(value):
            raise TimeEntryValidationError(
                f"{label} must be in HH:MM format (e.g. 09:00 or 17:30). Got: '{value}'"
            )

    if parse_time(end_time) <= parse_time(start_time):
        raise TimeEntryValidationError(
            f"End time {end_time} must be after start time {start_time}."
        )

    return True


def create_time_entry(
    user_id: str,
    date: pendulum.Date,
    start_time: str,
    end_time: str,
    break_duration: str,
) -> TimeEntry:
    validate_time_entry(start_time, end_time, break_duration)

    entry = get_time_entry_template()
    entry["user_id"] = user_id
    entry["date"] = date
    entry["start_time"] = normalize_time(start_time)
    entry["end_time"] = normalize_time(end_time)
    entry["break_duration"] = normalize_time(break_duration)
    return entry


def filter_time_entries(
    entries: list[TimeEntry], entry_filter: Optional[TimeEntryFilter] = None
) -> list[TimeEntry]:
    """Apply user and inclusive date bounds, then sort ascending by date."""
    filtered = list(entries)
    if entry_filter is not None:
        user_id = entry_filter.get("user_id")
        start_date = entry_filter.get("start_date")
        end_date = entry_filter.get("end_date")
        if user_id is not None:
            filtered = [entry for entry in filtered if entry["user_id"] == user_id]
        if start_date is not None:
            filtered = [entry for entry in filtered if entry["date"] >= start_date]
        if end_date is not None:
            filtered = [entry for entry in filtered if entry["date"] <= end_date]
    return sorted(filtered, key=lambda entry: entry["date"])


def paginate_time_entries(
    entries: list[TimeEntry], page: int = 1, page_size: int = DEFAULT_PAGE_SIZE
) -> TimeEntryPage:
    if page < 1:
        raise ValueError(f"Page must be 1 or greater, got {page}")
    if page_size < 1:
        raise ValueError(f"Page size must be 1 or greater, got {page_size}")

    start_index = (page - 1) * page_size
    return {
        "data": entries[start_index : start_index + page_size],
        "total": len(entries),
        "page": page,
        "page_size": page_size,
    }
