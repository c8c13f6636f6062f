# SPDX-License-Identifier: MIT

from typing import Iterable, Optional

import pendulum

from timesheet.model.entity_id import (
    PLACEHOLDER_ID_PREFIX,
    PLACEHOLDER_USER_ID,
    WEEKEND_PLACEHOLDER_ID_PREFIX,
)
from timesheet.model.status import EntryStatus
from timesheet.model.time_entry import TimeEntry
from timesheet.service.worked_time import entry_worked_minutes

FULL_DAY_HOURS = 8


def is_placeholder_entry(entry: Optional[TimeEntry]) -> bool:
    if entry is None:
        return True
    return (
        entry["id"].startswith(PLACEHOLDER_ID_PREFIX)
        or entry["id"].startswith(WEEKEND_PLACEHOLDER_ID_PREFIX)
        or entry["user_id"] == PLACEHOLDER_USER_ID
    )


def is_weekend_day(date: pendulum.Date) -> bool:
    return date.day_of_week in [pendulum.SATURDAY, pendulum.SUNDAY]


def get_entry_status(entry: Optional[TimeEntry]) -> EntryStatus:
    """
    Classify how complete an entry is.

    - missing entry or placeholder: No Entry
    - start or end time missing: Pending
    - 8 or more whole worked hours: Complete
    - between 1 and 7 whole worked hours: In Progress
    - less than a whole worked hour: Pending
    """
    if entry is None or is_placeholder_entry(entry):
        return EntryStatus.NO_ENTRY

    if not entry["start_time"] or not entry["end_time"]:
        return EntryStatus.PENDING

    worked_hours = entry_worked_minutes(entry) // 60
    if worked_hours >= FULL_DAY_HOURS:
        return EntryStatus.COMPLETE
    elif worked_hours > 0:
        return EntryStatus.IN_PROGRESS
    return EntryStatus.PENDING


def get_status_breakdown(entries: Iterable[TimeEntry]) -> dict[EntryStatus, int]:
    counts = {status: 0 for status in EntryStatus}
    for entry in entries:
        counts[get_entry_status(entry)] += 1
    return counts
