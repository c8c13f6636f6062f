# SPDX-License-Identifier: MIT

import pendulum

from timesheet.model.entity_id import (
    PLACEHOLDER_ID_PREFIX,
    PLACEHOLDER_USER_ID,
    WEEKEND_PLACEHOLDER_ID_PREFIX,
)
from timesheet.model.time_entry import TimeEntry
from timesheet.time import date_start_local, now_utc, today_local


def get_time_entry_template() -> TimeEntry:
    now = now_utc()
    return {
        "id": "",  # Set by the store
        "user_id": "",  # Must be set
        "date": today_local(),
        "start_time": "",
        "end_time": "",
        "break_duration": "",
        "created": now,
        "updated": now,
    }


def get_placeholder_entry(date: pendulum.Date, weekend: bool = False) -> TimeEntry:
    # Timestamps are pinned to the day itself so reconciliation stays repeatable
    day_start = date_start_local(date).in_tz("UTC")
    prefix = WEEKEND_PLACEHOLDER_ID_PREFIX if weekend else PLACEHOLDER_ID_PREFIX
    return {
        "id": f"{prefix}{date.to_date_string()}",
        "user_id": PLACEHOLDER_USER_ID,
        "date": date,
        "start_time": "",
        "end_time": "",
        "break_duration": "",
        "created": day_start,
        "updated": day_start,
    }
