# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from timesheet.model.entity_id import EntityId


class TimeEntry(TypedDict):
    id: EntityId
    user_id: str
    date: pendulum.Date
    start_time: str  # "HH:MM", empty for placeholders
    end_time: str  # "HH:MM", empty for placeholders
    break_duration: str  # "HH:MM", empty for placeholders
    created: pendulum.DateTime
    updated: pendulum.DateTime


class TimeEntryFilter(TypedDict, total=False):
    user_id: Optional[str]
    start_date: Optional[pendulum.Date]
    end_date: Optional[pendulum.Date]


class TimeEntryPage(TypedDict):
    data: list[TimeEntry]
    total: int
    page: int
    page_size: int
