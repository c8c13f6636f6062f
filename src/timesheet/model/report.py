# SPDX-License-Identifier: MIT

from typing import TypedDict

from timesheet.model.status import EntryStatus


class EntrySummary(TypedDict):
    entries: int
    total_minutes: int
    total_hours: str  # "H:MM"


class ExportRow(TypedDict):
    date: str
    day_of_week: str
    start_time: str
    end_time: str
    break_duration: str
    total_worked: str
    status: EntryStatus
    created: str
    is_weekend: bool


class ExportSummary(TypedDict):
    total_entries: int
    total_hours: str
    average_hours_per_day: str
    status_counts: dict[EntryStatus, int]
    export_date: str


class ExportReport(TypedDict):
    rows: list[ExportRow]
    summary: ExportSummary
