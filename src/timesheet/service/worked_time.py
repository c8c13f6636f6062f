# SPDX-License-Identifier: MIT

import re

from timesheet.model.time_entry import TimeEntry

# Loose form used when reading stored or typed values
_TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")
# Accepted on input, 24 hour clock with optional leading zero
_VALID_TIME_PATTERN = re.compile(r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9]$")


def parse_time(time_str: str) -> int:
    """
    Convert an "HH:MM" string to minutes since midnight.

    Empty, malformed or out of range values give 0 instead of raising, so
    callers cannot tell "not entered" apart from "invalid" here. Use
    is_valid_time() at input boundaries when the difference matters.
    """
    if not time_str:
        return 0

    time_match = _TIME_PATTERN.match(time_str.strip())
    if not time_match:
        return 0

    hours = int(time_match.group(1))
    minutes = int(time_match.group(2))
    if hours < 0 or hours > 23 or minutes < 0 or minutes > 59:
        return 0

    return hours * 60 + minutes


def format_minutes(total_minutes: int) -> str:
    """Format minutes as "HH:MM" with both parts zero-padded."""
    hours = total_minutes // 60
    minutes = total_minutes % 60
    return f"{hours:02d}:{minutes:02d}"


def format_total_minutes(total_minutes: int) -> str:
    """Format a summed duration as "H:MM"; hours are not padded."""
    hours = total_minutes // 60
    minutes = total_minutes % 60
    return f"{hours}:{minutes:02d}"


def calculate_worked_minutes(start_time: str, end_time: str, break_duration: str) -> int:
    worked = parse_time(end_time) - parse_time(start_time) - parse_time(break_duration)
    # Overnight shifts are not wrapped
    if worked < 0:
        return 0
    return worked


def calculate_worked_time(start_time: str, end_time: str, break_duration: str) -> str:
    return format_minutes(calculate_worked_minutes(start_time, end_time, break_duration))


def entry_worked_minutes(entry: TimeEntry) -> int:
    """Worked minutes for an entry; 0 when start or end time is missing."""
    if not entry["start_time"] or not entry["end_time"]:
        return 0
    return calculate_worked_minutes(
        entry["start_time"], entry["end_time"], entry["break_duration"]
    )


def is_valid_time(time_str: str) -> bool:
    return bool(time_str) and _VALID_TIME_PATTERN.match(time_str) is not None


def normalize_time(time_str: str) -> str:
    """Zero-pad a valid time string, e.g. "9:05" -> "09:05"."""
    return format_minutes(parse_time(time_str))
