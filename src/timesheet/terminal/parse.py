# SPDX-License-Identifier: MIT

import re
from typing import Optional, cast

import pendulum
import typer

from timesheet.model.date_range import PredefinedRange
from timesheet.service.date_range import range_end_date, range_start_date
from timesheet.service.summary import PREDEFINED_RANGES, get_predefined_range
from timesheet.service.worked_time import is_valid_time
from timesheet.time import date_from_str, today_local


def parse_date(date_param: Optional[str]) -> Optional[pendulum.Date]:
    """
    Parse a calendar date option.

    Accepts YYYY-MM-DD, a relative day offset ("-1", "7"), or one of
    today/t, yesterday/y, tomorrow/o.
    """
    if date_param is None:
        return None

    date = date_param.strip()

    if re.match(r"^\d{4}-\d{2}-\d{2}$", date):
        try:
            return date_from_str(date)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date '{date}': {e}")

    if re.match(r"^-?\d+$", date):
        return today_local().add(days=int(date))

    if date == "today" or date == "t":
        return today_local()
    if date == "yesterday" or date == "y":
        return today_local().subtract(days=1)
    if date == "tomorrow" or date == "o":
        return today_local().add(days=1)
    raise typer.BadParameter("Incorrect date format, expected YYYY-MM-DD")


def parse_time_option(time_str: Optional[str]) -> Optional[str]:
    """Check an (H)H:mm option value; the value is returned unchanged."""
    if time_str is None:
        return None
    if not is_valid_time(time_str):
        raise typer.BadParameter(
            f"Time must be in HH:mm format (e.g., 8:00 or 17:30), got '{time_str}'"
        )
    return time_str


def resolve_date_bounds(
    start: Optional[str],
    end: Optional[str],
    range_name: Optional[str],
) -> tuple[Optional[pendulum.Date], Optional[pendulum.Date]]:
    """
    Turn --start/--end or a named --range into calendar date bounds.

    A named range takes precedence over explicit bounds.
    """
    if range_name is not None:
        if range_name not in PREDEFINED_RANGES:
            raise typer.BadParameter(
                f"Unknown range '{range_name}'. Valid options: {', '.join(PREDEFINED_RANGES)}"
            )
        date_range = get_predefined_range(
            cast(PredefinedRange, range_name), today_local()
        )
        return range_start_date(date_range), range_end_date(date_range)

    return parse_date(start), parse_date(end)
