# SPDX-License-Identifier: MIT

from typing import Optional, cast

import pendulum


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def today_local() -> pendulum.Date:
    return pendulum.today("local").date()


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_to_iso_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_iso_str(datetime)


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime))


def datetime_from_str_optional(datetime: Optional[str]) -> Optional[pendulum.DateTime]:
    if datetime is None:
        return None
    return datetime_from_str(datetime)


def date_to_iso_str(date: pendulum.Date) -> str:
    return date.to_date_string()


def date_from_str(date_str: str) -> pendulum.Date:
    """Parse a 'YYYY-MM-DD' string (or a full ISO timestamp) to a calendar date."""
    parsed = pendulum.parse(date_str, exact=True)
    if isinstance(parsed, pendulum.DateTime):
        return parsed.in_tz("local").date()
    if isinstance(parsed, pendulum.Date):
        return parsed
    raise ValueError(f"Not a date: {date_str}")


def date_start_local(date: pendulum.Date) -> pendulum.DateTime:
    return pendulum.datetime(date.year, date.month, date.day, tz="local")


def date_end_local(date: pendulum.Date) -> pendulum.DateTime:
    return date_start_local(date).end_of("day")


def date_to_display_str(date: pendulum.Date) -> str:
    """Format as 'Tue, 01 Jul 2025'."""
    return date.format("ddd, DD MMM YYYY")


def date_to_weekday_name(date: pendulum.Date) -> str:
    return date.format("dddd")


def datetime_to_display_local_datetime_str(datetime: pendulum.DateTime) -> str:
    """Format as 'Jul 01, 2025, 09:00 AM' in local time."""
    return datetime.in_tz("local").format("MMM DD, YYYY, hh:mm A")


def datetime_to_display_local_datetime_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_display_local_datetime_str(datetime)
