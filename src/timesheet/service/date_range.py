# SPDX-License-Identifier: MIT

from typing import Union

import pendulum

from timesheet.model.date_range import DateRange
from timesheet.time import date_end_local, date_start_local


def _as_date(value: Union[pendulum.DateTime, pendulum.Date]) -> pendulum.Date:
    if isinstance(value, pendulum.DateTime):
        return value.in_tz("local").date()
    return value


def normalize_date_range(
    start: Union[pendulum.DateTime, pendulum.Date],
    end: Union[pendulum.DateTime, pendulum.Date],
) -> DateRange:
    """Widen a pair of bounds to whole local days, inclusive on both ends."""
    return {
        "start": date_start_local(_as_date(start)),
        "end": date_end_local(_as_date(end)),
    }


def range_start_date(date_range: DateRange) -> pendulum.Date:
    return _as_date(date_range["start"])


def range_end_date(date_range: DateRange) -> pendulum.Date:
    return _as_date(date_range["end"])


def date_in_range(date: pendulum.Date, date_range: DateRange) -> bool:
    return range_start_date(date_range) <= date <= range_end_date(date_range)
