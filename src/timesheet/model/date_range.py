# SPDX-License-Identifier: MIT

from typing import Literal, TypedDict

import pendulum

PredefinedRange = Literal["today", "this_week", "this_month", "last_30_days"]


class DateRange(TypedDict):
    # Local time, start normalized to 00:00 and end to 23:59:59.999999
    start: pendulum.DateTime
    end: pendulum.DateTime
