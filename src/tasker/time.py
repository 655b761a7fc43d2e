# SPDX-License-Identifier: MIT

import datetime
from typing import Optional

import pendulum

# All dates handled by tasker live in the local calendar.
LOCAL_TZ = "local"


def today() -> pendulum.Date:
    return pendulum.today(LOCAL_TZ).date()


def to_local_date(value: datetime.date) -> pendulum.Date:
    """Convert a date or datetime into a pendulum.Date in the local calendar.

    Datetimes carrying an offset are moved into the local time zone before the
    calendar day is taken; naive datetimes are treated as local already.
    """
    if isinstance(value, datetime.datetime):
        return pendulum.instance(value, tz=LOCAL_TZ).in_tz(LOCAL_TZ).date()
    return pendulum.date(value.year, value.month, value.day)


def overflowing_date(year: int, month: int, day: int) -> pendulum.Date:
    """Build a date the way calendar arithmetic rolls over.

    Months past December carry into the next year, and a day past the end of
    the month spills into the following month (June 31 is July 1).
    """
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    return pendulum.date(year, month, 1).add(days=day - 1)


def date_to_str(date: pendulum.Date) -> str:
    return date.to_date_string()


def date_to_str_optional(date: Optional[pendulum.Date]) -> Optional[str]:
    if date is None:
        return None
    return date_to_str(date)


def date_to_display_str(date: pendulum.Date, date_format: str) -> str:
    return date.format(date_format)


def date_to_display_str_optional(
    date: Optional[pendulum.Date], date_format: str
) -> Optional[str]:
    if date is None:
        return None
    return date_to_display_str(date, date_format)
