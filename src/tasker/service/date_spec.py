# SPDX-License-Identifier: MIT

import datetime
import logging
import re

import pendulum

from tasker.errors import InvalidDateSpec
from tasker.time import LOCAL_TZ, overflowing_date, to_local_date

logger = logging.getLogger(__name__)

# Indexed the way the weekday arithmetic below expects: 0 is Sunday.
WEEKDAYS = [
    "sunday",
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
]

_ABSOLUTE_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}")
_DAY_OF_MONTH_RE = re.compile(r"^[0-9]+$")


def weekday_index(date: datetime.date) -> int:
    return date.isoweekday() % 7


def resolve(spec: str, reference: datetime.date) -> pendulum.Date:
    """
    Resolve a free-form date expression against a reference date.

    Accepted forms, tried in order:
        - an absolute literal starting with YYYY-MM-DD (date or datetime)
        - "today" and "tomorrow"
        - a weekday name, meaning its next occurrence strictly after today
        - a day of the month (1-31), in this month unless that day has passed

    Raises:
        InvalidDateSpec: if none of the forms match
    """
    reference = to_local_date(reference)
    text = spec.strip()
    lowered = text.lower()

    if _ABSOLUTE_DATE_RE.match(text):
        return _resolve_absolute(spec, text)

    if lowered == "today":
        return reference
    if lowered == "tomorrow":
        return reference.add(days=1)

    if lowered in WEEKDAYS:
        target = WEEKDAYS.index(lowered)
        current = weekday_index(reference)
        if target > current:
            return reference.add(days=target - current)
        return reference.add(days=(7 - current) + target)

    if _DAY_OF_MONTH_RE.match(lowered):
        day = int(lowered)
        if not 1 <= day <= 31:
            raise InvalidDateSpec(spec)
        if day < reference.day:
            return overflowing_date(reference.year, reference.month + 1, day)
        return overflowing_date(reference.year, reference.month, day)

    raise InvalidDateSpec(spec)


def _resolve_absolute(spec: str, text: str) -> pendulum.Date:
    try:
        parsed = pendulum.parse(text, tz=LOCAL_TZ)
    except (ValueError, TypeError) as e:
        logger.debug("could not parse date literal %r: %s", text, e)
        raise InvalidDateSpec(spec) from e

    if isinstance(parsed, datetime.date):
        return to_local_date(parsed)
    # Durations and bare times are not dates.
    raise InvalidDateSpec(spec)
