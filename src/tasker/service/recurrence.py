# SPDX-License-Identifier: MIT

import datetime
import logging
import re

import pendulum

from tasker.errors import InvalidDateSpec, InvalidRecurrenceSpec
from tasker.service import date_spec
from tasker.time import overflowing_date, to_local_date

logger = logging.getLogger(__name__)

_QUANTITY_RE = re.compile(r"^[0-9]+$")


def resolve(spec: str, reference: datetime.date) -> pendulum.Date:
    """
    Resolve a recurrence expression to the next date after a reference date.

    Two forms are understood:
        - "<n> <unit>" where unit is day(s), week(s), month(s) or year(s)
        - a comma separated list of weekday names, e.g. "monday,thursday",
          which resolves to the soonest of those weekdays

    Month and year steps keep the day of the month and roll over past the
    end of short months, so January 31 plus one month is early March.

    Raises:
        InvalidRecurrenceSpec: if the expression matches neither form
    """
    reference = to_local_date(reference)
    tokens = spec.split()
    if len(tokens) == 0:
        raise InvalidRecurrenceSpec(spec)

    if _QUANTITY_RE.match(tokens[0]):
        return _resolve_quantity(spec, tokens, reference)
    return _resolve_weekday_set(spec, reference)


def validate(spec: str, reference: datetime.date) -> str:
    """Return the schedule unchanged if it resolves, otherwise raise."""
    resolve(spec, reference)
    return spec


def _resolve_quantity(
    spec: str, tokens: list[str], reference: pendulum.Date
) -> pendulum.Date:
    if len(tokens) != 2:
        raise InvalidRecurrenceSpec(spec)

    number = int(tokens[0])
    unit = tokens[1].lower()

    if unit in ("day", "days"):
        return reference.add(days=number)
    if unit in ("week", "weeks"):
        return reference.add(days=number * 7)
    if unit in ("month", "months"):
        return overflowing_date(
            reference.year, reference.month + number, reference.day
        )
    if unit in ("year", "years"):
        return overflowing_date(reference.year + number, reference.month, reference.day)

    raise InvalidRecurrenceSpec(spec)


def _resolve_weekday_set(spec: str, reference: pendulum.Date) -> pendulum.Date:
    names = [name.strip().lower() for name in spec.split(",")]
    if any(name not in date_spec.WEEKDAYS for name in names):
        raise InvalidRecurrenceSpec(spec)

    try:
        candidates = [date_spec.resolve(name, reference) for name in names]
    except InvalidDateSpec as e:
        raise InvalidRecurrenceSpec(spec) from e

    next_date = min(candidates)
    logger.debug("schedule %r from %s resolves to %s", spec, reference, next_date)
    return next_date
