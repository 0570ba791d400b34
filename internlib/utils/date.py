"""Date normalization and calendar-month helpers."""

from __future__ import annotations

import math
from datetime import date, datetime, timedelta
from typing import Union

import pandas as pd
from dateutil.relativedelta import relativedelta

DATE_FMT = "%Y-%m-%d"
COMPACT_FMT = "%Y%m%d"

DateLike = Union[str, date, datetime, pd.Timestamp]


class InvalidDateError(ValueError):
    """Raised when a value cannot be interpreted as a calendar date."""


def is_missing_date(value) -> bool:
    """
    True for None and pandas' missing markers (NaT, NA).
    A float NaN is not a date marker and is left for `to_date` to reject.
    """
    if value is None:
        return True
    if isinstance(value, float) or not pd.api.types.is_scalar(value):
        return False
    return bool(pd.isna(value))


def to_date(date_like: DateLike) -> date:
    """
    Convert a string, datetime or Timestamp to a plain date.
    Accepts 'YYYY-MM-DD' and 'YYYYMMDD' string formats.
    NaN, NaT, NA and None are rejected rather than coerced.
    """
    if is_missing_date(date_like):
        raise InvalidDateError(f"A date is required, got {date_like!r}")
    if isinstance(date_like, float) and math.isnan(date_like):
        raise InvalidDateError("A date is required, got NaN")
    if isinstance(date_like, pd.Timestamp):
        return date_like.date()
    if isinstance(date_like, datetime):
        return date_like.date()
    if isinstance(date_like, date):
        return date_like
    if isinstance(date_like, str):
        for fmt in (DATE_FMT, COMPACT_FMT):
            try:
                return datetime.strptime(date_like.strip(), fmt).date()
            except ValueError:
                continue
        raise InvalidDateError(f"Unsupported date string format: {date_like!r}")
    raise InvalidDateError(f"Unsupported type for date: {type(date_like)}")


def to_optional_date(date_like) -> date | None:
    """Like `to_date`, but None/NaT/NA mean "no date" instead of an error."""
    if is_missing_date(date_like):
        return None
    return to_date(date_like)


def add_months(anchor: date, months: int) -> date:
    """
    Shift `anchor` by whole calendar months, keeping its day-of-month and
    clamping to the last day when the target month is shorter.
    """
    return anchor + relativedelta(months=months)


def first_of_next_month(dt: date) -> date:
    """First calendar day of the month after `dt`."""
    return dt + relativedelta(months=1, day=1)


def days_between(start: date, end: date) -> int:
    """Whole days from `start` to `end` (negative when end precedes start)."""
    return (end - start).days


def previous_day(dt: date) -> date:
    return dt - timedelta(days=1)
