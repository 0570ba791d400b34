"""
Due-date rules for compliance cycles.
"""

from datetime import date, datetime
from typing import Optional, Union

from internlib import config
from internlib.utils.date import first_of_next_month


def report_due_date(period_end: Union[date, datetime], due_day: Optional[int] = None) -> date:
    """Return the due date for a cycle ending on `period_end`.

    The due date is day `due_day` (default: the configured report due day,
    the 5th) of the calendar month following `period_end`'s month, so it is
    always strictly after `period_end`.
    """
    if isinstance(period_end, datetime):
        period_end = period_end.date()
    if due_day is None:
        due_day = config.get_default_report_due_day()
    if not 1 <= due_day <= 28:
        raise ValueError(f"due_day must be between 1 and 28, got {due_day}")

    return first_of_next_month(period_end).replace(day=due_day)
