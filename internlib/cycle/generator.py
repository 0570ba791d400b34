"""
Monthly compliance-cycle generation.

An internship owes one monthly report and one faculty visit per cycle. Cycles
are anchored on the internship start day-of-month: the k-th cycle starts at
``start + k months`` (clamped to month end, so Jan 31 -> Feb 29 -> Mar 31)
and ends the day before the next anchored start.

Partial months count. Any anchored start that falls inside ``[start, end]``
opens a cycle, with its end truncated to ``end``. This is a policy choice
("count any month the internship touches"), not a calendar necessity;
changing it changes every expected-count figure downstream.

Results depend only on the inputs and the configured report due day. The
default due day is read once at the start of each call and is meant to be
set at start-up (`config.set_default_report_due_day`), not between calls.
Pass `due_day` explicitly to pin results regardless of configuration.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional

from internlib import config
from internlib.utils.date import (
    DateLike,
    add_months,
    previous_day,
    to_date,
    to_optional_date,
)

from .core import MonthlyCycle, Obligation
from .due_dates import report_due_date

logger = logging.getLogger(__name__)


def calculate_expected_months(
    start_date: Optional[DateLike],
    end_date: DateLike,
    due_day: Optional[int] = None,
) -> List[MonthlyCycle]:
    """
    Generate the ordered monthly cycles for an internship.

    Args:
        start_date: Internship start. None means "not yet scheduled" and
            yields no cycles.
        end_date: Internship end (inclusive). Required.
        due_day: Day of the following month the report is due
            (None = configured default).

    Returns:
        Contiguous, non-overlapping cycles; empty when end precedes start.

    Raises:
        InvalidDateError: if either date cannot be interpreted.
    """
    start = to_optional_date(start_date)
    end = to_date(end_date)
    if start is None:
        logger.debug("No start date; no cycles generated")
        return []
    if end < start:
        logger.debug("End %s precedes start %s; no cycles generated", end, start)
        return []
    if due_day is None:
        due_day = config.get_default_report_due_day()

    cycles: List[MonthlyCycle] = []
    period_start = start
    offset = 0
    while period_start <= end:
        offset += 1
        next_start = add_months(start, offset)
        is_final = next_start > end
        period_end = end if is_final else previous_day(next_start)

        cycles.append(
            MonthlyCycle(
                cycle_index=offset,
                period_start=period_start,
                period_end=period_end,
                report_due_date=report_due_date(period_end, due_day),
                is_final_cycle=is_final,
            )
        )
        period_start = next_start

    if len(cycles) > config.MAX_CYCLES:
        logger.warning(
            "Internship %s..%s spans %s cycles, above the expected maximum of %s",
            start,
            end,
            len(cycles),
            config.MAX_CYCLES,
        )
    logger.debug("Generated %s cycles for %s..%s", len(cycles), start, end)
    return cycles


def get_total_expected_count(
    start_date: Optional[DateLike],
    end_date: DateLike,
    due_day: Optional[int] = None,
) -> int:
    """Total number of reports (and visits) owed over the whole internship."""
    return len(calculate_expected_months(start_date, end_date, due_day))


def count_due_as_of(
    start_date: Optional[DateLike],
    end_date: Optional[DateLike],
    now: Optional[DateLike] = None,
    obligation: Obligation = Obligation.REPORT,
    due_day: Optional[int] = None,
) -> int:
    """
    Count cycles whose due date for `obligation` is on or before `now`.

    The evaluation window is capped at `now`: ``effective_end =
    min(end_date or now, now)``, so a month that has not started yet is
    never counted however far away the planned end is. The raw count is
    returned without any floor; see `apply_expected_floor`.
    """
    today = date.today() if now is None else to_date(now)
    start = to_optional_date(start_date)
    end = to_optional_date(end_date)

    if start is None or start > today:
        return 0
    if due_day is None:
        due_day = config.get_default_report_due_day()

    effective_end = today if end is None else min(end, today)
    cycles = calculate_expected_months(start, effective_end, due_day)
    return sum(1 for cycle in cycles if cycle.due_date_for(obligation) <= today)


def get_expected_reports_as_of_today(
    start_date: Optional[DateLike],
    end_date: Optional[DateLike],
    now: Optional[DateLike] = None,
) -> int:
    """Monthly reports that should have been submitted by `now`."""
    return count_due_as_of(start_date, end_date, now, Obligation.REPORT)


def get_expected_visits_as_of_today(
    start_date: Optional[DateLike],
    end_date: Optional[DateLike],
    now: Optional[DateLike] = None,
) -> int:
    """Faculty visits that should have been completed by `now`."""
    return count_due_as_of(start_date, end_date, now, Obligation.VISIT)
