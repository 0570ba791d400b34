"""
Per-cycle status queries used by the student and faculty views.

All functions take `now` explicitly and work at day granularity.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional, Sequence

from internlib.utils.date import DateLike, days_between, to_date, to_optional_date

from .core import MonthlyCycle


class SubmissionState(Enum):
    COMPLETED = "COMPLETED"
    NOT_YET_DUE = "NOT_YET_DUE"
    CAN_SUBMIT = "CAN_SUBMIT"
    OVERDUE = "OVERDUE"


@dataclass(frozen=True)
class SubmissionStatus:
    state: SubmissionState
    label: str
    can_submit: bool
    sublabel: str = ""


@dataclass(frozen=True)
class Lateness:
    is_late: bool
    days_late: int = 0


@dataclass(frozen=True)
class CurrentCycleInfo:
    """Where `now` falls relative to an internship's cycles.

    Attributes:
        current_cycle: Cycle in progress (or in its submission window), the
            next upcoming cycle, or the last cycle once all are done.
        is_in_submission_window: True between window start and due date.
        days_until_due: Days left until the current cycle's due date.
        days_until_cycle_starts: Set only when `now` precedes the cycle.
        all_cycles_completed: True once every submission window has closed.
    """

    current_cycle: Optional[MonthlyCycle] = None
    is_in_submission_window: bool = False
    days_until_due: Optional[int] = None
    days_until_cycle_starts: Optional[int] = None
    all_cycles_completed: bool = False


def _plural(n: int, word: str = "day") -> str:
    return f"{n} {word}" if n == 1 else f"{n} {word}s"


def current_cycle_info(cycles: Sequence[MonthlyCycle], now: DateLike) -> CurrentCycleInfo:
    """Locate `now` within a cycle sequence from `calculate_expected_months`."""
    today = to_date(now)
    if not cycles:
        return CurrentCycleInfo()

    for cycle in cycles:
        if cycle.period_start <= today <= cycle.submission_window_end:
            return CurrentCycleInfo(
                current_cycle=cycle,
                is_in_submission_window=today >= cycle.submission_window_start,
                days_until_due=max(0, days_between(today, cycle.report_due_date)),
            )
        if today < cycle.period_start:
            return CurrentCycleInfo(
                current_cycle=cycle,
                days_until_due=days_between(today, cycle.report_due_date),
                days_until_cycle_starts=days_between(today, cycle.period_start),
            )

    return CurrentCycleInfo(current_cycle=cycles[-1], all_cycles_completed=True)


def submission_status(
    cycle: MonthlyCycle, now: DateLike, is_completed: bool = False
) -> SubmissionStatus:
    """Classify a cycle's report for display; late submission stays allowed."""
    if is_completed:
        return SubmissionStatus(SubmissionState.COMPLETED, "Completed", can_submit=False)

    today = to_date(now)
    window_start = cycle.submission_window_start
    window_end = cycle.submission_window_end

    if today < window_start:
        days_until = days_between(today, window_start)
        return SubmissionStatus(
            SubmissionState.NOT_YET_DUE,
            "In Progress",
            can_submit=False,
            sublabel=f"Month ends in {_plural(days_until)}",
        )
    if today <= window_end:
        days_left = days_between(today, window_end)
        return SubmissionStatus(
            SubmissionState.CAN_SUBMIT,
            "Submit Now",
            can_submit=True,
            sublabel=f"{_plural(days_left)} left",
        )

    days_overdue = days_between(window_end, today)
    return SubmissionStatus(
        SubmissionState.OVERDUE,
        "Overdue",
        can_submit=True,
        sublabel=f"{_plural(days_overdue)} overdue",
    )


def submission_lateness(
    cycle: MonthlyCycle,
    submitted_at: Optional[DateLike],
    now: DateLike,
) -> Lateness:
    """Lateness of a submission, or of a missing one as of `now`."""
    submitted = to_optional_date(submitted_at)
    reference = to_date(now) if submitted is None else submitted

    if reference > cycle.report_due_date:
        return Lateness(True, days_between(cycle.report_due_date, reference))
    return Lateness(False, 0)


def format_cycle_label(cycle: MonthlyCycle) -> str:
    """e.g. 'Cycle 1: Jan 15 - Feb 14, 2024'."""
    start: date = cycle.period_start
    end: date = cycle.period_end
    return (
        f"Cycle {cycle.cycle_index}: "
        f"{start:%b} {start.day} - {end:%b} {end.day}, {end.year}"
    )
