"""Expected-vs-actual counters stored alongside each internship application."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple

from internlib.cycle import get_total_expected_count
from internlib.utils.date import DateLike, InvalidDateError, to_optional_date

logger = logging.getLogger(__name__)


@dataclass
class RecalculateResult:
    success: bool
    total_expected: int
    reason: Optional[str] = None


@dataclass
class ProgressStatus:
    total_expected_reports: int
    total_expected_visits: int
    submitted_reports_count: int
    completed_visits_count: int

    @property
    def report_completion_rate(self) -> float:
        """Percentage of expected reports submitted (0 when none expected)."""
        return _rate(self.submitted_reports_count, self.total_expected_reports)

    @property
    def visit_completion_rate(self) -> float:
        return _rate(self.completed_visits_count, self.total_expected_visits)


def _rate(done: int, expected: int) -> float:
    if expected <= 0:
        return 0.0
    return done / expected * 100.0


def resolve_period(
    start_date: Optional[DateLike],
    end_date: Optional[DateLike],
    joining_date: Optional[DateLike] = None,
    completion_date: Optional[DateLike] = None,
) -> Tuple[Optional[date], Optional[date]]:
    """Pick the internship period, falling back to joining/completion dates."""
    start = to_optional_date(start_date)
    if start is None:
        start = to_optional_date(joining_date)
    end = to_optional_date(end_date)
    if end is None:
        end = to_optional_date(completion_date)
    return start, end


def recalculate_expected_counts(
    start_date: Optional[DateLike],
    end_date: Optional[DateLike],
    joining_date: Optional[DateLike] = None,
    completion_date: Optional[DateLike] = None,
) -> RecalculateResult:
    """
    Recompute the total expected reports/visits after dates change.

    Only expected totals are produced; submitted and completed counters are
    owned by the caller and never touched here.
    """
    try:
        start, end = resolve_period(start_date, end_date, joining_date, completion_date)
    except InvalidDateError as exc:
        logger.error("Cannot recalculate expected counts: %s", exc)
        raise

    if start is None or end is None:
        logger.info("No valid dates, expected counts set to 0")
        return RecalculateResult(success=True, total_expected=0)

    if end < start:
        logger.warning("Invalid date range: end %s before start %s", end, start)
        return RecalculateResult(
            success=False, total_expected=0, reason="End date before start date"
        )

    total = get_total_expected_count(start, end)
    logger.info("Recalculated expected counts for %s..%s: %s", start, end, total)
    return RecalculateResult(success=True, total_expected=total)


def progress_status(
    total_expected_reports: int,
    total_expected_visits: int,
    submitted_reports_count: int,
    completed_visits_count: int,
) -> ProgressStatus:
    return ProgressStatus(
        total_expected_reports=total_expected_reports,
        total_expected_visits=total_expected_visits,
        submitted_reports_count=submitted_reports_count,
        completed_visits_count=completed_visits_count,
    )


def decrement_counter(value: int) -> int:
    """Decrement a submitted/completed counter, never below zero."""
    if value <= 0:
        logger.warning("Cannot decrement counter: already at %s", value)
        return 0
    return value - 1
