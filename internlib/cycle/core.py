"""
Core data structures for monthly compliance cycles.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from internlib.utils.date import first_of_next_month


class Obligation(Enum):
    """What is owed once per cycle."""

    REPORT = "REPORT"
    VISIT = "VISIT"


@dataclass(frozen=True)
class MonthlyCycle:
    """One monthly reporting period within an internship."""

    cycle_index: int  # 1-based
    period_start: date
    period_end: date
    report_due_date: date
    is_final_cycle: bool = False

    @property
    def is_first_cycle(self) -> bool:
        return self.cycle_index == 1

    @property
    def days_in_cycle(self) -> int:
        """Number of calendar days covered, both ends inclusive."""
        return (self.period_end - self.period_start).days + 1

    @property
    def submission_window_start(self) -> date:
        """Submissions open on the first day of the month after the period."""
        return first_of_next_month(self.period_end)

    @property
    def submission_window_end(self) -> date:
        return self.report_due_date

    def due_date_for(self, obligation: Obligation) -> date:
        """Reports and visits share the same due date."""
        if obligation not in (Obligation.REPORT, Obligation.VISIT):
            raise ValueError(f"Unknown obligation: {obligation}")
        return self.report_due_date
