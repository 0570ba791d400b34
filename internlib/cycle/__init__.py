"""Monthly compliance-cycle calculator public API."""

from .core import MonthlyCycle, Obligation
from .due_dates import report_due_date
from .generator import (
    calculate_expected_months,
    count_due_as_of,
    get_expected_reports_as_of_today,
    get_expected_visits_as_of_today,
    get_total_expected_count,
)
from .policy import apply_expected_floor
from .status import (
    CurrentCycleInfo,
    Lateness,
    SubmissionState,
    SubmissionStatus,
    current_cycle_info,
    format_cycle_label,
    submission_lateness,
    submission_status,
)

__all__ = [
    "MonthlyCycle",
    "Obligation",
    "report_due_date",
    "calculate_expected_months",
    "get_total_expected_count",
    "count_due_as_of",
    "get_expected_reports_as_of_today",
    "get_expected_visits_as_of_today",
    "apply_expected_floor",
    "CurrentCycleInfo",
    "Lateness",
    "SubmissionState",
    "SubmissionStatus",
    "current_cycle_info",
    "format_cycle_label",
    "submission_lateness",
    "submission_status",
]
