"""
Library-wide defaults for compliance-cycle calculations.

Values are plain module globals so callers can read them directly; the
setters validate before replacing a default.
"""

import logging

logger = logging.getLogger(__name__)

# Reports for a cycle are due on this day of the month after the cycle ends
REPORT_DUE_DAY = 5

# Soft limit (~2 years). Longer internships are still generated in full.
MAX_CYCLES = 24

# Assumed length of an internship with no end date, for dashboard totals
DEFAULT_DURATION_DAYS = 180

_DEFAULT_REPORT_DUE_DAY = REPORT_DUE_DAY


def get_default_report_due_day() -> int:
    """Day of month used when no explicit due day is passed."""
    return _DEFAULT_REPORT_DUE_DAY


def set_default_report_due_day(day: int) -> None:
    """Set the due day used by `report_due_date` when none is given."""
    global _DEFAULT_REPORT_DUE_DAY
    if isinstance(day, bool) or not isinstance(day, int):
        raise ValueError(f"Report due day must be an integer, got {day!r}")
    if not 1 <= day <= 28:
        # 28 keeps the due day valid in every month
        raise ValueError(f"Report due day must be between 1 and 28, got {day}")
    logger.debug("Default report due day changed: %s -> %s", _DEFAULT_REPORT_DUE_DAY, day)
    _DEFAULT_REPORT_DUE_DAY = day


def reset_defaults() -> None:
    """Restore the shipped defaults."""
    global _DEFAULT_REPORT_DUE_DAY
    _DEFAULT_REPORT_DUE_DAY = REPORT_DUE_DAY
