"""Expected-count bookkeeping and dashboard aggregation."""

from .counters import (
    ProgressStatus,
    RecalculateResult,
    decrement_counter,
    progress_status,
    recalculate_expected_counts,
    resolve_period,
)
from .dashboard import expected_counts_frame

__all__ = [
    "ProgressStatus",
    "RecalculateResult",
    "decrement_counter",
    "progress_status",
    "recalculate_expected_counts",
    "resolve_period",
    "expected_counts_frame",
]
