"""Institution-level aggregation of expected reports and visits."""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Optional

import pandas as pd

from internlib import config
from internlib.cycle import get_expected_reports_as_of_today, get_expected_visits_as_of_today
from internlib.utils.date import DateLike, InvalidDateError, to_date, to_optional_date

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("institution_id", "start_date", "end_date")
RESULT_COLUMNS = [
    "institution_id",
    "internships_in_training",
    "expected_reports",
    "expected_visits",
]


def expected_counts_frame(
    internships: pd.DataFrame,
    now: DateLike,
    default_duration_days: Optional[int] = None,
) -> pd.DataFrame:
    """
    Sum expected-as-of-now reports and visits per institution.

    Args:
        internships: One row per internship in training with at least
            `institution_id`, `start_date` and `end_date` columns.
        now: Evaluation date.
        default_duration_days: Assumed length, counted from the start date,
            of internships without an end date
            (None = `config.DEFAULT_DURATION_DAYS`).

    Returns:
        DataFrame with columns `institution_id`, `internships_in_training`,
        `expected_reports`, `expected_visits`, sorted by institution.
    """
    missing = [col for col in REQUIRED_COLUMNS if col not in internships.columns]
    if missing:
        raise ValueError(f"internships is missing columns: {missing}")

    today = to_date(now)
    if default_duration_days is None:
        default_duration_days = config.DEFAULT_DURATION_DAYS
    rows = []
    for record in internships.itertuples(index=False):
        try:
            start = to_date(record.start_date)
            end = to_optional_date(record.end_date)
        except InvalidDateError as exc:
            logger.warning(
                "Invalid dates for internship at institution %s: %s", record.institution_id, exc
            )
            continue
        if end is None:
            end = start + timedelta(days=default_duration_days)

        rows.append(
            {
                "institution_id": record.institution_id,
                "expected_reports": get_expected_reports_as_of_today(start, end, today),
                "expected_visits": get_expected_visits_as_of_today(start, end, today),
            }
        )

    if not rows:
        return pd.DataFrame(columns=RESULT_COLUMNS)

    per_internship = pd.DataFrame(rows)
    summary = (
        per_internship.groupby("institution_id", sort=True)
        .agg(
            internships_in_training=("expected_reports", "size"),
            expected_reports=("expected_reports", "sum"),
            expected_visits=("expected_visits", "sum"),
        )
        .reset_index()
    )
    logger.debug("Aggregated %s internships into %s institutions", len(rows), len(summary))
    return summary[RESULT_COLUMNS]
