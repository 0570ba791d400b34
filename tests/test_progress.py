"""
Tests for expected-count recalculation and progress rates
"""
from datetime import date

import pytest

from internlib.progress import (
    decrement_counter,
    progress_status,
    recalculate_expected_counts,
    resolve_period,
)
from internlib.utils.date import InvalidDateError


class TestResolvePeriod:

    def test_prefers_start_and_end_dates(self):
        assert resolve_period(
            date(2024, 1, 15), date(2024, 7, 10), date(2024, 1, 20), date(2024, 7, 20)
        ) == (date(2024, 1, 15), date(2024, 7, 10))

    def test_falls_back_to_joining_and_completion(self):
        assert resolve_period(None, None, "2024-01-20", "2024-07-20") == (
            date(2024, 1, 20),
            date(2024, 7, 20),
        )

    def test_all_missing(self):
        assert resolve_period(None, None) == (None, None)


class TestRecalculateExpectedCounts:

    def test_valid_period(self):
        result = recalculate_expected_counts(date(2024, 1, 15), date(2024, 7, 10))

        assert result.success is True
        assert result.total_expected == 6
        assert result.reason is None

    def test_uses_fallback_dates(self):
        result = recalculate_expected_counts(None, None, date(2024, 1, 15), date(2024, 7, 10))

        assert result.total_expected == 6

    def test_missing_dates_set_zero(self):
        result = recalculate_expected_counts(date(2024, 1, 15), None)

        assert result.success is True
        assert result.total_expected == 0

    def test_end_before_start_fails(self):
        result = recalculate_expected_counts(date(2024, 5, 1), date(2024, 4, 1))

        assert result.success is False
        assert result.total_expected == 0
        assert result.reason == "End date before start date"

    def test_unparseable_dates_raise(self):
        with pytest.raises(InvalidDateError):
            recalculate_expected_counts("15/01/2024", date(2024, 7, 10))


class TestProgressStatus:

    def test_completion_rates(self):
        status = progress_status(6, 4, 3, 1)

        assert status.report_completion_rate == pytest.approx(50.0)
        assert status.visit_completion_rate == pytest.approx(25.0)

    def test_nothing_expected(self):
        status = progress_status(0, 0, 2, 0)

        assert status.report_completion_rate == 0.0
        assert status.visit_completion_rate == 0.0


class TestCounters:

    def test_decrement(self):
        assert decrement_counter(3) == 2

    def test_decrement_never_goes_negative(self):
        assert decrement_counter(0) == 0
