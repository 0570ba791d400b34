"""
Tests for library defaults
"""
from datetime import date

import pytest

from internlib import config
from internlib.cycle import calculate_expected_months, count_due_as_of, report_due_date


class TestReportDueDay:

    def test_shipped_default(self):
        assert config.get_default_report_due_day() == config.REPORT_DUE_DAY == 5

    def test_changing_default_moves_every_due_date(self):
        config.set_default_report_due_day(10)

        assert report_due_date(date(2024, 6, 30)) == date(2024, 7, 10)
        cycles = calculate_expected_months(date(2024, 1, 15), date(2024, 3, 1))
        assert [c.report_due_date.day for c in cycles] == [10, 10]

    def test_explicit_due_day_wins(self):
        config.set_default_report_due_day(10)

        assert report_due_date(date(2024, 6, 30), due_day=5) == date(2024, 7, 5)

    def test_explicit_due_day_pins_cycles_across_default_changes(self):
        start, end = date(2024, 1, 15), date(2024, 7, 10)
        before = calculate_expected_months(start, end, due_day=5)

        config.set_default_report_due_day(20)
        after = calculate_expected_months(start, end, due_day=5)

        assert before == after
        assert count_due_as_of(start, end, date(2024, 8, 15), due_day=5) == 6

    def test_one_call_uses_one_due_day(self):
        config.set_default_report_due_day(12)

        cycles = calculate_expected_months(date(2024, 1, 15), date(2024, 12, 31))

        assert {c.report_due_date.day for c in cycles} == {12}

    @pytest.mark.parametrize("day", [0, 29, 31, "5", True, 5.0])
    def test_rejects_invalid_values(self, day):
        with pytest.raises(ValueError):
            config.set_default_report_due_day(day)
        assert config.get_default_report_due_day() == 5

    def test_reset(self):
        config.set_default_report_due_day(20)
        config.reset_defaults()

        assert config.get_default_report_due_day() == 5
