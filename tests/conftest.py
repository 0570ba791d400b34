"""
internlib - Test Configuration and Fixtures
"""
from datetime import date

import pytest

from internlib import config
from internlib.cycle import calculate_expected_months


@pytest.fixture(autouse=True)
def restore_config():
    """Every test starts from the shipped defaults"""
    config.reset_defaults()
    yield
    config.reset_defaults()


@pytest.fixture
def three_cycle_internship():
    """Jan 15 - Apr 10, 2024: two full cycles and a truncated third"""
    return calculate_expected_months(date(2024, 1, 15), date(2024, 4, 10))


@pytest.fixture
def first_cycle(three_cycle_internship):
    """Jan 15 - Feb 14, 2024, due Mar 5"""
    return three_cycle_internship[0]
