"""Caller-side policies layered on top of the raw cycle counts."""

from __future__ import annotations


def apply_expected_floor(count: int, *, started: bool, minimum: int = 1) -> int:
    """Floor an expected count once the internship has started.

    Dashboards show at least `minimum` expected report from day one of the
    first month, before any due date has passed. An internship that has not
    started keeps its raw count.
    """
    if count < 0:
        raise ValueError("count must be non-negative")
    if minimum < 0:
        raise ValueError("minimum must be non-negative")
    if not started:
        return count
    return max(minimum, count)
