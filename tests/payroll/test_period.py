from datetime import date, timedelta

import pytest

from src.timekeeper.timekeeper.payroll.period import (
    PayPeriodCalculator,
    filter_by_period,
    period_bounds,
    period_index_of,
)
from src.timekeeper.timekeeper.shifts.model import Shift

ANCHOR = date(2025, 1, 1)


def _shift(day: date) -> Shift:
    return Shift(username="alice", work_date=day)


def test_index_and_bounds_example():
    assert period_index_of(date(2025, 1, 20), ANCHOR) == 1
    p = period_bounds(1, ANCHOR)
    assert (p.start, p.end) == (date(2025, 1, 15), date(2025, 1, 28))


def test_period_edges():
    assert period_index_of(date(2025, 1, 1), ANCHOR) == 0
    assert period_index_of(date(2025, 1, 14), ANCHOR) == 0
    assert period_index_of(date(2025, 1, 15), ANCHOR) == 1


def test_dates_before_anchor_have_negative_index():
    assert period_index_of(date(2024, 12, 31), ANCHOR) == -1
    assert period_index_of(date(2024, 12, 18), ANCHOR) == -1
    assert period_index_of(date(2024, 12, 17), ANCHOR) == -2
    p = period_bounds(-1, ANCHOR)
    assert (p.start, p.end) == (date(2024, 12, 18), date(2024, 12, 31))


@pytest.mark.parametrize("offset", range(-60, 61, 7))
def test_bounds_of_index_contain_date(offset):
    day = ANCHOR + timedelta(days=offset)
    assert period_bounds(period_index_of(day, ANCHOR), ANCHOR).contains(day)


def test_filter_keeps_order_and_bounds():
    shifts = [_shift(date(2025, 1, d)) for d in (10, 14, 15, 20, 28, 29)]
    result = filter_by_period(shifts, 1, ANCHOR)
    assert [s.work_date.day for s in result] == [15, 20, 28]


def test_navigation_uses_existing_data():
    calc = PayPeriodCalculator(ANCHOR)
    shifts = [_shift(date(2024, 12, 1)), _shift(date(2025, 3, 1))]

    # Period 1 itself is empty but both neighbours are reachable.
    assert calc.filter_by_period(shifts, 1) == []
    assert calc.has_previous_period(shifts, 1)
    assert calc.has_next_period(shifts, 1)

    last = calc.period_index_of(date(2025, 3, 1))
    assert not calc.has_next_period(shifts, last)
    first = calc.period_index_of(date(2024, 12, 1))
    assert not calc.has_previous_period(shifts, first)


def test_changing_anchor_moves_boundaries():
    day = date(2025, 1, 20)
    assert PayPeriodCalculator(date(2025, 1, 1)).period_of(day).start == date(2025, 1, 15)
    assert PayPeriodCalculator(date(2025, 1, 6)).period_of(day).start == date(2025, 1, 20)
