"""Bi-weekly pay period arithmetic relative to an anchor date.

Period k covers [anchor + 14k, anchor + 14k + 13]; k may be negative.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import List, Sequence

from ..core.constants import PAY_PERIOD_DAYS
from ..shifts.model import Shift


@dataclass(frozen=True)
class Period:
    index: int
    start: date
    end: date

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end


class PayPeriodCalculator:
    def __init__(self, anchor: date, *, length_days: int = PAY_PERIOD_DAYS):
        self.anchor = anchor
        self.length_days = int(length_days)

    def period_index_of(self, day: date) -> int:
        # Floor division keeps dates before the anchor in negative periods.
        return (day - self.anchor).days // self.length_days

    def period_bounds(self, index: int) -> Period:
        start = self.anchor + timedelta(days=self.length_days * index)
        return Period(index=index, start=start, end=start + timedelta(days=self.length_days - 1))

    def period_of(self, day: date) -> Period:
        return self.period_bounds(self.period_index_of(day))

    def filter_by_period(self, shifts: Sequence[Shift], index: int) -> List[Shift]:
        period = self.period_bounds(index)
        return [s for s in shifts if period.contains(s.work_date)]

    def has_next_period(self, shifts: Sequence[Shift], index: int) -> bool:
        end = self.period_bounds(index).end
        return any(s.work_date > end for s in shifts)

    def has_previous_period(self, shifts: Sequence[Shift], index: int) -> bool:
        start = self.period_bounds(index).start
        return any(s.work_date < start for s in shifts)


def period_index_of(day: date, anchor: date) -> int:
    return PayPeriodCalculator(anchor).period_index_of(day)


def period_bounds(index: int, anchor: date) -> Period:
    return PayPeriodCalculator(anchor).period_bounds(index)


def filter_by_period(shifts: Sequence[Shift], index: int, anchor: date) -> List[Shift]:
    return PayPeriodCalculator(anchor).filter_by_period(shifts, index)
