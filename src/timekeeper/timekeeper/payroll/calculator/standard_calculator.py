from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from ...common.time_arithmetic import effective_range, elapsed_hours, round_cents
from ...shifts.model import Shift
from ..model import PayrollRow, PayrollTotals
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: effective (out - in) x rate, rounded to the cent per row.

    Totals add the already-rounded row amounts, so a period total can differ
    by a cent from rounding the unrounded sum.
    """

    def compute_row(self, shift: Shift, hourly_rate: Decimal) -> PayrollRow:
        start, end = effective_range(shift)
        counted = start is not None and end is not None

        hours = 0.0
        pay = Decimal("0.00")
        if counted:
            hours = elapsed_hours(start, end)
            pay = round_cents(Decimal(str(hours)) * Decimal(hourly_rate))

        return PayrollRow(
            username=shift.username,
            work_date=shift.work_date,
            time_in=shift.time_in,
            time_out=shift.time_out,
            adj_time_in=shift.adj_time_in,
            adj_time_out=shift.adj_time_out,
            hours=hours,
            pay=pay,
            counted=counted,
        )

    def compute_totals(self, rows: Iterable[PayrollRow]) -> PayrollTotals:
        total_hours = 0.0
        total_pay = Decimal("0.00")
        for r in rows:
            if not r.counted:
                continue
            total_hours += r.hours
            total_pay += r.pay
        return PayrollTotals(hours=total_hours, pay=total_pay)
