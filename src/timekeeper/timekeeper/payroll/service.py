from __future__ import annotations

from datetime import date, datetime
from typing import Callable, Optional

from ..common.datetime_utils import now_local
from ..settings.service import SettingsService
from ..shifts.repository import ShiftRepository
from ..users.service import UserService
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PeriodReport
from .period import PayPeriodCalculator


class PayrollReportService:
    """Builds the per-period payroll table for one employee.

    The anchor is read on every call, so an admin change applies to all
    periods immediately.
    """

    def __init__(
        self,
        users: UserService,
        shifts: ShiftRepository,
        settings: SettingsService,
        *,
        calculator: Optional[PayrollCalculator] = None,
        clock: Callable[[], datetime] = now_local,
    ):
        self._users = users
        self._shifts = shifts
        self._settings = settings
        self._calculator = calculator or StandardPayrollCalculator()
        self._clock = clock

    def period_calculator(self, *, anchor: Optional[date] = None) -> PayPeriodCalculator:
        return PayPeriodCalculator(anchor or self._settings.get_pay_period_start())

    def build_period_report(
        self,
        username: str,
        *,
        index: Optional[int] = None,
        today: Optional[date] = None,
    ) -> PeriodReport:
        user = self._users.get_user(username)
        periods = self.period_calculator()
        if index is None:
            index = periods.period_index_of(today or self._clock().date())

        shifts = self._shifts.list_for_user(username)
        rows = [self._calculator.compute_row(s, user.hourly_rate) for s in periods.filter_by_period(shifts, index)]

        return PeriodReport(
            username=user.username,
            hourly_rate=user.hourly_rate,
            period=periods.period_bounds(index),
            rows=rows,
            totals=self._calculator.compute_totals(rows),
            has_previous=periods.has_previous_period(shifts, index),
            has_next=periods.has_next_period(shifts, index),
        )
