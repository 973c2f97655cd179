from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from ..common.time_arithmetic import format_hours, format_money, format_time
from .period import Period


@dataclass(frozen=True)
class PayrollRow:
    """Read-model for one shift in a payroll table."""

    username: str
    work_date: date
    time_in: Optional[datetime]
    time_out: Optional[datetime]
    adj_time_in: Optional[datetime]
    adj_time_out: Optional[datetime]
    hours: float
    pay: Decimal
    # False when an effective endpoint is missing: listed but not totalled.
    counted: bool

    def to_dict(self) -> dict:
        return {
            "date": self.work_date.strftime("%Y-%m-%d"),
            "day": self.work_date.strftime("%a"),
            "time_in": format_time(self.time_in),
            "adj_time_in": format_time(self.adj_time_in),
            "time_out": format_time(self.time_out),
            "adj_time_out": format_time(self.adj_time_out),
            "hours": format_hours(self.hours),
            "pay": format_money(self.pay),
            "counted": self.counted,
        }


@dataclass(frozen=True)
class PayrollTotals:
    hours: float = 0.0
    pay: Decimal = Decimal("0.00")

    def to_dict(self) -> dict:
        return {"hours": format_hours(self.hours), "pay": format_money(self.pay)}


@dataclass(frozen=True)
class PeriodReport:
    username: str
    hourly_rate: Decimal
    period: Period
    rows: List[PayrollRow] = field(default_factory=list)
    totals: PayrollTotals = field(default_factory=PayrollTotals)
    has_previous: bool = False
    has_next: bool = False

    def to_dict(self) -> dict:
        return {
            "username": self.username,
            "hourly_rate": str(self.hourly_rate),
            "period": {
                "index": self.period.index,
                "start": self.period.start.strftime("%Y-%m-%d"),
                "end": self.period.end.strftime("%Y-%m-%d"),
            },
            "rows": [r.to_dict() for r in self.rows],
            "totals": self.totals.to_dict(),
            "has_previous": self.has_previous,
            "has_next": self.has_next,
        }
