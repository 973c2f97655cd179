from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Iterable

from ...shifts.model import Shift
from ..model import PayrollRow, PayrollTotals


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def compute_row(self, shift: Shift, hourly_rate: Decimal) -> PayrollRow:
        raise NotImplementedError

    @abstractmethod
    def compute_totals(self, rows: Iterable[PayrollRow]) -> PayrollTotals:
        raise NotImplementedError
