"""Pure time and money arithmetic shared by payroll views."""

from __future__ import annotations

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Tuple, Union

from .datetime_utils import parse_timestamp

CENT = Decimal("0.01")

Timestamp = Union[datetime, str, None]


def elapsed_hours(start: Timestamp, end: Timestamp) -> float:
    """Hours between two timestamps, rounded to the nearest whole minute.

    Returns 0 when either side is missing or unparseable, or when end
    precedes start.
    """
    start_dt = parse_timestamp(start)
    end_dt = parse_timestamp(end)
    if start_dt is None or end_dt is None:
        return 0.0

    seconds = (end_dt - start_dt).total_seconds()
    if seconds < 0:
        return 0.0
    minutes = int(Decimal(seconds / 60).quantize(Decimal(1), rounding=ROUND_HALF_UP))
    return minutes / 60


def effective_range(shift) -> Tuple[Optional[datetime], Optional[datetime]]:
    """(start, end) with manager adjustments taking precedence over punches."""
    start = shift.adj_time_in if shift.adj_time_in is not None else shift.time_in
    end = shift.adj_time_out if shift.adj_time_out is not None else shift.time_out
    return start, end


def round_cents(amount: Decimal) -> Decimal:
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def format_time(value: Timestamp) -> str:
    dt = parse_timestamp(value)
    return dt.strftime("%H:%M") if dt else ""


def format_hours(hours: float) -> str:
    return f"{hours:.2f}"


def format_money(amount: Decimal) -> str:
    return str(round_cents(amount))
