from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Union

from ..core.constants import DATE_FORMAT, TIMESTAMP_FORMAT

_TIMESTAMP_FORMATS = (TIMESTAMP_FORMAT, "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M", "%Y-%m-%d %H:%M:%S")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_FORMAT).date()


def to_date_key(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def to_minute_stamp(value: datetime) -> datetime:
    """Truncate to minute precision."""
    return value.replace(second=0, microsecond=0)


def format_timestamp(value: Optional[datetime]) -> str:
    """Storage form of a timestamp; empty string means "not set"."""
    if value is None:
        return ""
    return value.strftime(TIMESTAMP_FORMAT)


def parse_timestamp(value: Union[datetime, str, None]) -> Optional[datetime]:
    """Parse a stored timestamp.

    Returns None for empty or unparseable values instead of raising, so a
    corrupted document never breaks a payroll view.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        return None

    v = value.strip()
    if not v:
        return None
    for fmt in _TIMESTAMP_FORMATS:
        try:
            return datetime.strptime(v, fmt)
        except ValueError:
            continue
    return None
