from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation

from ..core.exceptions import InvalidRate, ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_rate(value) -> Decimal:
    """Validate an hourly rate: a finite, non-negative number."""
    if value is None or isinstance(value, bool):
        raise InvalidRate("Please enter a valid hourly rate.")
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidRate("Please enter a valid hourly rate.")

    try:
        rate = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise InvalidRate("Please enter a valid hourly rate.")

    if not rate.is_finite() or rate < 0:
        raise InvalidRate("Please enter a valid hourly rate.")
    return rate
