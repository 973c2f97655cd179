from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional, Sequence, Union

from ..common.datetime_utils import parse_timestamp
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ValidationError
from .model import Shift
from .repository import ShiftRepository

logger = logging.getLogger(__name__)


class ShiftService:
    """Use case: read shifts and apply manager adjustments (admin)."""

    def __init__(self, shifts: ShiftRepository):
        self._shifts = shifts

    def get_shifts_for_user(self, username: str) -> Sequence[Shift]:
        return self._shifts.list_for_user(username)

    @staticmethod
    def _parse_adjustment(value: Union[datetime, str, None], work_date: date) -> Optional[datetime]:
        if value is None or isinstance(value, datetime):
            return value
        if not isinstance(value, str):
            raise ValidationError("Invalid time (expected HH:MM or YYYY-MM-DDTHH:MM)")

        v = value.strip()
        if not v:
            return None
        try:
            t = datetime.strptime(v, "%H:%M").time()
            return datetime.combine(work_date, t)
        except ValueError:
            pass

        dt = parse_timestamp(v)
        if dt is None:
            raise ValidationError("Invalid time (expected HH:MM or YYYY-MM-DDTHH:MM)")
        return dt.replace(second=0, microsecond=0)

    def adjust(
        self,
        *,
        current_role: Role,
        username: str,
        work_date: date,
        adj_time_in: Union[datetime, str, None],
        adj_time_out: Union[datetime, str, None],
    ) -> None:
        """Set or clear both manager overrides of one shift.

        Raises RecordNotFound when the shift does not exist.
        """
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission")

        new_in = self._parse_adjustment(adj_time_in, work_date)
        new_out = self._parse_adjustment(adj_time_out, work_date)

        self._shifts.set_adjustments(username, work_date, adj_time_in=new_in, adj_time_out=new_out)
        logger.info("Adjusted shift %s %s: in=%s out=%s", username, work_date, new_in, new_out)
