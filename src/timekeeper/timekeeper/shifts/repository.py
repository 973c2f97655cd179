from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from .model import Shift


class ShiftRepository(Protocol):
    def get_for_user_and_date(self, username: str, work_date: date) -> Optional[Shift]:
        raise NotImplementedError

    def list_for_user(self, username: str) -> Sequence[Shift]:
        """All shifts of a user, ascending by date."""

        raise NotImplementedError

    def save(self, shift: Shift) -> None:
        """Create or replace the (username, date) record."""

        raise NotImplementedError

    def set_time_out(self, username: str, work_date: date, time_out: datetime) -> None:
        raise NotImplementedError

    def set_adjustments(
        self,
        username: str,
        work_date: date,
        *,
        adj_time_in: Optional[datetime],
        adj_time_out: Optional[datetime],
    ) -> None:
        raise NotImplementedError

    def delete_for_user(self, username: str) -> int:
        raise NotImplementedError
