from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


def shift_doc_id(username: str, work_date: date) -> str:
    return f"{username}_{work_date.strftime('%Y-%m-%d')}"


@dataclass(frozen=True)
class Shift:
    """Domain entity: one user's working day.

    `adj_time_in`/`adj_time_out` are manager overrides; when set they win over
    the punched values.
    """

    username: str
    work_date: date
    time_in: Optional[datetime] = None
    time_out: Optional[datetime] = None
    adj_time_in: Optional[datetime] = None
    adj_time_out: Optional[datetime] = None

    @property
    def doc_id(self) -> str:
        return shift_doc_id(self.username, self.work_date)
