from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, Optional

from ..common.datetime_utils import now_local
from ..core.enums import PunchState
from ..shifts.model import Shift
from ..shifts.repository import ShiftRepository
from .state_machine import PunchStateMachine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TodayStatus:
    work_date: date
    state: PunchState
    can_punch_in: bool
    can_punch_out: bool
    shift: Optional[Shift] = None


class PunchService:
    """Use case: employee punches for the current device-local day.

    Read-decide-write without locking; acceptable for one human-paced actor.
    """

    def __init__(
        self,
        shifts: ShiftRepository,
        *,
        state_machine: Optional[PunchStateMachine] = None,
        clock: Callable[[], datetime] = now_local,
    ):
        self._shifts = shifts
        self._machine = state_machine or PunchStateMachine()
        self._clock = clock

    def today(self, username: str, *, now: Optional[datetime] = None) -> TodayStatus:
        now = now or self._clock()
        shift = self._shifts.get_for_user_and_date(username, now.date())
        return TodayStatus(
            work_date=now.date(),
            state=self._machine.state_of(shift),
            can_punch_in=self._machine.can_punch_in(shift),
            can_punch_out=self._machine.can_punch_out(shift),
            shift=shift,
        )

    def punch_in(self, username: str, *, now: Optional[datetime] = None) -> Shift:
        now = now or self._clock()
        today = now.date()

        existing = self._shifts.get_for_user_and_date(username, today)
        shift = self._machine.punch_in(existing, username=username, work_date=today, now=now)
        self._shifts.save(shift)
        logger.info("%s punched in at %s", username, shift.time_in)
        return shift

    def punch_out(self, username: str, *, now: Optional[datetime] = None) -> datetime:
        now = now or self._clock()
        today = now.date()

        existing = self._shifts.get_for_user_and_date(username, today)
        time_out = self._machine.punch_out(existing, now=now)
        self._shifts.set_time_out(username, today, time_out)
        logger.info("%s punched out at %s", username, time_out)
        return time_out
