"""Punch-in / punch-out transitions for one user on one calendar day.

    NO_SHIFT --punch_in--> CLOCKED_IN --punch_out--> CLOCKED_OUT

A clocked-out shift is terminal for punching; only manager adjustments
change its effective hours afterwards.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import to_minute_stamp
from ..core.enums import PunchState
from ..core.exceptions import AlreadyPunchedIn, AlreadyPunchedOut, NotPunchedIn
from ..shifts.model import Shift


class PunchStateMachine:
    @staticmethod
    def state_of(shift: Optional[Shift]) -> PunchState:
        if shift is None or shift.time_in is None:
            return PunchState.NO_SHIFT
        if shift.time_out is None:
            return PunchState.CLOCKED_IN
        return PunchState.CLOCKED_OUT

    def can_punch_in(self, shift: Optional[Shift]) -> bool:
        return self.state_of(shift) == PunchState.NO_SHIFT

    def can_punch_out(self, shift: Optional[Shift]) -> bool:
        return self.state_of(shift) == PunchState.CLOCKED_IN

    def punch_in(self, shift: Optional[Shift], *, username: str, work_date: date, now: datetime) -> Shift:
        """Return the fresh record to store; punch-out and adjustments are cleared."""
        if not self.can_punch_in(shift):
            raise AlreadyPunchedIn("You have already punched in today.")

        return Shift(username=username, work_date=work_date, time_in=to_minute_stamp(now))

    def punch_out(self, shift: Optional[Shift], *, now: datetime) -> datetime:
        """Return the punch-out timestamp to record."""
        state = self.state_of(shift)
        if state == PunchState.NO_SHIFT:
            raise NotPunchedIn("You have not punched in yet today.")
        if state == PunchState.CLOCKED_OUT:
            raise AlreadyPunchedOut("You have already punched out today.")

        return to_minute_stamp(now)
