from datetime import date, datetime

import pytest

from src.timekeeper.timekeeper.core.enums import PunchState
from src.timekeeper.timekeeper.core.exceptions import AlreadyPunchedIn, AlreadyPunchedOut, NotPunchedIn
from src.timekeeper.timekeeper.punches.state_machine import PunchStateMachine
from src.timekeeper.timekeeper.shifts.model import Shift

DAY = date(2025, 1, 20)


def test_states():
    m = PunchStateMachine()
    assert m.state_of(None) == PunchState.NO_SHIFT
    assert m.state_of(Shift(username="a", work_date=DAY)) == PunchState.NO_SHIFT
    assert m.state_of(Shift(username="a", work_date=DAY, time_in=datetime(2025, 1, 20, 9))) == PunchState.CLOCKED_IN
    assert (
        m.state_of(Shift(username="a", work_date=DAY, time_in=datetime(2025, 1, 20, 9), time_out=datetime(2025, 1, 20, 17)))
        == PunchState.CLOCKED_OUT
    )


def test_punch_in_truncates_to_minute_and_clears_adjustments():
    m = PunchStateMachine()
    existing = Shift(username="a", work_date=DAY, adj_time_in=datetime(2025, 1, 20, 8, 0))

    shift = m.punch_in(existing, username="a", work_date=DAY, now=datetime(2025, 1, 20, 9, 0, 42, 123))

    assert shift.time_in == datetime(2025, 1, 20, 9, 0)
    assert shift.time_out is None
    assert shift.adj_time_in is None
    assert shift.adj_time_out is None


def test_punch_in_when_already_in_raises():
    m = PunchStateMachine()
    shift = Shift(username="a", work_date=DAY, time_in=datetime(2025, 1, 20, 9))
    with pytest.raises(AlreadyPunchedIn):
        m.punch_in(shift, username="a", work_date=DAY, now=datetime(2025, 1, 20, 10))


def test_punch_out_without_punch_in_raises():
    m = PunchStateMachine()
    with pytest.raises(NotPunchedIn):
        m.punch_out(None, now=datetime(2025, 1, 20, 17))


def test_punch_out_twice_raises():
    m = PunchStateMachine()
    shift = Shift(username="a", work_date=DAY, time_in=datetime(2025, 1, 20, 9), time_out=datetime(2025, 1, 20, 17))
    with pytest.raises(AlreadyPunchedOut):
        m.punch_out(shift, now=datetime(2025, 1, 20, 18))
