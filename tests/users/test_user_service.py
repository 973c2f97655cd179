from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pytest

from src.timekeeper.timekeeper.core.enums import Role
from src.timekeeper.timekeeper.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DuplicateUsername,
    InvalidRate,
    RecordNotFound,
    ValidationError,
)
from src.timekeeper.timekeeper.shifts.model import Shift
from src.timekeeper.timekeeper.users.model import User


def test_add_employee_hashes_password(container):
    user = container.users_repo.get_by_username("alice")
    assert user.role == Role.EMPLOYEE
    assert user.hourly_rate == Decimal("20")
    assert user.password_hash != "password1"

    session_user = container.auth_service.authenticate("alice", "password1")
    assert session_user.username == "alice"
    assert session_user.role == Role.EMPLOYEE


def test_wrong_password_raises(container):
    with pytest.raises(AuthenticationError):
        container.auth_service.authenticate("alice", "wrong")
    with pytest.raises(AuthenticationError):
        container.auth_service.authenticate("ghost", "password1")


def test_duplicate_username(container):
    with pytest.raises(DuplicateUsername):
        container.user_service.add_employee(current_role=Role.ADMIN, username="alice", password="x", hourly_rate=10)


@pytest.mark.parametrize("rate", [-5, "abc", None])
def test_add_employee_invalid_rate(container, rate):
    with pytest.raises(InvalidRate):
        container.user_service.add_employee(current_role=Role.ADMIN, username="bob", password="x", hourly_rate=rate)
    assert container.users_repo.get_by_username("bob") is None


def test_add_employee_requires_credentials(container):
    with pytest.raises(ValidationError):
        container.user_service.add_employee(current_role=Role.ADMIN, username="", password="x", hourly_rate=10)
    with pytest.raises(ValidationError):
        container.user_service.add_employee(current_role=Role.ADMIN, username="bob", password="", hourly_rate=10)


def test_only_admin_manages_employees(container):
    with pytest.raises(AuthorizationError):
        container.user_service.add_employee(current_role=Role.EMPLOYEE, username="bob", password="x", hourly_rate=10)
    with pytest.raises(AuthorizationError):
        container.user_service.delete_employee(current_role=Role.EMPLOYEE, username="alice")


def test_get_all_employees_excludes_admins(container):
    container.user_service.add_employee(current_role=Role.ADMIN, username="bob", password="x", hourly_rate=22)
    container.users_repo.save(
        User(
            username="root", role=Role.ADMIN, hourly_rate=Decimal("0"), password_hash="h"
        )
    )

    names = [u.username for u in container.user_service.get_all_employees()]
    assert names == ["alice", "bob"]


def test_update_rate_of_missing_user(container):
    with pytest.raises(RecordNotFound):
        container.user_service.update_hourly_rate(current_role=Role.ADMIN, username="ghost", hourly_rate=10)


def test_delete_employee_removes_shifts(container):
    container.user_service.add_employee(current_role=Role.ADMIN, username="bob", password="x", hourly_rate=22)
    for d in (20, 21):
        container.shifts_repo.save(Shift(username="alice", work_date=date(2025, 1, d), time_in=datetime(2025, 1, d, 9)))
    container.shifts_repo.save(Shift(username="bob", work_date=date(2025, 1, 20), time_in=datetime(2025, 1, 20, 9)))

    removed = container.user_service.delete_employee(current_role=Role.ADMIN, username="alice")

    assert removed == 2
    assert container.users_repo.get_by_username("alice") is None
    assert container.shift_service.get_shifts_for_user("alice") == []
    assert len(container.shift_service.get_shifts_for_user("bob")) == 1


def test_cannot_delete_admin_or_unknown(container):
    container.users_repo.save(
        User(
            username="root", role=Role.ADMIN, hourly_rate=Decimal("0"), password_hash="h"
        )
    )
    with pytest.raises(ValidationError):
        container.user_service.delete_employee(current_role=Role.ADMIN, username="root")
    with pytest.raises(RecordNotFound):
        container.user_service.delete_employee(current_role=Role.ADMIN, username="ghost")
