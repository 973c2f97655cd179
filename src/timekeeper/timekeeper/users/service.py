from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_non_empty, require_rate
from ..core.enums import Role
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DuplicateUsername,
    RecordNotFound,
    ValidationError,
)
from ..shifts.repository import ShiftRepository
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    username: str
    role: Role


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, username: str, password: str) -> SessionUser:
        user = self._users.get_by_username((username or "").strip())
        if not user:
            raise AuthenticationError("Invalid username or password.")

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except Exception:
            # e.g. placeholder hashes or corrupted values
            ok = False

        if not ok:
            raise AuthenticationError("Invalid username or password.")

        return SessionUser(username=user.username, role=user.role)


class UserService:
    """Use case: manage employees (admin)."""

    def __init__(self, users: UserRepository, shifts: ShiftRepository):
        self._users = users
        self._shifts = shifts

    @staticmethod
    def _require_admin(current_role: Role) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission")

    def get_user(self, username: str) -> User:
        user = self._users.get_by_username(username)
        if not user:
            raise RecordNotFound("Employee not found.")
        return user

    def get_all_employees(self) -> Sequence[User]:
        return self._users.list_by_role(Role.EMPLOYEE)

    def add_employee(self, *, current_role: Role, username: str, password: str, hourly_rate) -> User:
        self._require_admin(current_role)

        username = require_non_empty(username, "Username")
        if not password:
            raise ValidationError("Please enter a username and password.")
        rate = require_rate(hourly_rate)

        if self._users.get_by_username(username):
            raise DuplicateUsername("Username already exists.")

        user = User(
            username=username,
            role=Role.EMPLOYEE,
            hourly_rate=rate,
            password_hash=generate_password_hash(password),
        )
        self._users.save(user)
        logger.info("Employee %s added (rate=%s)", username, rate)
        return user

    def update_hourly_rate(self, *, current_role: Role, username: str, hourly_rate) -> Decimal:
        self._require_admin(current_role)

        rate = require_rate(hourly_rate)
        self._users.update_hourly_rate(username, rate)
        logger.info("Hourly rate of %s set to %s", username, rate)
        return rate

    def delete_employee(self, *, current_role: Role, username: str) -> int:
        """Delete the user and every shift they own; returns removed shift count."""
        self._require_admin(current_role)

        user = self.get_user(username)
        if user.role == Role.ADMIN:
            raise ValidationError("Cannot delete an admin account.")

        self._users.delete(username)
        removed = self._shifts.delete_for_user(username)
        logger.info("Employee %s deleted with %d shift(s)", username, removed)
        return removed
