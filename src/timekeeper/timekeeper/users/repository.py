from __future__ import annotations

from decimal import Decimal
from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Note (DIP): services depend on this interface, not on a concrete store.
    """

    def get_by_username(self, username: str) -> Optional[User]:
        raise NotImplementedError

    def list_by_role(self, role: Role) -> Sequence[User]:
        raise NotImplementedError

    def save(self, user: User) -> None:
        raise NotImplementedError

    def update_hourly_rate(self, username: str, hourly_rate: Decimal) -> None:
        raise NotImplementedError

    def delete(self, username: str) -> None:
        raise NotImplementedError
