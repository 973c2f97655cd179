from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Plain data object; storage mapping lives in the repository.
    """

    username: str
    role: Role
    hourly_rate: Decimal
    password_hash: str

    def to_public_dict(self) -> dict:
        return {
            "username": self.username,
            "role": self.role.value,
            "hourly_rate": str(self.hourly_rate),
        }
