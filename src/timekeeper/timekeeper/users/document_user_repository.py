from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Optional, Sequence

from ..core.constants import USERS_COLLECTION
from ..core.enums import Role
from ..database.document_store import Document, DocumentStore
from .model import User
from .repository import UserRepository


def _to_decimal(value) -> Decimal:
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError):
        return Decimal("0")


def user_from_document(doc: Document) -> User:
    return User(
        username=doc["username"],
        role=Role(doc.get("role", Role.EMPLOYEE.value)),
        hourly_rate=_to_decimal(doc.get("hourlyRate", 0)),
        password_hash=doc.get("passwordHash", ""),
    )


def user_to_document(user: User) -> Document:
    return {
        "username": user.username,
        "role": user.role.value,
        "hourlyRate": float(user.hourly_rate),
        "passwordHash": user.password_hash,
    }


class DocumentUserRepository(UserRepository):
    def __init__(self, store: DocumentStore):
        self._store = store

    def get_by_username(self, username: str) -> Optional[User]:
        doc = self._store.get(USERS_COLLECTION, username)
        if not doc:
            return None
        return user_from_document(doc)

    def list_by_role(self, role: Role) -> Sequence[User]:
        rows = self._store.query_equal(USERS_COLLECTION, "role", role.value)
        users = [user_from_document(doc) for _, doc in rows]
        users.sort(key=lambda u: u.username)
        return users

    def save(self, user: User) -> None:
        self._store.set(USERS_COLLECTION, user.username, user_to_document(user))

    def update_hourly_rate(self, username: str, hourly_rate: Decimal) -> None:
        self._store.update(USERS_COLLECTION, username, {"hourlyRate": float(hourly_rate)})

    def delete(self, username: str) -> None:
        self._store.delete(USERS_COLLECTION, username)
