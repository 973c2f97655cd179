from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pytest
from werkzeug.security import generate_password_hash

from src.timekeeper.timekeeper.container import build_container
from src.timekeeper.timekeeper.core.enums import Role
from src.timekeeper.timekeeper.database.memory_store import InMemoryDocumentStore
from src.timekeeper.timekeeper.main import create_app
from src.timekeeper.timekeeper.users.document_user_repository import DocumentUserRepository
from src.timekeeper.timekeeper.users.model import User

ANCHOR = date(2025, 1, 1)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 1, 20, 9, 0, 0)


@pytest.fixture
def store() -> InMemoryDocumentStore:
    return InMemoryDocumentStore()


@pytest.fixture
def container(store, fixed_now):
    c = build_container(store=store, default_anchor=ANCHOR, clock=lambda: fixed_now)
    c.user_service.add_employee(current_role=Role.ADMIN, username="alice", password="password1", hourly_rate="20")
    return c


@pytest.fixture
def app(store, fixed_now):
    users = DocumentUserRepository(store)
    users.save(User(username="admin", role=Role.ADMIN, hourly_rate=Decimal("0"), password_hash=generate_password_hash("admin")))
    users.save(
        User(
            username="alice",
            role=Role.EMPLOYEE,
            hourly_rate=Decimal("20"),
            password_hash=generate_password_hash("password1"),
        )
    )
    # config.testing pins the default anchor to 2025-01-01
    return create_app("config.testing", store=store, clock=lambda: fixed_now)


def _login(client, username: str, password: str):
    resp = client.post("/api/login", json={"username": username, "password": password})
    assert resp.status_code == 200
    return client


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(app):
    return _login(app.test_client(), "admin", "admin")


@pytest.fixture
def employee_client(app):
    return _login(app.test_client(), "alice", "password1")
