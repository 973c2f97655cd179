from __future__ import annotations

import logging
import re
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from pathlib import Path
from typing import Iterable

from werkzeug.security import generate_password_hash

from ..core.enums import Role
from ..settings.repository import DocumentSettingsRepository
from ..shifts.document_shift_repository import DocumentShiftRepository
from ..shifts.model import Shift
from ..users.document_user_repository import DocumentUserRepository
from ..users.model import User
from .connection import DatabaseConnection
from .document_store import DocumentStore
from .mysql_base import db_cursor

logger = logging.getLogger(__name__)


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _strip_comments(sql: str) -> str:
    return re.sub(r"(?m)^\s*--.*$", "", sql)


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for schema files (handles ';' inside quotes).
    buf: list[str] = []
    in_single = False
    in_double = False
    escape = False

    for ch in sql:
        if escape:
            buf.append(ch)
            escape = False
            continue

        if ch == "\\":
            buf.append(ch)
            escape = True
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
        elif ch == '"' and not in_single:
            in_double = not in_double
        elif ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


class _ServerOnly:
    """Connection factory adapter that connects without selecting a database."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def connect(self):
        return self._conn_factory.connect(with_database=False)


def ensure_database_exists(conn_factory: DatabaseConnection, database: str) -> None:
    with db_cursor(_ServerOnly(conn_factory), dictionary=False) as (_, cur):
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )


def apply_schema(conn_factory: DatabaseConnection, *, database: str, schema_path: str | Path) -> None:
    ensure_database_exists(conn_factory, database)

    sql = _strip_create_db_and_use(_strip_comments(Path(schema_path).read_text(encoding="utf-8")))
    with db_cursor(conn_factory, dictionary=False) as (_, cur):
        for stmt in _iter_sql_statements(sql):
            cur.execute(stmt)


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    with db_cursor(conn_factory, dictionary=False) as (_, cur):
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]


def seed_demo_data(store: DocumentStore, *, today: date | None = None) -> None:
    """Idempotent demo data: admin/admin, alice and bob, one finished shift."""
    today = today or datetime.now().date()
    users = DocumentUserRepository(store)
    shifts = DocumentShiftRepository(store)
    settings = DocumentSettingsRepository(store)

    if settings.get_pay_period_start() is None:
        settings.set_pay_period_start(today)

    demo_users = [
        ("admin", "admin", Role.ADMIN, Decimal("0")),
        ("alice", "password1", Role.EMPLOYEE, Decimal("20")),
        ("bob", "password2", Role.EMPLOYEE, Decimal("22")),
    ]
    for username, password, role, rate in demo_users:
        if users.get_by_username(username):
            continue
        users.save(
            User(
                username=username,
                role=role,
                hourly_rate=rate,
                password_hash=generate_password_hash(password),
            )
        )

    yesterday = today - timedelta(days=1)
    if shifts.get_for_user_and_date("alice", yesterday) is None:
        shifts.save(
            Shift(
                username="alice",
                work_date=yesterday,
                time_in=datetime.combine(yesterday, time(9, 0)),
                time_out=datetime.combine(yesterday, time(17, 0)),
            )
        )
    logger.info("Demo data ready")
