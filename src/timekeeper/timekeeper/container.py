from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, Optional

from .common.datetime_utils import now_local
from .database.connection import DatabaseConnection, DBConfig
from .database.document_store import DocumentStore
from .database.memory_store import InMemoryDocumentStore
from .database.mysql_document_store import MySQLDocumentStore
from .payroll.service import PayrollReportService
from .punches.service import PunchService
from .settings.repository import DocumentSettingsRepository
from .settings.service import SettingsService
from .shifts.document_shift_repository import DocumentShiftRepository
from .shifts.service import ShiftService
from .users.document_user_repository import DocumentUserRepository
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    store: DocumentStore

    users_repo: DocumentUserRepository
    shifts_repo: DocumentShiftRepository
    settings_repo: DocumentSettingsRepository

    auth_service: AuthService
    user_service: UserService
    shift_service: ShiftService
    punch_service: PunchService
    settings_service: SettingsService
    payroll_report_service: PayrollReportService


def build_store(backend: str, *, db_config: Optional[dict] = None) -> DocumentStore:
    """Select the store implementation once, at startup."""
    backend = (backend or "memory").lower()
    if backend == "memory":
        return InMemoryDocumentStore()
    if backend == "mysql":
        if not db_config:
            raise ValueError("DB_CONFIG is required for the mysql document store")
        return MySQLDocumentStore(DatabaseConnection.get_instance(DBConfig.from_dict(db_config)))
    raise ValueError(f"Unknown DOCUMENT_STORE: {backend!r}")


def build_container(
    *,
    store: DocumentStore,
    default_anchor: Optional[date] = None,
    clock: Callable[[], datetime] = now_local,
) -> Container:
    users_repo = DocumentUserRepository(store)
    shifts_repo = DocumentShiftRepository(store)
    settings_repo = DocumentSettingsRepository(store)

    auth_service = AuthService(users_repo)
    user_service = UserService(users_repo, shifts_repo)
    shift_service = ShiftService(shifts_repo)
    punch_service = PunchService(shifts_repo, clock=clock)
    settings_service = SettingsService(settings_repo, default_anchor=default_anchor, clock=clock)
    payroll_report_service = PayrollReportService(user_service, shifts_repo, settings_service, clock=clock)

    return Container(
        store=store,
        users_repo=users_repo,
        shifts_repo=shifts_repo,
        settings_repo=settings_repo,
        auth_service=auth_service,
        user_service=user_service,
        shift_service=shift_service,
        punch_service=punch_service,
        settings_service=settings_service,
        payroll_report_service=payroll_report_service,
    )
