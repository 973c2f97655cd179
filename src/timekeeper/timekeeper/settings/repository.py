from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from ..common.datetime_utils import parse_iso_date, to_date_key
from ..core.constants import SETTINGS_COLLECTION, SETTINGS_DOC_ID
from ..database.document_store import DocumentStore


class SettingsRepository(Protocol):
    def get_pay_period_start(self) -> Optional[date]:
        raise NotImplementedError

    def set_pay_period_start(self, anchor: date) -> None:
        raise NotImplementedError


class DocumentSettingsRepository(SettingsRepository):
    """Single `settings/config` document holding the pay-period anchor."""

    def __init__(self, store: DocumentStore):
        self._store = store

    def get_pay_period_start(self) -> Optional[date]:
        doc = self._store.get(SETTINGS_COLLECTION, SETTINGS_DOC_ID)
        if not doc or not doc.get("payPeriodStart"):
            return None
        try:
            return parse_iso_date(doc["payPeriodStart"])
        except ValueError:
            return None

    def set_pay_period_start(self, anchor: date) -> None:
        self._store.set(SETTINGS_COLLECTION, SETTINGS_DOC_ID, {"payPeriodStart": to_date_key(anchor)})
