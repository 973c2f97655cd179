from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import format_timestamp, parse_iso_date, parse_timestamp, to_date_key
from ..core.constants import SHIFTS_COLLECTION
from ..database.document_store import Document, DocumentStore
from .model import Shift, shift_doc_id
from .repository import ShiftRepository


def shift_from_document(doc: Document) -> Shift:
    return Shift(
        username=doc["username"],
        work_date=parse_iso_date(doc["date"]),
        time_in=parse_timestamp(doc.get("timeIn")),
        time_out=parse_timestamp(doc.get("timeOut")),
        adj_time_in=parse_timestamp(doc.get("adjTimeIn")),
        adj_time_out=parse_timestamp(doc.get("adjTimeOut")),
    )


def shift_to_document(shift: Shift) -> Document:
    return {
        "username": shift.username,
        "date": to_date_key(shift.work_date),
        "timeIn": format_timestamp(shift.time_in),
        "timeOut": format_timestamp(shift.time_out),
        "adjTimeIn": format_timestamp(shift.adj_time_in),
        "adjTimeOut": format_timestamp(shift.adj_time_out),
    }


class DocumentShiftRepository(ShiftRepository):
    """Shift store keyed by `{username}_{date}` in the `shifts` collection."""

    def __init__(self, store: DocumentStore):
        self._store = store

    def get_for_user_and_date(self, username: str, work_date: date) -> Optional[Shift]:
        doc = self._store.get(SHIFTS_COLLECTION, shift_doc_id(username, work_date))
        if not doc:
            return None
        return shift_from_document(doc)

    def list_for_user(self, username: str) -> Sequence[Shift]:
        rows = self._store.query_equal(SHIFTS_COLLECTION, "username", username)
        shifts = [shift_from_document(doc) for _, doc in rows]
        shifts.sort(key=lambda s: s.work_date)
        return shifts

    def save(self, shift: Shift) -> None:
        self._store.set(SHIFTS_COLLECTION, shift.doc_id, shift_to_document(shift))

    def set_time_out(self, username: str, work_date: date, time_out: datetime) -> None:
        self._store.update(
            SHIFTS_COLLECTION,
            shift_doc_id(username, work_date),
            {"timeOut": format_timestamp(time_out)},
        )

    def set_adjustments(
        self,
        username: str,
        work_date: date,
        *,
        adj_time_in: Optional[datetime],
        adj_time_out: Optional[datetime],
    ) -> None:
        self._store.update(
            SHIFTS_COLLECTION,
            shift_doc_id(username, work_date),
            {"adjTimeIn": format_timestamp(adj_time_in), "adjTimeOut": format_timestamp(adj_time_out)},
        )

    def delete_for_user(self, username: str) -> int:
        rows = self._store.query_equal(SHIFTS_COLLECTION, "username", username)
        for doc_id, _ in rows:
            self._store.delete(SHIFTS_COLLECTION, doc_id)
        return len(rows)
