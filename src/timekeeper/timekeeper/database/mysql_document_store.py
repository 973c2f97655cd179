from __future__ import annotations

import json
import re
from typing import Any, List, Optional, Tuple

from ..core.exceptions import RecordNotFound
from .connection import DatabaseConnection
from .document_store import Document, DocumentStore
from .mysql_base import db_cursor, fetchall, fetchone

_FIELD_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def _load(body: Any) -> Document:
    # mysql-connector returns JSON columns as str (or bytes with some drivers).
    if isinstance(body, (bytes, bytearray)):
        body = body.decode("utf-8")
    if isinstance(body, str):
        return json.loads(body)
    return dict(body or {})


class MySQLDocumentStore(DocumentStore):
    """Document store backed by a single MySQL `documents` table (JSON body)."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, collection: str, doc_id: str) -> Optional[Document]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT body
                FROM documents
                WHERE collection=%s AND doc_id=%s
                """,
                (collection, doc_id),
            )
            r = fetchone(cur)
            if not r:
                return None
            return _load(r["body"])

    def set(self, collection: str, doc_id: str, record: Document) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO documents(collection, doc_id, body)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE body=VALUES(body)
                """,
                (collection, doc_id, json.dumps(record)),
            )

    def update(self, collection: str, doc_id: str, partial: Document) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT body
                FROM documents
                WHERE collection=%s AND doc_id=%s
                FOR UPDATE
                """,
                (collection, doc_id),
            )
            r = fetchone(cur)
            if not r:
                raise RecordNotFound(f"Document {collection}/{doc_id} does not exist")

            merged = {**_load(r["body"]), **partial}
            cur.execute(
                "UPDATE documents SET body=%s WHERE collection=%s AND doc_id=%s",
                (json.dumps(merged), collection, doc_id),
            )

    def delete(self, collection: str, doc_id: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM documents WHERE collection=%s AND doc_id=%s", (collection, doc_id))

    def query_equal(self, collection: str, field: str, value: Any) -> List[Tuple[str, Document]]:
        if not _FIELD_RE.match(field):
            raise ValueError(f"Unsupported field name: {field!r}")

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT doc_id, body
                FROM documents
                WHERE collection=%s AND JSON_EXTRACT(body, %s) = CAST(%s AS JSON)
                ORDER BY doc_id
                """,
                (collection, f"$.{field}", json.dumps(value)),
            )
            return [(r["doc_id"], _load(r["body"])) for r in fetchall(cur)]
