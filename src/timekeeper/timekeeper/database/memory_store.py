from __future__ import annotations

import copy
from typing import Any, Dict, List, Optional, Tuple

from ..core.exceptions import RecordNotFound
from .document_store import Document, DocumentStore


class InMemoryDocumentStore(DocumentStore):
    """Dict-backed store for development and tests.

    Documents are copied on the way in and out so callers never share state
    with the store.
    """

    def __init__(self):
        self._collections: Dict[str, Dict[str, Document]] = {}

    def _collection(self, name: str) -> Dict[str, Document]:
        return self._collections.setdefault(name, {})

    def get(self, collection: str, doc_id: str) -> Optional[Document]:
        doc = self._collection(collection).get(doc_id)
        return copy.deepcopy(doc) if doc is not None else None

    def set(self, collection: str, doc_id: str, record: Document) -> None:
        self._collection(collection)[doc_id] = copy.deepcopy(record)

    def update(self, collection: str, doc_id: str, partial: Document) -> None:
        docs = self._collection(collection)
        if doc_id not in docs:
            raise RecordNotFound(f"Document {collection}/{doc_id} does not exist")
        docs[doc_id] = {**docs[doc_id], **copy.deepcopy(partial)}

    def delete(self, collection: str, doc_id: str) -> None:
        self._collection(collection).pop(doc_id, None)

    def query_equal(self, collection: str, field: str, value: Any) -> List[Tuple[str, Document]]:
        return [
            (doc_id, copy.deepcopy(doc))
            for doc_id, doc in self._collection(collection).items()
            if doc.get(field) == value
        ]
