from __future__ import annotations

from typing import Any, Dict, List, Optional, Protocol, Tuple

Document = Dict[str, Any]


class DocumentStore(Protocol):
    """Minimal document store used by every repository.

    Each call is atomic on its own; callers compose several calls without
    cross-call transactions.
    """

    def get(self, collection: str, doc_id: str) -> Optional[Document]:
        raise NotImplementedError

    def set(self, collection: str, doc_id: str, record: Document) -> None:
        """Insert or fully replace a document."""

        raise NotImplementedError

    def update(self, collection: str, doc_id: str, partial: Document) -> None:
        """Merge fields into an existing document; RecordNotFound if absent."""

        raise NotImplementedError

    def delete(self, collection: str, doc_id: str) -> None:
        raise NotImplementedError

    def query_equal(self, collection: str, field: str, value: Any) -> List[Tuple[str, Document]]:
        raise NotImplementedError
