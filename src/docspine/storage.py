"""
Key-unique mapping from document id to document.

The storage map is the single source of truth for a store. It performs no
validation of its own: the identity manager decides *which* key is written,
the map only writes it.

API:
    put(id, document)   insert-or-replace, never raises
    get(id)             document or ``None``, never raises
    values()            snapshot tuple, insertion order
"""

from __future__ import annotations

from collections.abc import Iterator

from .models import Document


class StorageMap:
    """In-memory ``id → Document`` map.

    Scans are O(n) per search; there is no secondary index.
    """

    def __init__(self) -> None:
        self._documents: dict[str, Document] = {}

    def put(self, document_id: str, document: Document) -> None:
        """Insert or replace the document stored under ``document_id``."""
        self._documents[document_id] = document

    def get(self, document_id: str | None) -> Document | None:
        """Return the stored document, or ``None`` when absent."""
        if document_id is None:
            return None
        return self._documents.get(document_id)

    def values(self) -> tuple[Document, ...]:
        """Snapshot of all stored documents, in insertion order."""
        return tuple(self._documents.values())

    def clear(self) -> None:
        """Remove every document. Intended for tests."""
        self._documents.clear()

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._documents

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._documents))


__all__ = [
    "StorageMap",
]
