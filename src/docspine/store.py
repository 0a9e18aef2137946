"""
In-memory document store: upsert, lookup by id, multi-predicate search.

Manifesto:
    A document repository small enough to embed in any process, with the two
    decisions that matter made explicit: how ids are assigned when a caller
    supplies one, and what the author predicate compares against. Both are
    policies on the store rather than hard-coded behaviour.

    - **Owned state:** each ``DocumentStore`` has its own map; no globals
    - **Immutable values:** documents are frozen, callers cannot alias state
    - **Total reads:** ``search`` and ``find_by_id`` never raise
    - **One error:** ``save(None)`` raises :class:`InvalidArgumentError`

Architecture:
    ::

        save(document)
          └─ IdentityManager.resolve ─→ StorageMap.put ─→ stored Document

        search(request)
          └─ StorageMap.values() ─→ matching.filter_documents ─→ list

        find_by_id(id)
          └─ StorageMap.get ─→ Document | None

Examples:
    >>> store = DocumentStore()
    >>> saved = store.save(Document(title="Alpha", content="first"))
    >>> store.find_by_id(saved.id) == saved
    True
    >>> [d.title for d in store.search(SearchRequest(title_prefixes=["Al"]))]
    ['Alpha']
    >>> store.find_by_id("missing") is None
    True

Guardrails:
    ❌ DON'T: Share one store between threads without outside locking
    ✅ DO: Serialise access in the owning service

    ❌ DON'T: Re-save a known id expecting an update under REGENERATE
    ✅ DO: Construct the store with ``id_policy=IdPolicy.OVERWRITE`` for upserts

Tags:
    document-store, repository, in-memory, search, upsert, docspine

Doc-Types:
    - API Reference
    - Technical Design
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from .enums import AuthorMatch, IdPolicy
from .errors import InvalidArgumentError
from .identity import IdentityManager
from .logging import get_logger
from .matching import filter_documents
from .models import Document, SearchRequest
from .settings import DocStoreSettings
from .storage import StorageMap
from .timestamps import new_document_id, utc_now


class DocumentStore:
    """Single-process document repository.

    Parameters:
        id_policy: Handling of supplied ids that are already stored.
        author_match: Field compared by the ``author_ids`` predicate.
        id_factory: Source of new random ids.
        clock: Source of "now" for documents saved without ``created``.
    """

    def __init__(
        self,
        *,
        id_policy: IdPolicy = IdPolicy.REGENERATE,
        author_match: AuthorMatch = AuthorMatch.AUTHOR_ID,
        id_factory: Callable[[], str] = new_document_id,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._storage = StorageMap()
        self._identity = IdentityManager(id_policy, id_factory=id_factory, clock=clock)
        self.author_match = AuthorMatch(author_match)
        self._log = get_logger(__name__)

    @classmethod
    def from_settings(
        cls,
        settings: DocStoreSettings | None = None,
        **kwargs,
    ) -> DocumentStore:
        """Create a store whose policies come from ``settings``."""
        settings = settings or DocStoreSettings.load()
        return cls(
            id_policy=settings.id_policy,
            author_match=settings.author_match,
            **kwargs,
        )

    @property
    def id_policy(self) -> IdPolicy:
        return self._identity.policy

    def save(self, document: Document | None) -> Document:
        """Upsert ``document`` and return the stored value.

        The returned document carries the resolved id and ``created`` time.

        Raises:
            InvalidArgumentError: ``document`` is ``None`` or not a ``Document``.
        """
        if not isinstance(document, Document):
            self._log.warning("invalid_document", value_type=type(document).__name__)
            message = (
                "Document cannot be None"
                if document is None
                else f"Expected Document, got {type(document).__name__}"
            )
            raise InvalidArgumentError(
                message, argument="document", value=document
            ).with_context(operation="save")

        stored = self._identity.resolve(document, self._storage)
        replaced = stored.id in self._storage
        self._storage.put(stored.id, stored)

        self._log.info(
            "document_saved",
            document_id=stored.id,
            replaced=replaced,
            documents=len(self._storage),
        )
        return stored

    def search(self, request: SearchRequest | None = None) -> list[Document]:
        """Return stored documents matching every predicate of ``request``.

        ``None`` and ``SearchRequest()`` match everything. Results follow the
        store's insertion order; no sort is applied.
        """
        request = request or SearchRequest()
        results = filter_documents(request, self._storage.values(), self.author_match)
        self._log.debug(
            "document_search",
            request=request.to_dict(),
            matched=len(results),
            scanned=len(self._storage),
        )
        return results

    def find_by_id(self, document_id: str | None) -> Document | None:
        """Return the document stored under ``document_id``, or ``None``."""
        document = self._storage.get(document_id)
        self._log.debug("document_lookup", document_id=document_id, found=document is not None)
        return document

    def __len__(self) -> int:
        return len(self._storage)

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._storage

    def __repr__(self) -> str:
        return (
            f"DocumentStore(documents={len(self._storage)}, "
            f"id_policy={self.id_policy.value}, author_match={self.author_match.value})"
        )


__all__ = [
    "DocumentStore",
]
