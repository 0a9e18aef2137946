"""
Id assignment and creation-time resolution for ``save``.

Given an incoming document and the storage it is headed for, the identity
manager decides the key the document is written under and the ``created``
value it carries.

Id resolution (:class:`~docspine.enums.IdPolicy`):

    candidate is None          → fresh random id (retried until unused)
    candidate unused           → candidate
    candidate used, REGENERATE → fresh random id (retried until unused)
    candidate used, OVERWRITE  → candidate (the save replaces the stored value)

Creation time: the stored document's ``created`` when the save replaces one,
else the supplied value, else the current UTC time.
"""

from __future__ import annotations

from collections.abc import Callable, Container
from datetime import datetime

from .enums import IdPolicy
from .logging import get_logger
from .models import Document
from .storage import StorageMap
from .timestamps import new_document_id, utc_now


class IdentityManager:
    """Resolves ids and creation timestamps for documents being saved.

    Parameters:
        policy: What to do with a supplied id that is already stored.
        id_factory: Callable producing new random ids.
        clock: Callable returning "now" for documents without ``created``.
    """

    def __init__(
        self,
        policy: IdPolicy = IdPolicy.REGENERATE,
        *,
        id_factory: Callable[[], str] = new_document_id,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.policy = IdPolicy(policy)
        self._id_factory = id_factory
        self._clock = clock
        self._log = get_logger(__name__)

    def generate_id(self, taken: Container[str]) -> str:
        """Draw ids from the factory until one is not in ``taken``."""
        document_id = self._id_factory()
        while document_id in taken:
            document_id = self._id_factory()
        return document_id

    def resolve_id(self, candidate: str | None, taken: Container[str]) -> str:
        """Return the id a document supplying ``candidate`` is stored under."""
        if candidate is None:
            return self.generate_id(taken)
        if candidate not in taken or self.policy is IdPolicy.OVERWRITE:
            return candidate

        document_id = self.generate_id(taken)
        self._log.info(
            "document_id_regenerated",
            candidate_id=candidate,
            document_id=document_id,
        )
        return document_id

    def resolve_created(
        self,
        created: datetime | None,
        previous: Document | None = None,
    ) -> datetime:
        """Return the ``created`` value to store; the first one ever set wins."""
        if previous is not None and previous.created is not None:
            return previous.created
        if created is not None:
            return created
        return self._clock()

    def resolve(self, document: Document, storage: StorageMap) -> Document:
        """Return ``document`` with its final id and ``created`` filled in."""
        document_id = self.resolve_id(document.id, storage)
        created = self.resolve_created(document.created, storage.get(document_id))
        return document.replace(id=document_id, created=created)


__all__ = [
    "IdentityManager",
]
