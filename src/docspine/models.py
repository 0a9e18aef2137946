"""
Value objects held and returned by the document store.

Manifesto:
    Stored documents must never be mutated behind the store's back. Every
    model here is a frozen, slotted dataclass, so handing one to a caller
    cannot alias the store's internal state. Modified copies are produced
    with :meth:`Document.replace`.

    - **Plain constructors:** ``Document(title="x")``, no builders
    - **Explicit "no constraint":** ``SearchRequest`` normalises every list
      predicate to a tuple; the empty tuple means "match anything"
    - **Serializable:** ``to_dict()`` / ``from_dict()`` with ISO-8601 times

Examples:
    >>> doc = Document(title="Alpha", author=Author(id="a-1", name="Ann"))
    >>> doc.id is None
    True
    >>> SearchRequest(title_prefixes=["Al"]).title_prefixes
    ('Al',)
    >>> SearchRequest().is_vacuous
    True

Tags:
    models, dataclasses, value-objects, docspine

Doc-Types:
    - API Reference
    - Data Model
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from .timestamps import from_iso8601, to_iso8601


@dataclass(frozen=True, slots=True)
class Author:
    """Document author. A plain value with no identity enforcement."""

    id: str
    name: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Author:
        return cls(id=data["id"], name=data.get("name"))


@dataclass(frozen=True, slots=True)
class Document:
    """
    A stored (or to-be-stored) document.

    ``id`` and ``created`` are ``None`` only before the first save; the store
    fills both in and never changes ``created`` afterwards.
    """

    id: str | None = None
    title: str | None = None
    content: str | None = None
    author: Author | None = None
    created: datetime | None = None

    def replace(self, **changes: Any) -> Document:
        """Return a copy of this document with ``changes`` applied."""
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dict; ``created`` becomes an ISO-8601 string."""
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "author": self.author.to_dict() if self.author is not None else None,
            "created": to_iso8601(self.created),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Document:
        """Build a document from :meth:`to_dict` output; missing keys are ``None``."""
        author = data.get("author")
        created = data.get("created")
        if isinstance(created, str):
            created = from_iso8601(created)
        return cls(
            id=data.get("id"),
            title=data.get("title"),
            content=data.get("content"),
            author=Author.from_dict(author) if author is not None else None,
            created=created,
        )


def _as_terms(values: Iterable[str] | str | None) -> tuple[str, ...]:
    if values is None:
        return ()
    if isinstance(values, str):
        return (values,)
    return tuple(values)


@dataclass(frozen=True, slots=True)
class SearchRequest:
    """
    Search criteria; every populated field must match (logical AND).

    The list fields accept any iterable of strings, a single string, or
    ``None``; they are stored as tuples. Within one field, any entry may
    match (logical OR). An empty tuple or an unset bound places no
    constraint on that field.

    Attributes:
        title_prefixes: Literal, case-sensitive title prefixes
        contains_contents: Literal, case-sensitive content substrings
        author_ids: Author identifiers (see ``AuthorMatch``)
        created_from: Inclusive lower bound on ``created``
        created_to: Inclusive upper bound on ``created``
    """

    title_prefixes: tuple[str, ...] = ()
    contains_contents: tuple[str, ...] = ()
    author_ids: tuple[str, ...] = ()
    created_from: datetime | None = None
    created_to: datetime | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "title_prefixes", _as_terms(self.title_prefixes))
        object.__setattr__(self, "contains_contents", _as_terms(self.contains_contents))
        object.__setattr__(self, "author_ids", _as_terms(self.author_ids))

    @property
    def is_vacuous(self) -> bool:
        """True when no field is constrained, i.e. every document matches."""
        return not (
            self.title_prefixes
            or self.contains_contents
            or self.author_ids
            or self.created_from is not None
            or self.created_to is not None
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "title_prefixes": list(self.title_prefixes),
            "contains_contents": list(self.contains_contents),
            "author_ids": list(self.author_ids),
            "created_from": to_iso8601(self.created_from),
            "created_to": to_iso8601(self.created_to),
        }


__all__ = [
    "Author",
    "Document",
    "SearchRequest",
]
