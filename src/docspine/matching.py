"""
Predicate matching for document search.

A :class:`~docspine.models.SearchRequest` is a conjunction of independent
field predicates. Each predicate is a pure function of one document field and
one request field, and is *vacuously true* when the request leaves the field
unconstrained or the document has no value for it.

Architecture:
    ::

        matches(request, document)
          = match_title(document.title, request.title_prefixes)
          AND match_content(document.content, request.contains_contents)
          AND match_author(<author value>, request.author_ids)
          AND match_created(document.created, request.created_from, request.created_to)

        <author value> = document.author.id   (AuthorMatch.AUTHOR_ID)
                       = document.id          (AuthorMatch.DOCUMENT_ID)

Examples:
    >>> match_title("Alphabet", ("Alph",))
    True
    >>> match_title("Beta", ("Alph",))
    False
    >>> match_content(None, ("x",))
    True

Guardrails:
    Comparisons are literal and case-sensitive; there is no normalisation,
    tokenising or ranking.

Tags:
    search, predicates, filtering, docspine

Doc-Types:
    - API Reference
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from .enums import AuthorMatch
from .models import Document, SearchRequest
from .timestamps import as_utc


def match_title(title: str | None, prefixes: tuple[str, ...]) -> bool:
    """True if any prefix starts ``title``."""
    if not prefixes or title is None:
        return True
    return any(title.startswith(prefix) for prefix in prefixes)


def match_content(content: str | None, fragments: tuple[str, ...]) -> bool:
    """True if any fragment occurs in ``content``."""
    if not fragments or content is None:
        return True
    return any(fragment in content for fragment in fragments)


def match_author(value: str | None, author_ids: tuple[str, ...]) -> bool:
    """True if ``value`` equals one of ``author_ids``."""
    if not author_ids or value is None:
        return True
    return value in author_ids


def match_created(
    created: datetime | None,
    created_from: datetime | None,
    created_to: datetime | None,
) -> bool:
    """True if ``created`` lies within the inclusive ``[from, to]`` range.

    Naive datetimes are read as UTC so mixed inputs compare instead of raising.
    """
    if created is None:
        return True
    created = as_utc(created)
    if created_from is not None and created < as_utc(created_from):
        return False
    if created_to is not None and created > as_utc(created_to):
        return False
    return True


def author_value(document: Document, author_match: AuthorMatch) -> str | None:
    """The document field the author predicate compares against."""
    if author_match is AuthorMatch.DOCUMENT_ID:
        return document.id
    if document.author is None:
        return None
    return document.author.id


def matches(
    request: SearchRequest,
    document: Document,
    author_match: AuthorMatch = AuthorMatch.AUTHOR_ID,
) -> bool:
    """True if ``document`` satisfies every predicate of ``request``."""
    return (
        match_title(document.title, request.title_prefixes)
        and match_content(document.content, request.contains_contents)
        and match_author(author_value(document, author_match), request.author_ids)
        and match_created(document.created, request.created_from, request.created_to)
    )


def filter_documents(
    request: SearchRequest,
    documents: Iterable[Document],
    author_match: AuthorMatch = AuthorMatch.AUTHOR_ID,
) -> list[Document]:
    """Keep the documents matching ``request``, preserving input order."""
    if request.is_vacuous:
        return list(documents)
    return [doc for doc in documents if matches(request, doc, author_match)]


__all__ = [
    "match_title",
    "match_content",
    "match_author",
    "match_created",
    "author_value",
    "matches",
    "filter_documents",
]
