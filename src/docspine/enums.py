"""
Policy enums shared by the store, the identity manager and the settings.

STDLIB ONLY - NO PYDANTIC.
"""

from enum import Enum


class IdPolicy(str, Enum):
    """
    What ``save`` does with a caller-supplied id that is already stored.

    REGENERATE keeps the historical contract: the colliding id is swapped for
    a fresh random one, so a known id can never be used to update a document.
    OVERWRITE treats the id as an upsert key and replaces the stored value.
    """

    REGENERATE = "regenerate"
    OVERWRITE = "overwrite"


class AuthorMatch(str, Enum):
    """
    Which document field the ``author_ids`` search predicate compares against.

    AUTHOR_ID compares against ``document.author.id``.
    DOCUMENT_ID compares against ``document.id`` (legacy behaviour).
    """

    AUTHOR_ID = "author_id"
    DOCUMENT_ID = "document_id"


__all__ = [
    "IdPolicy",
    "AuthorMatch",
]
