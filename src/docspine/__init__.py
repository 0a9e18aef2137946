"""docspine -- an in-memory document store with upsert, lookup and search.

Architecture::

    models.py      Author, Document, SearchRequest (frozen dataclasses)
    enums.py       IdPolicy, AuthorMatch
    identity.py    IdentityManager (id assignment, created-time resolution)
    matching.py    Predicate matcher (title, content, author, created range)
    storage.py     StorageMap (id -> Document)
    store.py       DocumentStore (save / search / find_by_id)
    errors.py      DocStoreError hierarchy
    logging.py     structlog configuration
    settings.py    DocStoreSettings (pydantic-settings, DOCSTORE_* env vars)
"""

__version__ = "0.1.0"

from .enums import AuthorMatch, IdPolicy
from .errors import (
    ConfigError,
    DocStoreError,
    ErrorCategory,
    ErrorContext,
    InvalidArgumentError,
)
from .identity import IdentityManager
from .logging import configure_logging, get_logger
from .matching import filter_documents, matches
from .models import Author, Document, SearchRequest
from .settings import DocStoreSettings, get_settings
from .storage import StorageMap
from .store import DocumentStore

__all__ = [
    "__version__",
    # Models
    "Author",
    "Document",
    "SearchRequest",
    # Policies
    "AuthorMatch",
    "IdPolicy",
    # Components
    "DocumentStore",
    "IdentityManager",
    "StorageMap",
    "filter_documents",
    "matches",
    # Errors
    "DocStoreError",
    "ErrorCategory",
    "ErrorContext",
    "InvalidArgumentError",
    "ConfigError",
    # Ambient
    "DocStoreSettings",
    "get_settings",
    "configure_logging",
    "get_logger",
]
