"""
Shared pytest fixtures and configuration for docspine tests.

This module provides:
- structlog reset between tests so log capture stays reliable
- Deterministic id and clock fixtures
- A pre-populated store fixture

Usage:
    Fixtures are auto-discovered by pytest; request them as test arguments.
"""

import itertools
import sys
from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Callable, Generator

import pytest
import structlog

# Ensure docspine package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from docspine import Author, Document, DocumentStore
from docspine.settings import get_settings


# =============================================================================
# Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Undo any ``configure_logging`` call made by a test."""
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Reload settings from the (monkeypatched) environment in every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Deterministic generators
# =============================================================================


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 1, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def fixed_clock(fixed_now: datetime) -> Callable[[], datetime]:
    return lambda: fixed_now


@pytest.fixture
def sequential_ids() -> Callable[[], str]:
    """Id factory yielding doc-1, doc-2, ..."""
    counter = itertools.count(1)
    return lambda: f"doc-{next(counter)}"


# =============================================================================
# Sample data
# =============================================================================


@pytest.fixture
def ann() -> Author:
    return Author(id="author-ann", name="Ann")


@pytest.fixture
def bob() -> Author:
    return Author(id="author-bob", name="Bob")


@pytest.fixture
def populated_store(fixed_now: datetime, ann: Author, bob: Author) -> DocumentStore:
    """Store with three documents created one day apart."""
    store = DocumentStore()
    store.save(Document(title="Alpha", content="first letter", author=ann,
                        created=fixed_now - timedelta(days=2)))
    store.save(Document(title="Alphabet", content="all the letters", author=ann,
                        created=fixed_now - timedelta(days=1)))
    store.save(Document(title="Beta", content="second letter", author=bob,
                        created=fixed_now))
    return store
