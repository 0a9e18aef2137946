"""
Identifier generation and timestamp utilities (stdlib-only).

- **new_document_id():** Random 128-bit identifier rendered as a UUID string
- **utc_now():** Timezone-aware UTC datetime
- **as_utc():** Naive datetimes read as UTC, aware ones converted to UTC
- **to_iso8601() / from_iso8601():** Serialization round-trip

STDLIB ONLY - NO PYDANTIC.
"""

import uuid
from datetime import UTC, datetime


def utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(UTC)


def new_document_id() -> str:
    """Generate a random (UUID4) document identifier."""
    return str(uuid.uuid4())


def as_utc(dt: datetime) -> datetime:
    """Return ``dt`` as an aware UTC datetime; naive values are taken as UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def to_iso8601(dt: datetime | None) -> str | None:
    """Convert datetime to ISO 8601 string."""
    if dt is None:
        return None
    return dt.isoformat()


def from_iso8601(s: str | None) -> datetime | None:
    """Parse ISO 8601 string to datetime."""
    if s is None:
        return None
    return datetime.fromisoformat(s)
