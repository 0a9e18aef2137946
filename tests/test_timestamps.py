"""Tests for docspine.timestamps - id generation + UTC helpers."""

from __future__ import annotations

import uuid
from datetime import UTC, datetime, timedelta, timezone

from docspine.timestamps import as_utc, from_iso8601, new_document_id, to_iso8601, utc_now


class TestUtcNow:
    """Tests for utc_now()."""

    def test_has_utc_timezone(self):
        assert utc_now().tzinfo is UTC

    def test_is_recent(self):
        before = datetime.now(UTC)
        result = utc_now()
        after = datetime.now(UTC)
        assert before <= result <= after


class TestNewDocumentId:
    """Tests for new_document_id()."""

    def test_is_uuid4_string(self):
        value = new_document_id()
        assert uuid.UUID(value).version == 4
        assert str(uuid.UUID(value)) == value

    def test_unique(self):
        assert len({new_document_id() for _ in range(1000)}) == 1000


class TestAsUtc:
    def test_naive_is_read_as_utc(self):
        assert as_utc(datetime(2026, 1, 1, 12)) == datetime(2026, 1, 1, 12, tzinfo=UTC)

    def test_aware_is_converted(self):
        plus_two = timezone(timedelta(hours=2))
        result = as_utc(datetime(2026, 1, 1, 14, tzinfo=plus_two))
        assert result == datetime(2026, 1, 1, 12, tzinfo=UTC)
        assert result.tzinfo is UTC


class TestIso8601:
    def test_none_passthrough(self):
        assert to_iso8601(None) is None
        assert from_iso8601(None) is None

    def test_round_trip(self):
        dt = datetime(2026, 1, 15, 12, 0, 1, tzinfo=UTC)
        assert from_iso8601(to_iso8601(dt)) == dt
