"""Tests for the in-memory session store."""

import threading
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from parsebot.core.session_store import DocumentStore
from parsebot.models.chunk import Chunk
from parsebot.models.document import DocumentRecord


def _record(filename: str, num_chunks: int = 1) -> DocumentRecord:
    chunks = [Chunk(text=f"chunk {i}", start=i, end=i + 7) for i in range(num_chunks)]
    return DocumentRecord(
        chunks=chunks,
        term_weights=[{"chunk": 0.0} for _ in chunks],
        filename=filename,
        processed_at=datetime.now(timezone.utc),
        chunk_count=num_chunks,
    )


class TestDocumentStore:
    """Tests for DocumentStore."""

    def test_get_missing_returns_none(self, store: DocumentStore) -> None:
        """Unknown sessions are absent, not errors."""
        assert store.get("nope") is None
        assert "nope" not in store
        assert len(store) == 0

    def test_put_then_get(self, store: DocumentStore) -> None:
        """Stored record is returned as-is."""
        record = _record("a.pdf")

        previous = store.put("s1", record)

        assert previous is None
        assert store.get("s1") is record
        assert "s1" in store

    def test_put_replaces_record(self, store: DocumentStore) -> None:
        """Second put overwrites and returns the old record."""
        first = _record("a.pdf")
        second = _record("b.pdf", num_chunks=3)
        store.put("s1", first)

        previous = store.put("s1", second)

        assert previous is first
        assert store.get("s1") is second
        assert len(store) == 1

    def test_pop_is_idempotent(self, store: DocumentStore) -> None:
        """Popping twice removes once."""
        record = _record("a.pdf")
        store.put("s1", record)

        assert store.pop("s1") is record
        assert store.pop("s1") is None
        assert store.get("s1") is None

    def test_items_and_iteration(self, store: DocumentStore) -> None:
        """Snapshot lists every session."""
        store.put("s1", _record("a.pdf"))
        store.put("s2", _record("b.pdf"))

        assert [sid for sid, _ in store.items()] == ["s1", "s2"]
        assert list(store) == ["s1", "s2"]

    def test_clear(self, store: DocumentStore) -> None:
        """Clear empties the store."""
        store.put("s1", _record("a.pdf"))

        store.clear()

        assert len(store) == 0

    def test_records_are_immutable(self) -> None:
        """Readers cannot mutate a published record."""
        record = _record("a.pdf")

        with pytest.raises(ValidationError):
            record.filename = "other.pdf"  # type: ignore[misc]

        assert record.filename == "a.pdf"

    def test_concurrent_writers_and_readers(self, store: DocumentStore) -> None:
        """Readers only ever observe complete records."""
        errors: list[str] = []
        records = [_record(f"{n}.pdf", num_chunks=n) for n in range(1, 6)]

        def writer() -> None:
            for _ in range(200):
                for record in records:
                    store.put("shared", record)

        def reader() -> None:
            for _ in range(1000):
                record = store.get("shared")
                if record is not None and record.chunk_count != len(record.chunks):
                    errors.append(record.filename)

        threads = [threading.Thread(target=writer) for _ in range(2)]
        threads += [threading.Thread(target=reader) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert errors == []
        assert store.get("shared") in records
