"""
In-memory session store.

Maps session IDs to the immutable DocumentRecord built for that session.

Dependencies: threading (stdlib), parsebot.models.document
System role: Shared document state for the retrieval service
"""

import threading
from typing import Iterator

from parsebot.models.document import DocumentRecord


class DocumentStore:
    """Thread-safe session_id -> DocumentRecord mapping."""

    def __init__(self) -> None:
        """Initialize an empty store."""
        self._records: dict[str, DocumentRecord] = {}
        self._lock = threading.RLock()

    def get(self, session_id: str) -> DocumentRecord | None:
        """Return the record for a session, or None."""
        with self._lock:
            return self._records.get(session_id)

    def put(self, session_id: str, record: DocumentRecord) -> DocumentRecord | None:
        """
        Replace the record for a session.

        The record must already be fully built; readers see either the old or
        the new record, never a mix.

        Args:
            session_id: Session ID
            record: Complete document record

        Returns:
            DocumentRecord | None: Previous record, if any
        """
        with self._lock:
            previous = self._records.get(session_id)
            self._records[session_id] = record
            return previous

    def pop(self, session_id: str) -> DocumentRecord | None:
        """Remove and return the record for a session, or None."""
        with self._lock:
            return self._records.pop(session_id, None)

    def items(self) -> list[tuple[str, DocumentRecord]]:
        """Snapshot of (session_id, record) pairs in insertion order."""
        with self._lock:
            return list(self._records.items())

    def clear(self) -> None:
        """Remove every record."""
        with self._lock:
            self._records.clear()

    def __contains__(self, session_id: object) -> bool:
        with self._lock:
            return session_id in self._records

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __iter__(self) -> Iterator[str]:
        return iter([session_id for session_id, _ in self.items()])
