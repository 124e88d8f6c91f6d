"""
Retrieval service orchestrator.

Coordinates chunking, TF-IDF indexing, session storage, and ranking for the
single document held by each session.

Dependencies: parsebot.core, parsebot.configs, parsebot.observability
System role: Document retrieval use case orchestration
"""

import logging
from datetime import datetime, timezone

from parsebot.configs.retrieval import RetrievalSettings
from parsebot.core.chunker import TextChunker
from parsebot.core.exceptions import (
    DocumentProcessingError,
    ParsebotException,
    SessionNotFoundError,
)
from parsebot.core.retriever import find_relevant
from parsebot.core.session_store import DocumentStore
from parsebot.core.tfidf import compute_weights
from parsebot.models.document import DocumentInfo, DocumentRecord, SessionSummary
from parsebot.models.retrieval import ContextSpan, RetrievalContext
from parsebot.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
)

logger = logging.getLogger(__name__)


class RetrievalService:
    """Session-scoped document indexing and retrieval."""

    def __init__(
        self,
        store: DocumentStore | None = None,
        settings: RetrievalSettings | None = None,
    ) -> None:
        """
        Initialize retrieval service.

        Args:
            store: Session store (a fresh in-memory store if None)
            settings: Chunking and ranking settings (environment defaults if None)
        """
        self.store = store if store is not None else DocumentStore()
        self.settings = settings or RetrievalSettings()
        self.chunker = TextChunker(
            chunk_size=self.settings.chunk_size,
            overlap=self.settings.chunk_overlap,
            min_length=self.settings.min_chunk_length,
        )

    def store_document(self, session_id: str, text: str, filename: str) -> int:
        """
        Chunk, index, and store a document, replacing any prior one.

        Args:
            session_id: Session ID
            text: Extracted document text
            filename: Original filename

        Returns:
            int: Number of chunks produced (0 for empty or very short text)

        Raises:
            DocumentProcessingError: When chunking or indexing fails unexpectedly
        """
        log_with_context(
            logger,
            logging.INFO,
            "Processing document",
            session_id=session_id,
            document_name=filename,
            text_length=len(text),
        )

        try:
            record = self._build_record(text, filename)
        except ParsebotException:
            raise
        except Exception as e:
            log_exception_with_context(
                logger,
                "Document indexing failed",
                e,
                session_id=session_id,
                document_name=filename,
            )
            raise DocumentProcessingError(
                f"Failed to index document: {e}",
                session_id=session_id,
                details={"filename": filename},
            ) from e

        self.store.put(session_id, record)

        if record.chunk_count == 0:
            log_with_context(
                logger,
                logging.WARNING,
                "Document produced no chunks",
                session_id=session_id,
                document_name=filename,
            )
        else:
            log_with_context(
                logger,
                logging.INFO,
                "Document stored",
                session_id=session_id,
                chunk_count=record.chunk_count,
            )
        return record.chunk_count

    def retrieve_context(
        self,
        session_id: str,
        query: str,
        top_k: int | None = None,
    ) -> RetrievalContext:
        """
        Rank a session's chunks against a query.

        Args:
            session_id: Session ID
            query: Free-text query
            top_k: Maximum chunks to return (settings default if None)

        Returns:
            RetrievalContext: Ranked spans, possibly empty

        Raises:
            SessionNotFoundError: When no document is stored for the session
            ValidationError: When top_k < 1
        """
        record = self.store.get(session_id)
        if record is None:
            raise SessionNotFoundError(session_id)

        if top_k is None:
            top_k = self.settings.default_top_k

        log_with_context(
            logger,
            logging.INFO,
            "Searching for context",
            session_id=session_id,
            query=query,
            top_k=top_k,
        )

        ranked = find_relevant(query, record.chunks, record.term_weights, top_k=top_k)

        log_with_context(
            logger,
            logging.INFO,
            "Found relevant chunks",
            session_id=session_id,
            relevant_count=len(ranked),
        )

        return RetrievalContext(
            context=[
                ContextSpan(
                    text=item.chunk.text,
                    score=item.score,
                    start=item.chunk.start,
                    end=item.chunk.end,
                )
                for item in ranked
            ],
            total_chunks=len(record.chunks),
            relevant_count=len(ranked),
            filename=record.filename,
        )

    def get_document_info(self, session_id: str) -> DocumentInfo | None:
        """
        Get summary of a session's document.

        Args:
            session_id: Session ID

        Returns:
            DocumentInfo | None: Summary, or None when nothing is stored
        """
        record = self.store.get(session_id)
        if record is None:
            return None
        return DocumentInfo(
            filename=record.filename,
            chunk_count=record.chunk_count,
            processed_at=record.processed_at,
        )

    def clear_document(self, session_id: str) -> bool:
        """
        Remove a session's document. Clearing an unknown session is a no-op.

        Args:
            session_id: Session ID

        Returns:
            bool: True if a document was removed
        """
        removed = self.store.pop(session_id) is not None
        log_with_context(
            logger,
            logging.INFO,
            "Cleared document data",
            session_id=session_id,
            removed=removed,
        )
        return removed

    def list_sessions(self) -> list[SessionSummary]:
        """List every session that currently holds a document."""
        return [
            SessionSummary(
                session_id=session_id,
                filename=record.filename,
                chunk_count=record.chunk_count,
                processed_at=record.processed_at,
            )
            for session_id, record in self.store.items()
        ]

    def _build_record(self, text: str, filename: str) -> DocumentRecord:
        """Run chunker and indexer into a complete, unpublished record."""
        chunks = self.chunker.chunk(text)
        term_weights = compute_weights(chunks)
        return DocumentRecord(
            chunks=chunks,
            term_weights=term_weights,
            filename=filename,
            processed_at=datetime.now(timezone.utc),
            chunk_count=len(chunks),
        )


def format_context(result: RetrievalContext) -> str:
    """
    Render ranked spans as a prompt context block.

    Args:
        result: Retrieval result

    Returns:
        str: Sections joined by blank lines, empty when there is no context
    """
    return "\n\n".join(
        f"[Relevant Section - Similarity: {span.score:.3f}]\n{span.text}"
        for span in result.context
    )
