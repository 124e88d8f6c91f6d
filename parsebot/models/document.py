"""
Document domain models and schemas.

Stored document records plus request/response schemas for document operations.

Dependencies: pydantic
System role: Document contracts for the session store and API
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from parsebot.models.chunk import Chunk


class DocumentRecord(BaseModel):
    """Chunks and term weights for the single document held by a session."""

    model_config = ConfigDict(frozen=True)

    chunks: tuple[Chunk, ...] = Field(description="Chunks in document order")
    term_weights: tuple[dict[str, float], ...] = Field(
        description="Per-chunk TF-IDF tables, index-aligned with chunks",
    )
    filename: str
    processed_at: datetime
    chunk_count: int = Field(ge=0)


class DocumentInfo(BaseModel):
    """Summary of the document stored for a session."""

    filename: str
    chunk_count: int
    processed_at: datetime


class SessionSummary(DocumentInfo):
    """Document summary tagged with its session ID."""

    session_id: str


class SessionListResponse(BaseModel):
    """All active sessions."""

    count: int
    sessions: list[SessionSummary]


class StoreDocumentRequest(BaseModel):
    """Request schema for storing extracted document text."""

    text: str = Field(description="Text already extracted from the source document")
    filename: str = Field(min_length=1, description="Original filename")


class StoreDocumentResponse(BaseModel):
    """Response schema after a document has been chunked and indexed."""

    session_id: str
    filename: str
    chunk_count: int
    text_length: int
