"""
Retrieval request/response schemas.

Dependencies: pydantic
System role: Retrieval contracts
"""

from pydantic import BaseModel, Field


class ContextSpan(BaseModel):
    """One ranked chunk returned as query context."""

    text: str
    score: float
    start: int
    end: int


class RetrievalContext(BaseModel):
    """Ranked context for a query against a session's document."""

    context: list[ContextSpan] = Field(default_factory=list)
    total_chunks: int
    relevant_count: int
    filename: str


class RetrieveRequest(BaseModel):
    """Request schema for querying a session's document."""

    query: str = Field(description="Free-text query")
    top_k: int | None = Field(default=None, ge=1, description="Maximum chunks to return")


class RetrieveResponse(RetrievalContext):
    """Retrieval result plus the rendered prompt context."""

    formatted_context: str
