"""
Chunk domain models.

Represents a trimmed span of a document and its ranking result.

Dependencies: pydantic
System role: Unit of retrieval for the TF-IDF engine
"""

from pydantic import BaseModel, ConfigDict, Field


class Chunk(BaseModel):
    """Trimmed document span with its offsets in the original text."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(description="Chunk text content, whitespace-trimmed")
    start: int = Field(ge=0, description="Offset of the first character in the document")
    end: int = Field(ge=0, description="Offset one past the last character in the document")


class ScoredChunk(BaseModel):
    """Chunk paired with its relevance score for one query."""

    chunk: Chunk
    score: float = Field(description="Sum of query term frequency times TF-IDF weight")
    index: int = Field(ge=0, description="Position of the chunk within its document")
