"""
Retrieval engine configuration settings.

Chunking and ranking defaults for the TF-IDF engine.

Dependencies: pydantic, pydantic_settings
System role: Configuration for chunking and top-K retrieval
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RetrievalSettings(BaseSettings):
    """Chunking and ranking configuration."""

    model_config = SettingsConfigDict(
        env_prefix="RAG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    chunk_size: int = Field(
        default=1000,
        gt=0,
        description="Maximum chunk size in characters",
    )
    chunk_overlap: int = Field(
        default=200,
        ge=0,
        description="Overlap between consecutive chunks",
    )
    min_chunk_length: int = Field(
        default=50,
        ge=0,
        description="Trimmed chunks of this length or shorter are discarded",
    )
    default_top_k: int = Field(
        default=3,
        ge=1,
        description="Number of chunks returned when the caller gives no top_k",
    )
