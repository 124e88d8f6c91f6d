"""
Core business logic module.

Contains the retrieval engine: tokenization, chunking, TF-IDF indexing,
ranking, and the in-memory session store.
"""

from parsebot.core.exceptions import (
    ParsebotException,
    ValidationError,
    SessionNotFoundError,
    DocumentProcessingError,
)

from parsebot.core.chunker import TextChunker, chunk_text
from parsebot.core.retriever import find_relevant
from parsebot.core.session_store import DocumentStore
from parsebot.core.tfidf import compute_weights
from parsebot.core.tokenizer import analyze, query_vector, stem, tokenize

__all__ = [
    # Exceptions
    "ParsebotException",
    "ValidationError",
    "SessionNotFoundError",
    "DocumentProcessingError",
    # Engine
    "TextChunker",
    "chunk_text",
    "compute_weights",
    "find_relevant",
    "DocumentStore",
    "analyze",
    "query_vector",
    "stem",
    "tokenize",
]
