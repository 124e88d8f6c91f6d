"""Service orchestrators."""

from .retrieval_service import RetrievalService, format_context

__all__ = [
    "RetrievalService",
    "format_context",
]
