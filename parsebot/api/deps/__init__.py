"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_document_store,
    get_retrieval_service,
    get_settings_dependency,
)

__all__ = [
    "get_document_store",
    "get_retrieval_service",
    "get_settings_dependency",
]
