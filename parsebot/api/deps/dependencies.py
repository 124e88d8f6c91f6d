"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: parsebot.configs, parsebot.application, parsebot.core
System role: DI container for service injection
"""

from functools import lru_cache

from fastapi import Depends

from parsebot.configs import Settings, get_settings
from parsebot.application.services import RetrievalService
from parsebot.core.session_store import DocumentStore


def get_settings_dependency() -> Settings:
    """Get application settings."""
    return get_settings()


@lru_cache
def get_document_store() -> DocumentStore:
    """
    Get the process-wide document store.

    Returns:
        DocumentStore: Singleton in-memory store shared by all requests
    """
    return DocumentStore()


def get_retrieval_service(
    settings: Settings = Depends(get_settings_dependency),
    store: DocumentStore = Depends(get_document_store),
) -> RetrievalService:
    """
    Get RetrievalService bound to the shared store.

    Args:
        settings: Injected settings
        store: Injected document store

    Returns:
        RetrievalService: Service instance for this request
    """
    return RetrievalService(store=store, settings=settings.retrieval)
