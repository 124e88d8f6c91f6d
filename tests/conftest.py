"""
Shared test fixtures and configuration for entire test suite.

Provides: Sample documents, retrieval settings, store and service fixtures
Dependencies: pytest
System role: Test infrastructure and fixture management
"""

import pytest

from parsebot.application.services import RetrievalService
from parsebot.configs.retrieval import RetrievalSettings
from parsebot.core.session_store import DocumentStore


MAMMALS_PARAGRAPH = (
    "Mammals are warm blooded animals. Many mammals feed their young with milk. "
    "Whales and bats are mammals too, and mammals live on every continent."
)

FISH_PARAGRAPH = (
    "Fish live in water and breathe through gills. Most fish lay eggs in rivers, "
    "lakes and the open ocean where currents carry them away."
)


@pytest.fixture
def two_topic_text() -> str:
    """Provide a document whose two paragraphs chunk separately."""
    return f"{MAMMALS_PARAGRAPH}\n{FISH_PARAGRAPH}"


@pytest.fixture
def small_chunk_settings() -> RetrievalSettings:
    """Provide settings that split two_topic_text into one chunk per paragraph."""
    return RetrievalSettings(
        chunk_size=150,
        chunk_overlap=0,
        min_chunk_length=50,
        default_top_k=3,
    )


@pytest.fixture
def store() -> DocumentStore:
    """Provide an empty document store."""
    return DocumentStore()


@pytest.fixture
def retrieval_service(
    store: DocumentStore, small_chunk_settings: RetrievalSettings
) -> RetrievalService:
    """Provide RetrievalService over an empty store."""
    return RetrievalService(store=store, settings=small_chunk_settings)
