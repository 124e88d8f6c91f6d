"""Fixtures for API tests."""

import pytest
from fastapi.testclient import TestClient

from parsebot.api.deps import get_retrieval_service
from parsebot.api.main import create_app
from parsebot.application.services import RetrievalService


@pytest.fixture
def client(retrieval_service: RetrievalService):
    """Provide TestClient wired to an isolated RetrievalService."""
    app = create_app()
    app.dependency_overrides[get_retrieval_service] = lambda: retrieval_service
    return TestClient(app)
