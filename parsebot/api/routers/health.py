"""
Health check API endpoints.

Routes: GET /health

Dependencies: fastapi, parsebot.api.deps
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from parsebot.api.deps import get_retrieval_service
from parsebot.application.services import RetrievalService


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str
    active_sessions: int


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
def health_check(
    retrieval_service: RetrievalService = Depends(get_retrieval_service),
) -> HealthResponse:
    """Basic health check with the number of stored documents."""
    return HealthResponse(
        status="healthy",
        message="Server Healthy",
        active_sessions=len(retrieval_service.store),
    )
