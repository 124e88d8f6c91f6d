"""
Session document API endpoints.

Routes:
- PUT /sessions/{id}/document - Chunk and index extracted text
- POST /sessions/{id}/retrieve - Rank stored chunks against a query
- GET /sessions - List sessions holding a document
- GET /sessions/{id} - Get session document info
- DELETE /sessions/{id} - Clear session document

Dependencies: parsebot.application.services, parsebot.models
System role: Session retrieval HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status

from parsebot.api.deps import get_retrieval_service
from parsebot.application.services import RetrievalService, format_context
from parsebot.core.exceptions import (
    DocumentProcessingError,
    SessionNotFoundError,
    ValidationError,
)
from parsebot.models.document import (
    SessionListResponse,
    SessionSummary,
    StoreDocumentRequest,
    StoreDocumentResponse,
)
from parsebot.models.retrieval import RetrieveRequest, RetrieveResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.put("/{session_id}/document", response_model=StoreDocumentResponse)
def store_document(
    session_id: str,
    request: StoreDocumentRequest,
    retrieval_service: RetrievalService = Depends(get_retrieval_service),
) -> StoreDocumentResponse:
    """
    Store extracted document text for a session, replacing any prior document.

    Args:
        session_id: Session ID
        request: Document text and filename
        retrieval_service: Injected RetrievalService

    Returns:
        StoreDocumentResponse: Chunk count and text length

    Raises:
        HTTPException(500): Indexing failed
    """
    try:
        chunk_count = retrieval_service.store_document(
            session_id, request.text, request.filename
        )
    except DocumentProcessingError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return StoreDocumentResponse(
        session_id=session_id,
        filename=request.filename,
        chunk_count=chunk_count,
        text_length=len(request.text),
    )


@router.post("/{session_id}/retrieve", response_model=RetrieveResponse)
def retrieve_context(
    session_id: str,
    request: RetrieveRequest,
    retrieval_service: RetrievalService = Depends(get_retrieval_service),
) -> RetrieveResponse:
    """
    Retrieve ranked context for a query.

    Args:
        session_id: Session ID
        request: Query and optional top_k
        retrieval_service: Injected RetrievalService

    Returns:
        RetrieveResponse: Ranked spans and rendered context

    Raises:
        HTTPException(400): Empty query or invalid top_k
        HTTPException(404): No document stored for session
    """
    if not request.query.strip():
        raise HTTPException(status_code=400, detail="Query is required")

    try:
        result = retrieval_service.retrieve_context(
            session_id, request.query, request.top_k
        )
    except SessionNotFoundError as e:
        logger.info(
            "Retrieval for unknown session",
            extra={"session_id": session_id},
        )
        raise HTTPException(status_code=404, detail=e.message)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)

    return RetrieveResponse(
        **result.model_dump(),
        formatted_context=format_context(result),
    )


@router.get("", response_model=SessionListResponse)
def list_sessions(
    retrieval_service: RetrievalService = Depends(get_retrieval_service),
) -> SessionListResponse:
    """List every session that holds a document."""
    sessions = retrieval_service.list_sessions()
    return SessionListResponse(count=len(sessions), sessions=sessions)


@router.get("/{session_id}", response_model=SessionSummary)
def get_session(
    session_id: str,
    retrieval_service: RetrievalService = Depends(get_retrieval_service),
) -> SessionSummary:
    """
    Get info on a session's document.

    Raises:
        HTTPException(404): Session not found
    """
    info = retrieval_service.get_document_info(session_id)
    if info is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return SessionSummary(session_id=session_id, **info.model_dump())


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_session(
    session_id: str,
    retrieval_service: RetrievalService = Depends(get_retrieval_service),
) -> Response:
    """
    Clear a session's document.

    Raises:
        HTTPException(404): Session not found
    """
    if not retrieval_service.clear_document(session_id):
        raise HTTPException(status_code=404, detail="Session not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
