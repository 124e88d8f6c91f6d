"""
FastAPI application with assembled routers.

Initializes FastAPI app with API routers and configures uvicorn server.

Dependencies: fastapi, parsebot.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

from contextlib import asynccontextmanager
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from parsebot.api import api_router
from parsebot.api.deps import get_document_store
from parsebot.configs import get_settings
from parsebot.observability.logger import configure_logging
from parsebot.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging on startup and drops stored documents on shutdown.
    """
    configure_logging(get_settings().log_level)
    logger.info("Application startup: logging configured")

    yield

    get_document_store().clear()
    logger.info("Application shutdown: document store cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    app = FastAPI(
        title="Parsebot Retrieval API",
        description="Session-scoped TF-IDF retrieval over extracted document text",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Add observability middleware (added first = last to execute)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(api_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "parsebot.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
