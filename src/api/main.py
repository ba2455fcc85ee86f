"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.models.responses import ErrorCodes, ErrorResponse
from api.routes import events_router, feedback_router, health_router
from core.config import (
    API_DEBUG,
    API_VERSION,
    COSMOS_DB_CONNECTION,
    COSMOS_DB_DATABASE,
    CORS_ALLOW_HEADERS,
    CORS_ALLOW_METHODS,
    CORS_ALLOW_ORIGINS,
    EVENTS_CONTAINER,
    FEEDBACK_CONTAINER,
    LOG_LEVEL,
)
from core.database import CosmosDocumentStore, DocumentStore, create_cosmos_client
from services.events import EventService
from services.feedback import FeedbackService

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(
    event_store: DocumentStore | None = None,
    feedback_store: DocumentStore | None = None,
) -> FastAPI:
    """
    Build the API.

    Stores that are not passed in are created against Cosmos DB at startup
    from COSMOS_DB_CONNECTION.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler for startup/shutdown."""
        # Startup: connect and make sure both containers exist
        if app.state.event_service is None or app.state.feedback_service is None:
            client = create_cosmos_client(COSMOS_DB_CONNECTION)
            if app.state.event_service is None:
                app.state.event_service = EventService(
                    CosmosDocumentStore(client, COSMOS_DB_DATABASE, EVENTS_CONTAINER)
                )
            if app.state.feedback_service is None:
                app.state.feedback_service = FeedbackService(
                    CosmosDocumentStore(client, COSMOS_DB_DATABASE, FEEDBACK_CONTAINER)
                )

        try:
            app.state.event_service.ensure_storage()
            app.state.feedback_service.ensure_storage()
        except Exception:
            logger.exception("Failed to initialize Cosmos DB resources")
            raise

        yield

    app = FastAPI(
        title="Calendar Events & Feedback API",
        description="REST API for storing calendar events and user feedback in Cosmos DB",
        version=API_VERSION,
        debug=API_DEBUG,
        lifespan=lifespan,
    )
    app.state.event_service = EventService(event_store) if event_store is not None else None
    app.state.feedback_service = FeedbackService(feedback_store) if feedback_store is not None else None

    if CORS_ALLOW_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=CORS_ALLOW_ORIGINS,
            allow_methods=CORS_ALLOW_METHODS,
            allow_headers=CORS_ALLOW_HEADERS,
        )

    # Global exception handler for unexpected errors
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions with standard error format."""
        logger.error("Unhandled error on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error="Internal server error",
                code=ErrorCodes.INTERNAL_ERROR,
                details=[],
            ).model_dump(),
        )

    # Include routers
    app.include_router(health_router)
    app.include_router(events_router)
    app.include_router(feedback_router)

    return app


app = create_app()


# Entry point for uvicorn
if __name__ == "__main__":
    import uvicorn

    from core.config import API_HOST, API_PORT

    uvicorn.run(
        "api.main:app",
        host=API_HOST,
        port=API_PORT,
        reload=API_DEBUG,
    )
