"""Pydantic response models for API endpoints."""

from fastapi.responses import JSONResponse
from pydantic import BaseModel

from core.errors import ErrorKind, ServiceError, status_for


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    message: str
    version: str


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str


class EventCreatedResponse(BaseModel):
    """Acknowledgement for POST /api/events."""

    message: str
    eventId: str


class EventResponse(BaseModel):
    """Event as returned by GET /api/events."""

    id: str | None = None
    title: str | None = None
    date: str | None = None
    time: str | None = None


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    code: str
    details: list[str] = []


class ErrorCodes:
    """Error codes not produced by a service ErrorKind."""

    UNAUTHORIZED = "UNAUTHORIZED"
    INTERNAL_ERROR = ErrorKind.INTERNAL.value


def error_response(error: ServiceError) -> JSONResponse:
    """Render a ServiceError in the standard error format."""
    return JSONResponse(
        status_code=status_for(error.kind),
        content=ErrorResponse(
            error=error.message,
            code=error.kind.value,
            details=error.details,
        ).model_dump(),
    )
