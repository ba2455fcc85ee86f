"""API Pydantic models."""

from .responses import (
    ErrorCodes,
    ErrorResponse,
    EventCreatedResponse,
    EventResponse,
    HealthResponse,
    MessageResponse,
    error_response,
)

__all__ = [
    "HealthResponse",
    "MessageResponse",
    "EventCreatedResponse",
    "EventResponse",
    "ErrorResponse",
    "ErrorCodes",
    "error_response",
]
