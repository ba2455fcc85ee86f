"""FastAPI dependencies for authentication and shared resources."""

import secrets

from fastapi import Header, HTTPException, Request, status

from api.models.responses import ErrorCodes
from core import config
from services.events import EventService
from services.feedback import FeedbackService


async def verify_api_key(
    x_functions_key: str | None = Header(None, alias=config.API_KEY_HEADER),
) -> str:
    """
    Verify the platform API key from the x-functions-key header.

    Raises:
        HTTPException: 401 if key is missing or invalid, 500 if the server has none
    """
    if not config.API_KEY:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={
                "error": "API key not configured on server",
                "code": ErrorCodes.INTERNAL_ERROR,
                "details": [],
            },
        )

    # Use constant-time comparison to prevent timing attacks
    if x_functions_key is None or not secrets.compare_digest(x_functions_key, config.API_KEY):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={
                "error": "Invalid or missing API key",
                "code": ErrorCodes.UNAUTHORIZED,
                "details": [],
            },
        )

    return x_functions_key


def get_event_service(request: Request) -> EventService:
    """EventService built at startup."""
    return request.app.state.event_service


def get_feedback_service(request: Request) -> FeedbackService:
    """FeedbackService built at startup."""
    return request.app.state.feedback_service
