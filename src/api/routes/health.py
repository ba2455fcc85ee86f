"""Health check endpoint."""

from fastapi import APIRouter, Response

from api.models.responses import HealthResponse
from core.config import API_VERSION, CORS_ALLOW_HEADERS, CORS_ALLOW_METHODS

router = APIRouter(prefix="/api")

PREFLIGHT_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": ", ".join(CORS_ALLOW_METHODS),
    "Access-Control-Allow-Headers": ", ".join(CORS_ALLOW_HEADERS),
}


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint for monitoring.

    Always returns the same payload; the document store is not contacted.
    """
    return HealthResponse(
        status="healthy",
        message="Service is running",
        version=API_VERSION,
    )


@router.options("/health")
async def health_preflight():
    """Answer a CORS pre-flight with permissive headers."""
    return Response(status_code=200, headers=PREFLIGHT_HEADERS)
