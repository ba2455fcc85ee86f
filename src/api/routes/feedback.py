"""Feedback submission endpoint."""

import asyncio
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request

from api.dependencies import get_feedback_service, verify_api_key
from api.logging import respond, start_request_log, write_request_log
from api.models.responses import MessageResponse
from services.feedback import FeedbackService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", dependencies=[Depends(verify_api_key)])


@router.post(
    "/feedback",
    response_model=MessageResponse,
    responses={
        400: {"description": "Missing or empty required fields"},
        500: {"description": "Store failure or unreadable body"},
    },
)
async def submit_feedback(
    request: Request,
    service: Annotated[FeedbackService, Depends(get_feedback_service)],
):
    """
    Submit feedback.

    Body: {"feedbackArea", "feedbackText", "feedbackType"}. Any id in the
    body is ignored.
    """
    logger.info("Processing feedback submission.")
    request_log = start_request_log(request)
    try:
        body = await request.body()
        result = await asyncio.to_thread(service.submit_feedback, body)
        return respond(result, request_log)
    except Exception:
        request_log.record_failure()
        raise
    finally:
        write_request_log(request_log)
