"""Calendar event endpoints."""

import asyncio
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from api.dependencies import get_event_service, verify_api_key
from api.logging import respond, start_request_log, write_request_log
from api.models.responses import EventCreatedResponse, EventResponse, MessageResponse
from core.errors import Result, ServiceError
from services.events import EventService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", dependencies=[Depends(verify_api_key)])

EVENT_ERRORS = {
    400: {"description": "Missing or empty required fields"},
    500: {"description": "Store failure or unreadable body"},
}


@router.post(
    "/events",
    response_model=EventCreatedResponse,
    responses=EVENT_ERRORS,
)
async def create_event(
    request: Request,
    service: Annotated[EventService, Depends(get_event_service)],
):
    """
    Create a calendar event.

    Body: {"title", "date", "time"?, "id"?}. The id is generated when absent.
    """
    logger.info("Processing event request.")
    request_log = start_request_log(request)
    try:
        body = await request.body()
        result = await asyncio.to_thread(service.create_event, body)
        return respond(result, request_log)
    except Exception:
        request_log.record_failure()
        raise
    finally:
        write_request_log(request_log)


@router.get(
    "/events",
    response_model=list[EventResponse],
    responses=EVENT_ERRORS,
)
async def list_events(
    request: Request,
    service: Annotated[EventService, Depends(get_event_service)],
    date: Annotated[str | None, Query(description="Exact date")] = None,
    start_date: Annotated[str | None, Query(alias="startDate", description="Range start (inclusive)")] = None,
    end_date: Annotated[str | None, Query(alias="endDate", description="Range end (inclusive)")] = None,
):
    """
    List events for a date, or for an inclusive startDate/endDate range.
    """
    logger.info("Processing event request.")
    request_log = start_request_log(request)
    try:
        result = await asyncio.to_thread(service.list_events, date, start_date, end_date)
        return respond(result, request_log)
    except Exception:
        request_log.record_failure()
        raise
    finally:
        write_request_log(request_log)


@router.delete(
    "/events",
    response_model=MessageResponse,
    responses={**EVENT_ERRORS, 404: {"description": "Event does not exist"}},
)
async def delete_event(
    request: Request,
    service: Annotated[EventService, Depends(get_event_service)],
):
    """
    Delete an event. Body: {"id", "date"}.
    """
    logger.info("Processing event request.")
    request_log = start_request_log(request)
    try:
        body = await request.body()
        result = await asyncio.to_thread(service.delete_event, body)
        return respond(result, request_log)
    except Exception:
        request_log.record_failure()
        raise
    finally:
        write_request_log(request_log)


@router.api_route(
    "/events",
    methods=["PUT", "PATCH", "HEAD", "OPTIONS", "TRACE"],
    include_in_schema=False,
)
async def unsupported_event_method(request: Request):
    """Any other verb on the events resource is a bad request."""
    request_log = start_request_log(request)
    try:
        result = Result.failure(ServiceError.validation("Invalid request method."))
        return respond(result, request_log)
    except Exception:
        request_log.record_failure()
        raise
    finally:
        write_request_log(request_log)
