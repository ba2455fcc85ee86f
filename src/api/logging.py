"""SQLite request logging for API."""

import logging
import sqlite3
import time
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

from fastapi import Request
from fastapi.responses import JSONResponse

from api.models.responses import error_response
from core import config
from core.errors import ErrorKind, Result

logger = logging.getLogger(__name__)


@dataclass
class RequestLog:
    """Captured request/response data for logging."""

    request_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )
    started: float = field(default_factory=time.time, repr=False)
    endpoint: str = ""
    method: str = ""
    client_ip: str | None = None
    record_id: str | None = None
    result_count: int | None = None
    status_code: int = 0
    error_code: str | None = None
    error_message: str | None = None
    processing_time_ms: int = 0
    details: list[tuple[str, str]] = field(default_factory=list)  # (type, message)

    def record_result(self, result: Result, status_code: int) -> None:
        """Copy the outcome of a service call onto the log entry."""
        self.status_code = status_code
        self.processing_time_ms = int((time.time() - self.started) * 1000)
        if result.ok:
            if isinstance(result.value, list):
                self.result_count = len(result.value)
            elif isinstance(result.value, dict) and result.value.get("eventId"):
                self.record_id = result.value["eventId"]
            return
        self.error_code = result.error.kind.value
        self.error_message = result.error.message
        if result.error.kind is ErrorKind.VALIDATION:
            for detail in result.error.details:
                self.details.append(("validation_error", detail))

    def record_failure(self) -> None:
        """Mark the request as failed before a response could be rendered."""
        self.status_code = 500
        self.error_code = ErrorKind.INTERNAL.value
        self.error_message = "Internal server error"
        self.processing_time_ms = int((time.time() - self.started) * 1000)


def get_client_ip(request: Request) -> str:
    """Extract client IP from request, handling proxies."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


def start_request_log(request: Request) -> RequestLog:
    return RequestLog(
        endpoint=request.url.path,
        method=request.method,
        client_ip=get_client_ip(request),
    )


def log_request(log: RequestLog) -> None:
    """Write request log to SQLite database."""
    conn = sqlite3.connect(config.DB_PATH)
    try:
        cursor = conn.cursor()

        # Insert main request record
        cursor.execute(
            """
            INSERT INTO api_requests (
                request_id, timestamp, endpoint, method, client_ip,
                record_id, result_count, status_code, error_code,
                error_message, processing_time_ms
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
        """,
            (
                log.request_id,
                log.timestamp,
                log.endpoint,
                log.method,
                log.client_ip,
                log.record_id,
                log.result_count,
                log.status_code,
                log.error_code,
                log.error_message,
                log.processing_time_ms,
            ),
        )

        # Insert detail records
        for detail_type, message in log.details:
            cursor.execute(
                """
                INSERT INTO api_request_details (request_id, detail_type, message)
                VALUES (?, ?, ?)
            """,
                (log.request_id, detail_type, message),
            )

        conn.commit()
    finally:
        conn.close()


def write_request_log(log: RequestLog) -> None:
    """Persist a request log; failures are reported, never raised."""
    try:
        log_request(log)
    except sqlite3.Error as e:
        logger.warning("Could not write request log %s: %s", log.request_id, e)


def respond(result: Result, log: RequestLog, success_status: int = 200) -> JSONResponse:
    """Render a service result and record its outcome on the request log."""
    if result.ok:
        log.record_result(result, success_status)
        return JSONResponse(status_code=success_status, content=result.value)
    response = error_response(result.error)
    log.record_result(result, response.status_code)
    return response
