"""
Calendar event operations against the events container.

Each operation performs at most one store call and reports its outcome as a
Result; nothing here raises for expected failures.
"""

import json
import logging

from core.config import (
    DELETE_REQUIRED_FIELDS,
    EVENT_REQUIRED_FIELDS,
    EVENTS_CONTAINER_THROUGHPUT,
    EVENTS_INDEXING_POLICY,
    PARTITION_KEY_PATH,
)
from core.database import DocumentStore, FieldFilter, RecordNotFoundError
from core.errors import Result, ServiceError
from core.validation import is_blank, missing_fields, new_record_id
from models.events import DeleteEventRequest, Event, parse_payload

logger = logging.getLogger(__name__)


class EventService:
    """Create, list and delete calendar events."""

    def __init__(self, store: DocumentStore) -> None:
        self._store = store

    def ensure_storage(self) -> None:
        """Provision the events container (partitioned on id)."""
        self._store.ensure_container(
            PARTITION_KEY_PATH,
            indexing_policy=EVENTS_INDEXING_POLICY,
            throughput=EVENTS_CONTAINER_THROUGHPUT,
        )

    def create_event(self, raw_body: bytes) -> Result:
        """
        Create one event from a JSON body.

        The client-supplied id is kept when present; otherwise a new one is
        generated. Returns {"message", "eventId"} on success.
        """
        try:
            event = parse_payload(raw_body, Event)
        except ValueError as e:
            logger.error("Error reading event payload: %s", e)
            return Result.failure(ServiceError.internal())

        if event is None:
            return Result.failure(
                ServiceError.validation("Invalid event data. Title and date are required.")
            )
        errors = missing_fields(event.to_record(), EVENT_REQUIRED_FIELDS)
        if errors:
            return Result.failure(
                ServiceError.validation("Invalid event data. Title and date are required.", errors)
            )

        if is_blank(event.id):
            event.id = new_record_id()
        record = event.to_record()
        logger.info("Creating event: %s", json.dumps(record))

        try:
            self._store.create_item(record, partition_key=record["id"])
        except Exception:
            logger.exception("Error creating event %s", record["id"])
            return Result.failure(ServiceError.internal())

        return Result.success({"message": "Event created successfully!", "eventId": record["id"]})

    def list_events(
        self,
        date: str | None = None,
        start_date: str | None = None,
        end_date: str | None = None,
    ) -> Result:
        """
        Return events on a single date, or within an inclusive date range.

        'date' wins when both forms are supplied.
        """
        if not is_blank(date):
            predicate = FieldFilter.equal("date", date)
        elif not is_blank(start_date) and not is_blank(end_date):
            predicate = FieldFilter.between("date", start_date, end_date)
        else:
            return Result.failure(
                ServiceError.validation(
                    "Query parameter 'date' or both 'startDate' and 'endDate' are required."
                )
            )

        query, _ = predicate.to_query()
        logger.info("Executing query: %s", query)

        try:
            records = self._store.query_items(predicate)
            events = [{name: record.get(name) for name in Event.model_fields} for record in records]
        except Exception:
            logger.exception("Error querying events")
            return Result.failure(ServiceError.internal())

        return Result.success(events)

    def delete_event(self, raw_body: bytes) -> Result:
        """
        Delete the event named by a JSON body {id, date}.

        The id is the partition key; date is required but only logged.
        """
        try:
            request = parse_payload(raw_body, DeleteEventRequest)
        except ValueError as e:
            logger.error("Error reading delete payload: %s", e)
            return Result.failure(ServiceError.internal())

        if request is None:
            return Result.failure(
                ServiceError.validation("Invalid delete request. 'id' and 'date' are required.")
            )
        errors = missing_fields(request.to_record(), DELETE_REQUIRED_FIELDS)
        if errors:
            return Result.failure(
                ServiceError.validation(
                    "Invalid delete request. 'id' and 'date' are required.", errors
                )
            )

        logger.info("Deleting event with id: %s, date: %s", request.id, request.date)

        try:
            self._store.delete_item(request.id, partition_key=request.id)
        except RecordNotFoundError:
            logger.warning("Event %s not found", request.id)
            return Result.failure(ServiceError.not_found("Event not found."))
        except Exception:
            logger.exception("Error deleting event %s", request.id)
            return Result.failure(ServiceError.internal())

        return Result.success({"message": "Event deleted successfully!"})
