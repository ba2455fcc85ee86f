"""
Feedback submission.
"""

import json
import logging

from core.config import FEEDBACK_REQUIRED_FIELDS, PARTITION_KEY_PATH
from core.database import DocumentStore
from core.errors import Result, ServiceError
from core.validation import missing_fields, new_record_id
from models.events import Feedback, parse_payload

logger = logging.getLogger(__name__)


class FeedbackService:
    """Store user feedback notes. Create only."""

    def __init__(self, store: DocumentStore) -> None:
        self._store = store

    def ensure_storage(self) -> None:
        self._store.ensure_container(PARTITION_KEY_PATH)

    def submit_feedback(self, raw_body: bytes) -> Result:
        """
        Validate and store one feedback note.

        Any id sent by the client is replaced with a freshly generated one.
        """
        try:
            feedback = parse_payload(raw_body, Feedback)
        except ValueError as e:
            logger.error("Error reading feedback payload: %s", e)
            return Result.failure(ServiceError.internal())

        if feedback is None:
            return Result.failure(ServiceError.validation("Invalid feedback data."))
        errors = missing_fields(feedback.to_record(), FEEDBACK_REQUIRED_FIELDS)
        if errors:
            return Result.failure(ServiceError.validation("Invalid feedback data.", errors))

        feedback.id = new_record_id()
        record = feedback.to_record()
        logger.info("Feedback Data: %s", json.dumps(record))

        try:
            self._store.create_item(record, partition_key=record["id"])
        except Exception:
            logger.exception("Error saving feedback %s", record["id"])
            return Result.failure(ServiceError.internal())

        return Result.success({"message": "Feedback submitted successfully!"})
