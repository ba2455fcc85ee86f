"""
Data models for calendar events and feedback records.

Incoming JSON is matched to these fields case-insensitively; unknown
properties are dropped. Presence of required fields is checked by the
services, not here.
"""

import json

from pydantic import BaseModel, model_validator

from core.validation import fold_keys


class CaseInsensitiveModel(BaseModel):
    """Base model binding property names regardless of case."""

    @model_validator(mode="before")
    @classmethod
    def fold_property_names(cls, data):
        if isinstance(data, dict):
            return fold_keys(data, cls.model_fields)
        return data

    def to_record(self) -> dict:
        """Plain dict for the document store."""
        return self.model_dump()


class Event(CaseInsensitiveModel):
    """Calendar entry."""

    id: str | None = None
    title: str | None = None
    date: str | None = None
    time: str | None = None


class DeleteEventRequest(CaseInsensitiveModel):
    """Body of DELETE /api/events."""

    id: str | None = None
    date: str | None = None


class Feedback(CaseInsensitiveModel):
    """User-submitted feedback note."""

    id: str | None = None
    feedbackArea: str | None = None
    feedbackText: str | None = None
    feedbackType: str | None = None


def parse_payload(raw_body: bytes | str, model: type[CaseInsensitiveModel]):
    """
    Bind a JSON request body to a model.

    Returns None for a literal JSON null.

    Raises:
        ValueError: malformed JSON, or a body that does not fit the model
            (json.JSONDecodeError and pydantic.ValidationError both derive
            from ValueError)
    """
    data = json.loads(raw_body)
    if data is None:
        return None
    return model.model_validate(data)
