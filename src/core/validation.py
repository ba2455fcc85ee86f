"""
Request payload checks: property name folding and required fields.
"""

import uuid
from collections.abc import Iterable, Mapping


def fold_keys(payload: Mapping, field_names: Iterable[str]) -> dict:
    """
    Map property names onto canonical field names, ignoring case.

    'Title', 'TITLE' and 'title' all bind to 'title'. An exact match wins over
    a case-insensitive one; unknown properties are kept unchanged.
    """
    canonical = {name.lower(): name for name in field_names}
    folded: dict = {}
    for key, value in payload.items():
        if not isinstance(key, str):
            folded[key] = value
            continue
        target = canonical.get(key.lower(), key)
        if target in folded and key != target:
            # Exact spelling already seen
            continue
        folded[target] = value
    return folded


def is_blank(value) -> bool:
    """True for None and empty strings."""
    return value is None or value == ""


def missing_fields(record: Mapping, required: Iterable[str]) -> list[str]:
    """
    Check required fields and return one message per missing field.

    Only presence is checked: a field is missing when it is absent, null or
    an empty string.
    """
    errors = []
    for name in required:
        if is_blank(record.get(name)):
            errors.append(f"Missing required field '{name}'")
    return errors


def new_record_id() -> str:
    """Generate a unique record id."""
    return str(uuid.uuid4())
