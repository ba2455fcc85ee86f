"""Error kinds and result values returned by the services."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class ErrorKind(Enum):
    """Failure categories surfaced to API callers."""

    VALIDATION = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL = "INTERNAL_ERROR"


_STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INTERNAL: 500,
}


def status_for(kind: ErrorKind) -> int:
    """HTTP status code for an error kind."""
    return _STATUS_BY_KIND[kind]


@dataclass(frozen=True)
class ServiceError:
    """Failure with a user-safe message. Internal causes never go in here."""

    kind: ErrorKind
    message: str
    details: list[str] = field(default_factory=list)

    @classmethod
    def validation(cls, message: str, details: list[str] | None = None) -> "ServiceError":
        return cls(ErrorKind.VALIDATION, message, details or [])

    @classmethod
    def not_found(cls, message: str) -> "ServiceError":
        return cls(ErrorKind.NOT_FOUND, message)

    @classmethod
    def internal(cls) -> "ServiceError":
        return cls(ErrorKind.INTERNAL, "Internal server error")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a value or a ServiceError."""

    value: T | None = None
    error: ServiceError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Any) -> "Result":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ServiceError) -> "Result":
        return cls(error=error)
