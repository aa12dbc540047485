"""Shared domain building blocks."""

from hrdesk.domain.shared.exceptions import (
    AuthenticationFailedError,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    InternalError,
    InvalidInputError,
)
from hrdesk.domain.shared.repository import RecordRepository
from hrdesk.domain.shared.time import utc_now

__all__ = [
    "AuthenticationFailedError",
    "ConflictError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "InternalError",
    "InvalidInputError",
    "RecordRepository",
    "utc_now",
]
