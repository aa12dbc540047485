"""User domain: identity records created on signup."""

from hrdesk.domain.user.aggregates import (
    EMAIL_MAX_LENGTH,
    USERNAME_MAX_LENGTH,
    User,
    normalize_email,
)
from hrdesk.domain.user.exceptions import UserAlreadyExistsError
from hrdesk.domain.user.repositories import UserRepository

__all__ = [
    "EMAIL_MAX_LENGTH",
    "USERNAME_MAX_LENGTH",
    "User",
    "UserAlreadyExistsError",
    "UserRepository",
    "normalize_email",
]
