"""HRDesk Auth - Generic authentication infrastructure.

This package provides authentication infrastructure that is independent
of the employee domain. It handles:
- Password hashing (bcrypt)
- JWT token creation and verification

Architecture:
    hrdesk_auth/
    ├── services/           # Pure logic (password hashing, JWT)
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from hrdesk_auth import PasswordHashingService, JWTService
"""

from hrdesk_auth.exceptions import (
    AuthError,
    InvalidTokenError,
    WeakPasswordError,
)
from hrdesk_auth.schemas import TokenPayload
from hrdesk_auth.services import JWTService, PasswordHashingService

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    # Schemas
    "TokenPayload",
    # Exceptions
    "AuthError",
    "InvalidTokenError",
    "WeakPasswordError",
]
