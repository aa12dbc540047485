"""Authentication services.

Provides password hashing and JWT token management.
"""

from hrdesk_auth.services.jwt_service import JWTService
from hrdesk_auth.services.password_service import PasswordHashingService

__all__ = [
    "PasswordHashingService",
    "JWTService",
]
