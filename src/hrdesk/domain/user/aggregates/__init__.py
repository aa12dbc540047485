from hrdesk.domain.user.aggregates.user import (
    EMAIL_MAX_LENGTH,
    USERNAME_MAX_LENGTH,
    User,
    normalize_email,
)

__all__ = ["EMAIL_MAX_LENGTH", "USERNAME_MAX_LENGTH", "User", "normalize_email"]
