"""DTOs for signup and login results."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from hrdesk.domain.user import User


@dataclass(frozen=True)
class UserDTO:
    """Public view of a user. Never carries the password hash."""

    id: str
    username: str
    email: str
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> UserDTO:
        return cls(
            id=str(user.id),
            username=user.username,
            email=user.email,
            created_at=user.created_at,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "created_at": self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class AuthResultDTO:
    """Result of a successful login."""

    token: str
    user: UserDTO
    token_expiration_hours: int = 1

    def to_dict(self) -> dict:
        return {
            "token": self.token,
            "user": self.user.to_dict(),
            "token_expiration_hours": self.token_expiration_hours,
        }
