"""User aggregate for authentication identity."""

from datetime import datetime
from uuid import UUID, uuid4

from hrdesk.domain.shared.time import utc_now

USERNAME_MAX_LENGTH = 150
EMAIL_MAX_LENGTH = 320


def normalize_email(email: str) -> str:
    return email.strip().lower()


class User:
    """
    User aggregate root.

    Created on signup and never modified afterwards. The password hash is
    carried for credential checks only and must never be serialized.
    """

    def __init__(  # noqa: PLR0913
        self,
        username: str,
        email: str,
        password_hash: str,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id or uuid4()
        self._username = username.strip()
        self._email = normalize_email(email)
        self._password_hash = password_hash
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def username(self) -> str:
        return self._username

    @property
    def email(self) -> str:
        return self._email

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @classmethod
    def create(cls, username: str, email: str, password_hash: str) -> "User":
        return cls(username=username, email=email, password_hash=password_hash)

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: UUID,
        username: str,
        email: str,
        password_hash: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            username=username,
            email=email,
            password_hash=password_hash,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, username={self._username})"
