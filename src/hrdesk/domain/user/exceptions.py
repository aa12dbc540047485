"""User domain exceptions."""

from hrdesk.domain.shared.exceptions import ConflictError


class UserAlreadyExistsError(ConflictError):
    """Username or email already registered."""

    def __init__(self, username: str, email: str) -> None:
        self.username = username
        self.email = email
        super().__init__(
            "A user with this username or email already exists",
            details={"username": username, "email": email},
        )
