"""Auth schemas and data structures.

These are simple data classes used for transferring authentication
data between components.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    This represents the data extracted from a verified JWT token.

    Attributes
    ----------
    user_id
        The unique identifier of the user
    username
        The user's login name
    exp
        Token expiration timestamp
    token_type
        Only "access" tokens are issued
    """

    user_id: UUID
    username: str
    exp: datetime
    token_type: str

    def is_access_token(self) -> bool:
        """Check if this is an access token."""
        return self.token_type == "access"
