"""User repository interface."""

from abc import abstractmethod
from typing import Optional

from hrdesk.domain.shared.repository import RecordRepository
from hrdesk.domain.user.aggregates.user import User


class UserRepository(RecordRepository[User]):
    """Repository interface for User aggregates.

    Implementations must enforce uniqueness of username and email and
    raise UserAlreadyExistsError when an insert violates it.
    """

    @abstractmethod
    async def find_by_username_or_email(
        self,
        username: str,
        email: str,
    ) -> Optional[User]:
        """Find a user whose username or email matches."""
