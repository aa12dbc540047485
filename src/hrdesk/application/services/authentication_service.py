"""Authentication service for signup and login."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from hrdesk.application.dtos import AuthResultDTO, UserDTO
from hrdesk.application.services.error_boundary import handle_errors
from hrdesk.application.validation import require_fields, require_max_length
from hrdesk.domain.shared.exceptions import (
    AuthenticationFailedError,
    InvalidInputError,
)
from hrdesk.domain.user import (
    EMAIL_MAX_LENGTH,
    USERNAME_MAX_LENGTH,
    User,
    UserAlreadyExistsError,
)
from hrdesk_auth import JWTService, PasswordHashingService, WeakPasswordError

if TYPE_CHECKING:
    from hrdesk.domain.user import UserRepository

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Application service for user authentication.

    Orchestrates hrdesk_auth infrastructure (password hashing, JWT tokens)
    with the User domain to provide:
    - Signup (duplicate check, hashing, insert)
    - Login with username and password (upgrading outdated password hashes)

    Unknown usernames and wrong passwords fail with the same message; only
    the server log tells them apart.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    @handle_errors("signup")
    async def signup(
        self,
        username: str | None,
        email: str | None,
        password: str | None,
    ) -> UserDTO:
        require_fields(username=username, email=email, password=password)
        require_max_length(USERNAME_MAX_LENGTH, username=username.strip())
        require_max_length(EMAIL_MAX_LENGTH, email=email.strip())

        existing = await self._user_repo.find_by_username_or_email(username, email)
        if existing is not None:
            logger.info("Signup rejected, username or email taken: %s", username)
            raise UserAlreadyExistsError(username, email)

        try:
            password_hash = await asyncio.to_thread(
                self._password_service.hash,
                password,
            )
        except WeakPasswordError as e:
            raise InvalidInputError(e.message) from e

        # A concurrent signup can still win the race; the unique constraints
        # turn that into UserAlreadyExistsError inside insert().
        user = await self._user_repo.insert(User.create(username, email, password_hash))

        logger.info("User signed up: %s", user.username)
        return UserDTO.from_user(user)

    @handle_errors("login")
    async def login(
        self,
        username: str | None,
        password: str | None,
    ) -> AuthResultDTO:
        require_fields(username=username, password=password)

        user = await self._user_repo.find_one(username=username.strip())
        if user is None:
            logger.info("Login failed for %s: no such user", username)
            raise AuthenticationFailedError

        password_ok = await asyncio.to_thread(
            self._password_service.verify,
            password,
            user.password_hash,
        )
        if not password_ok:
            logger.info("Login failed for %s: wrong password", username)
            raise AuthenticationFailedError

        if self._password_service.needs_rehash(user.password_hash):
            await self._rehash_password(user, password)

        token = self._jwt_service.create_access_token(
            user_id=user.id,
            username=user.username,
        )

        logger.info("User logged in: %s", user.username)
        return AuthResultDTO(
            token=token,
            user=UserDTO.from_user(user),
            token_expiration_hours=self._jwt_service.access_token_expire_hours,
        )

    async def _rehash_password(self, user: User, password: str) -> None:
        """Re-hash a stored password made with an outdated work factor."""
        password_hash = await asyncio.to_thread(self._password_service.hash, password)
        await self._user_repo.update_by_id(user.id, {"password_hash": password_hash})
        logger.info(
            "Upgraded password hash for %s to %d rounds",
            user.username,
            self._password_service.rounds,
        )
