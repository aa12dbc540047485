"""SQLAlchemy implementation of UserRepository."""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from hrdesk.domain.shared.time import ensure_tz_aware
from hrdesk.domain.user import (
    User,
    UserAlreadyExistsError,
    UserRepository,
    normalize_email,
)
from hrdesk.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)

_FILTER_COLUMNS = {
    "id": UserModel.id,
    "username": UserModel.username,
    "email": UserModel.email,
}


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface.

    No operation edits a user; ``update_by_id`` is only used by login to
    store an upgraded password hash.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_one(self, **filters: Any) -> User | None:
        stmt = self._select(filters).limit(1)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def find_by_id(self, record_id: UUID) -> User | None:
        model = await self._session.get(UserModel, record_id)
        return self._map_to_domain(model) if model else None

    async def find_many(self, **filters: Any) -> list[User]:
        result = await self._session.execute(self._select(filters))
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def find_by_username_or_email(
        self,
        username: str,
        email: str,
    ) -> User | None:
        stmt = (
            select(UserModel)
            .where(
                or_(
                    UserModel.username == username.strip(),
                    UserModel.email == normalize_email(email),
                ),
            )
            .limit(1)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def insert(self, record: User) -> User:
        self._session.add(self._map_to_model(record))
        try:
            await self._session.flush()
        except IntegrityError as e:
            if "UNIQUE constraint failed" in str(e) or "unique" in str(e).lower():
                raise UserAlreadyExistsError(record.username, record.email) from e
            raise

        logger.info("Created user: %s (username: %s)", record.id, record.username)
        return record

    async def update_by_id(
        self,
        record_id: UUID,
        fields: dict[str, Any],
    ) -> User | None:
        model = await self._session.get(UserModel, record_id)
        if model is None:
            return None

        for key, value in fields.items():
            if key not in ("username", "email", "password_hash"):
                msg = f"Unknown user field: {key}"
                raise ValueError(msg)
            setattr(model, key, normalize_email(value) if key == "email" else value)

        try:
            await self._session.flush()
        except IntegrityError as e:
            raise UserAlreadyExistsError(
                fields.get("username", ""),
                fields.get("email", ""),
            ) from e
        return self._map_to_domain(model)

    async def delete_by_id(self, record_id: UUID) -> User | None:
        model = await self._session.get(UserModel, record_id)
        if model is None:
            return None

        user = self._map_to_domain(model)
        await self._session.delete(model)
        await self._session.flush()
        logger.info("Deleted user: %s", record_id)
        return user

    def _select(self, filters: dict[str, Any]):
        stmt = select(UserModel).order_by(UserModel.created_at, UserModel.id)
        for key, value in filters.items():
            column = _FILTER_COLUMNS.get(key)
            if column is None:
                msg = f"Cannot filter users by: {key}"
                raise ValueError(msg)
            if key == "email":
                value = normalize_email(value)
            stmt = stmt.where(column == value)
        return stmt

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            username=model.username,
            email=model.email,
            password_hash=model.password_hash,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            username=user.username,
            email=user.email,
            password_hash=user.password_hash,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
