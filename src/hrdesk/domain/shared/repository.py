"""Generic record store interface.

Every collection (users, employees) is accessed through the same six
operations. Filters are equality matches on named fields.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar
from uuid import UUID

T = TypeVar("T")


class RecordRepository(ABC, Generic[T]):
    """Repository interface shared by all record kinds."""

    @abstractmethod
    async def find_one(self, **filters: Any) -> Optional[T]:
        """Return the first record matching all filters."""

    @abstractmethod
    async def find_by_id(self, record_id: UUID) -> Optional[T]:
        """Return the record with the given id."""

    @abstractmethod
    async def find_many(self, **filters: Any) -> list[T]:
        """Return every record matching all filters (all records if none)."""

    @abstractmethod
    async def insert(self, record: T) -> T:
        """Persist a new record and return it."""

    @abstractmethod
    async def update_by_id(self, record_id: UUID, fields: dict[str, Any]) -> Optional[T]:
        """Apply a partial update; return the updated record or None."""

    @abstractmethod
    async def delete_by_id(self, record_id: UUID) -> Optional[T]:
        """Delete a record; return what was deleted or None."""
