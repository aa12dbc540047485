"""SQLAlchemy implementation of EmployeeRepository."""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hrdesk.domain.employee import CORE_FIELDS, Employee, EmployeeRepository
from hrdesk.domain.shared.time import ensure_tz_aware, utc_now
from hrdesk.infrastructure.persistence.sqlalchemy.models import EmployeeModel

logger = logging.getLogger(__name__)

_FILTER_COLUMNS = {
    "id": EmployeeModel.id,
    "first_name": EmployeeModel.first_name,
    "last_name": EmployeeModel.last_name,
    "designation": EmployeeModel.designation,
    "department": EmployeeModel.department,
}


class EmployeeRepositorySQLAlchemy(EmployeeRepository):
    """SQLAlchemy implementation of the EmployeeRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_one(self, **filters: Any) -> Employee | None:
        result = await self._session.execute(self._select(filters).limit(1))
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def find_by_id(self, record_id: UUID) -> Employee | None:
        model = await self._session.get(EmployeeModel, record_id)
        return self._map_to_domain(model) if model else None

    async def find_many(self, **filters: Any) -> list[Employee]:
        result = await self._session.execute(self._select(filters))
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def insert(self, record: Employee) -> Employee:
        self._session.add(self._map_to_model(record))
        await self._session.flush()
        logger.info("Created employee: %s", record.id)
        return record

    async def update_by_id(
        self,
        record_id: UUID,
        fields: dict[str, Any],
    ) -> Employee | None:
        model = await self._session.get(EmployeeModel, record_id)
        if model is None:
            return None

        for key, value in fields.items():
            if key == "attributes":
                # Reassign so the JSON column is marked dirty
                model.attributes = {**(model.attributes or {}), **value}
            elif key in CORE_FIELDS:
                setattr(model, key, value)
            else:
                msg = f"Unknown employee field: {key}"
                raise ValueError(msg)

        model.updated_at = utc_now()
        await self._session.flush()
        logger.debug("Updated employee: %s (fields: %s)", record_id, sorted(fields))
        return self._map_to_domain(model)

    async def delete_by_id(self, record_id: UUID) -> Employee | None:
        model = await self._session.get(EmployeeModel, record_id)
        if model is None:
            return None

        employee = self._map_to_domain(model)
        await self._session.delete(model)
        await self._session.flush()
        logger.info("Deleted employee: %s", record_id)
        return employee

    def _select(self, filters: dict[str, Any]):
        stmt = select(EmployeeModel).order_by(
            EmployeeModel.created_at,
            EmployeeModel.id,
        )
        for key, value in filters.items():
            column = _FILTER_COLUMNS.get(key)
            if column is None:
                msg = f"Cannot filter employees by: {key}"
                raise ValueError(msg)
            stmt = stmt.where(column == value)
        return stmt

    def _map_to_domain(self, model: EmployeeModel) -> Employee:
        return Employee.reconstitute(
            id=model.id,
            first_name=model.first_name,
            last_name=model.last_name,
            designation=model.designation,
            department=model.department,
            attributes=model.attributes,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, employee: Employee) -> EmployeeModel:
        return EmployeeModel(
            id=employee.id,
            first_name=employee.first_name,
            last_name=employee.last_name,
            designation=employee.designation,
            department=employee.department,
            attributes=employee.attributes,
            created_at=employee.created_at,
            updated_at=employee.updated_at,
        )
