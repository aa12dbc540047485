"""Integration tests for EmployeeRepositorySQLAlchemy on SQLite."""

from datetime import timedelta
from uuid import uuid4

import pytest

from hrdesk.domain.employee import Employee
from hrdesk.domain.shared.time import utc_now
from hrdesk.infrastructure.persistence.sqlalchemy.repositories import (
    EmployeeRepositorySQLAlchemy,
)

pytestmark = pytest.mark.integration


@pytest.fixture
def repo(db_session):
    return EmployeeRepositorySQLAlchemy(db_session)


def _employee(first_name, designation=None, department=None, minutes_ago=0, **attrs):
    created = utc_now() - timedelta(minutes=minutes_ago)
    return Employee.reconstitute(
        id=uuid4(),
        first_name=first_name,
        last_name="Test",
        designation=designation,
        department=department,
        attributes=attrs,
        created_at=created,
        updated_at=created,
    )


class TestEmployeeQueries:
    """Tests for reading employees back."""

    @pytest.mark.asyncio
    async def test_insert_round_trips_attributes(self, repo):
        employee = _employee(
            "Ann",
            "Engineer",
            "R&D",
            email="ann@example.com",
            skills=["python", "sql"],
            address={"city": "Berlin"},
        )
        await repo.insert(employee)

        found = await repo.find_by_id(employee.id)

        assert found.first_name == "Ann"
        assert found.attributes == {
            "email": "ann@example.com",
            "skills": ["python", "sql"],
            "address": {"city": "Berlin"},
        }

    @pytest.mark.asyncio
    async def test_find_many_orders_by_creation(self, repo):
        newest = _employee("Cy", minutes_ago=1)
        oldest = _employee("Ann", minutes_ago=3)
        middle = _employee("Bo", minutes_ago=2)
        for employee in (newest, oldest, middle):
            await repo.insert(employee)

        result = await repo.find_many()

        assert [e.first_name for e in result] == ["Ann", "Bo", "Cy"]

    @pytest.mark.asyncio
    async def test_find_many_on_empty_table(self, repo):
        assert await repo.find_many() == []

    @pytest.mark.asyncio
    async def test_filters_are_combined(self, repo):
        await repo.insert(_employee("Ann", "Engineer", "R&D", minutes_ago=3))
        await repo.insert(_employee("Bo", "Engineer", "Ops", minutes_ago=2))
        await repo.insert(_employee("Cy", "Manager", "R&D", minutes_ago=1))

        engineers = await repo.find_many(designation="Engineer")
        rnd_engineers = await repo.find_many(designation="Engineer", department="R&D")

        assert [e.first_name for e in engineers] == ["Ann", "Bo"]
        assert [e.first_name for e in rnd_engineers] == ["Ann"]

    @pytest.mark.asyncio
    async def test_filters_match_exactly(self, repo):
        await repo.insert(_employee("Ann", "Engineer"))

        assert await repo.find_many(designation="engineer") == []
        assert await repo.find_many(designation="Engine") == []


class TestEmployeeUpdates:
    """Tests for merge-patch updates and deletion."""

    @pytest.mark.asyncio
    async def test_update_merges_fields(self, repo):
        employee = _employee("Ann", "Engineer", "R&D", email="ann@example.com", age=30)
        await repo.insert(employee)

        updated = await repo.update_by_id(
            employee.id,
            {"designation": "Lead", "attributes": {"age": 31, "phone": "555"}},
        )

        assert updated.first_name == "Ann"
        assert updated.designation == "Lead"
        assert updated.department == "R&D"
        assert updated.attributes == {
            "email": "ann@example.com",
            "age": 31,
            "phone": "555",
        }
        assert updated.updated_at >= employee.updated_at

        reloaded = await repo.find_by_id(employee.id)
        assert reloaded.attributes["phone"] == "555"

    @pytest.mark.asyncio
    async def test_update_missing_record_returns_none(self, repo):
        assert await repo.update_by_id(uuid4(), {"designation": "Lead"}) is None

    @pytest.mark.asyncio
    async def test_update_unknown_column_is_rejected(self, repo):
        employee = _employee("Ann")
        await repo.insert(employee)

        with pytest.raises(ValueError, match="Unknown employee field"):
            await repo.update_by_id(employee.id, {"salary": 1})

    @pytest.mark.asyncio
    async def test_delete_by_id(self, repo):
        employee = _employee("Ann")
        await repo.insert(employee)

        deleted = await repo.delete_by_id(employee.id)

        assert deleted.id == employee.id
        assert await repo.find_by_id(employee.id) is None
        assert await repo.delete_by_id(employee.id) is None
