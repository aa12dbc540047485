"""Fixtures for integration tests."""

from tests.shared.fixtures.database import async_engine, db_session  # noqa: F401
