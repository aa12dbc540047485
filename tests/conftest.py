"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/                  # Fast, isolated tests (mocked repositories)
    │   ├── hrdesk_auth/       # Password hashing and JWT tokens
    │   ├── hrdesk_config/     # Settings loading
    │   └── application/       # Validation and operation handlers
    ├── integration/           # In-memory SQLite through SQLAlchemy
    │   ├── persistence/       # Repositories
    │   └── api/               # HTTP transport end-to-end
    └── shared/                # Shared fixtures

Settings are pointed at an in-memory SQLite database before any hrdesk
module is imported, so the module-level FastAPI app can be built.
"""

import os

os.environ.setdefault("JWT_SECRET_KEY", "test-jwt-secret-for-testing-only")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("PASSWORD_HASH_ROUNDS", "4")
os.environ.setdefault("HRDESK_ENV_FILE", os.devnull)

import pytest  # noqa: E402

from hrdesk_config import clear_settings_cache  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Make every test session start from freshly loaded settings."""
    clear_settings_cache()
    yield
    clear_settings_cache()
