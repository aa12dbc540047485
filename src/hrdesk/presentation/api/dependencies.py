"""FastAPI dependency injection for the HRDesk API.

Provides dependencies for:
- Database engine and sessions
- Bearer token verification
- Operation handler instances
"""

import logging
from functools import lru_cache
from typing import Annotated, Any, AsyncGenerator

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from hrdesk.application.services import AuthenticationService, EmployeeService
from hrdesk.domain.shared.exceptions import AuthenticationFailedError
from hrdesk.infrastructure.persistence.sqlalchemy.models import Base
from hrdesk.infrastructure.persistence.sqlalchemy.repositories import (
    EmployeeRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)
from hrdesk.presentation.api.config import get_api_settings
from hrdesk_auth import InvalidTokenError, JWTService, PasswordHashingService
from hrdesk_auth.schemas import TokenPayload
from hrdesk_config.settings import Settings

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


def _engine_options(url: str) -> dict[str, Any]:
    # An in-memory SQLite database only lives as long as its one connection
    if url.startswith("sqlite") and (":memory:" in url or url.endswith("://")):
        return {
            "poolclass": StaticPool,
            "connect_args": {"check_same_thread": False},
        }
    return {"pool_pre_ping": True}  # Verify connections before use


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    The engine manages the connection pool and is reused across all requests.

    Returns
    -------
    AsyncEngine instance
    """
    settings = get_api_settings()
    url = settings.async_database_url
    return create_async_engine(
        url,
        echo=settings.database_echo,
        **_engine_options(url),
    )


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """
    Get the shared async session maker (singleton).

    Returns
    -------
    async_sessionmaker configured with the shared engine
    """
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request using the shared engine/pool.

    Yields
    ------
    AsyncSession for database operations
    """
    async with get_session_maker()() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database schema is up to date (missing tables created if needed)")


def reset_engine_cache() -> None:
    """Forget the cached engine and session maker (tests, reconfiguration)."""
    get_session_maker.cache_clear()
    get_engine.cache_clear()


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_jwt_service(
    settings: Settings = Depends(get_api_settings),
) -> JWTService:
    """Get JWT service configured with API settings."""
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_hours=settings.jwt_access_token_expire_hours,
    )


def get_password_service(
    settings: Settings = Depends(get_api_settings),
) -> PasswordHashingService:
    """Get password hashing service."""
    return PasswordHashingService(rounds=settings.password_hash_rounds)


async def get_optional_token_payload(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> TokenPayload | None:
    """Verify a bearer token when the request carries one.

    No operation requires authentication, but a presented token must be
    genuine and unexpired.
    """
    if credentials is None:
        return None

    try:
        payload = jwt_service.verify_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.info("Rejected bearer token: %s", e.message)
        msg = "Invalid or expired token"
        raise AuthenticationFailedError(msg) from e

    if not payload.is_access_token():
        logger.info("Rejected bearer token of type %s", payload.token_type)
        msg = "Invalid or expired token"
        raise AuthenticationFailedError(msg)

    logger.debug("Request authenticated as %s", payload.username)
    return payload


OptionalTokenPayload = Annotated[
    TokenPayload | None,
    Depends(get_optional_token_payload),
]


# -----------------------------------------------------------------------------
# Operation Handlers
# -----------------------------------------------------------------------------


async def get_authentication_service(
    session: DBSession,
    jwt_service: JWTService = Depends(get_jwt_service),
    password_service: PasswordHashingService = Depends(get_password_service),
) -> AuthenticationService:
    """
    Get authentication service with all dependencies.

    This service handles signup and login.
    """
    return AuthenticationService(
        user_repository=UserRepositorySQLAlchemy(session),
        password_service=password_service,
        jwt_service=jwt_service,
    )


async def get_employee_service(session: DBSession) -> EmployeeService:
    """Get employee service bound to the request session."""
    return EmployeeService(employee_repository=EmployeeRepositorySQLAlchemy(session))


AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]
EmployeeServiceDep = Annotated[EmployeeService, Depends(get_employee_service)]
