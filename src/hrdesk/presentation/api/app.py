"""FastAPI application factory.

Creates and configures the FastAPI application with the operations
router, middleware, and exception handlers.

API Versioning:
    Operations are served under the /api/v1/ prefix.
    The health check endpoint remains unversioned at /health.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from hrdesk import __version__
from hrdesk.presentation.api.dependencies import (
    create_tables,
    get_engine,
    reset_engine_cache,
)
from hrdesk.presentation.api.exception_handlers import setup_exception_handlers
from hrdesk.presentation.api.routers import operations_router
from hrdesk.presentation.api.schemas import HealthResponse
from hrdesk_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Configure application logging.

    Console output with timestamps and module names, the level taken from
    settings, and WARNING for noisy third-party libraries.
    """
    settings = get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name in ("hrdesk", "hrdesk_auth", "hrdesk_config"):
        logging.getLogger(name).setLevel(log_level)

    # Quiet down noisy third-party loggers
    for name in ("httpx", "httpcore", "sqlalchemy.engine", "aiosqlite", "asyncpg"):
        logging.getLogger(name).setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = __version__
API_V1_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {
        "name": "Operations",
        "description": """Employee directory operations.

**Authentication:**
- `signup` registers a user (password stored as a bcrypt hash)
- `login` returns a JWT valid for one hour

**Employees:**
- `getAllEmployees`, `getEmployeeById`
- `searchEmployeeByDesignationOrDepartment`
- `addEmployee`, `updateEmployeeById`, `deleteEmployeeById`

Employees accept arbitrary extra fields next to the named ones.
""",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
    {
        "name": "Info",
        "description": "API information and discovery.",
    },
]


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting HRDesk API v%s...", API_VERSION)
    engine = get_engine()
    try:
        await create_tables(engine)
    except (OSError, SQLAlchemyError) as e:
        logger.critical("Could not connect to the database: %s", e)
        raise SystemExit(1) from None

    yield

    logger.info("Shutting down HRDesk API...")
    await engine.dispose()
    reset_engine_cache()
    logger.info("Database connections closed")


def create_v1_router() -> APIRouter:
    """Create the v1 API router."""
    v1_router = APIRouter()
    v1_router.include_router(
        operations_router,
        prefix="/operations",
        tags=["Operations"],
    )
    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    # Configure logging on first app creation (not on module import)
    _configure_logging()

    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="An **employee directory** with signup and login.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint, unversioned for load balancers."""
        return HealthResponse(status="healthy", version=API_VERSION)

    @app.get("/", tags=["Info"])
    async def root() -> dict:
        """API root endpoint with version information."""
        return {
            "name": f"{settings.app_name} API",
            "version": API_VERSION,
            "docs": "/docs" if settings.api_debug else None,
            "api_base": API_V1_PREFIX,
            "endpoints": {
                "health": "/health",
                "operations": f"{API_V1_PREFIX}/operations",
            },
        }

    return app


# Application instance for uvicorn
app = create_app()
