"""HTTP API presentation layer for HRDesk.

This package provides a FastAPI-based API with one operations endpoint.

Structure:
    api/
    ├── app.py                # FastAPI application factory
    ├── config.py             # API configuration
    ├── dependencies.py       # Dependency injection
    ├── exception_handlers.py # Domain error -> HTTP response mapping
    ├── routers/              # API route handlers
    └── schemas/              # Pydantic request/response schemas
"""

from hrdesk.presentation.api.app import create_app

__all__ = ["create_app"]
