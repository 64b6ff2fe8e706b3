"""REST API presentation layer for Boardshop.

Structure:
    api/
    ├── app.py                # FastAPI application factory
    ├── config.py             # API configuration
    ├── dependencies.py       # Dependency injection
    ├── access_control.py     # Route role requirements
    ├── exception_handlers.py # Error envelope
    ├── routers/              # API route handlers
    └── schemas/              # Pydantic request/response schemas
"""

from boardshop.presentation.api.app import create_app

__all__ = ["create_app"]
