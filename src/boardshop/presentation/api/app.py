"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

API Versioning:
    All API endpoints are versioned under /api/v1/ prefix.
    The health check endpoint remains unversioned at /health.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from sqlalchemy.ext.asyncio import AsyncEngine

from boardshop.infrastructure.persistence.sqlalchemy.init_db import create_tables
from boardshop.presentation.api.dependencies import get_engine
from boardshop.presentation.api.exception_handlers import setup_exception_handlers
from boardshop.presentation.api.routers import (
    auth_router,
    categories_router,
    orders_router,
    products_router,
    users_router,
)
from boardshop_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Configure application logging.

    Sets up logging for the boardshop application with:
    - Console output with timestamps and module names
    - Configurable log level for boardshop modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    settings = get_settings()
    log_level_str = settings.log_level.upper()
    log_level = getattr(logging, log_level_str, logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("boardshop").setLevel(log_level)
    logging.getLogger("boardshop_auth").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("multipart").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"
UPLOADS_URL_PREFIX = "/uploads"

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """Registration, login and the current user.

- Passwords are hashed with bcrypt
- Stateless JWT bearer tokens (HS256)
- Self-registered accounts always get the USER role
""",
    },
    {
        "name": "Users",
        "description": """Accounts, profiles, addresses and preferences.

**Administrators:** list, create, update and delete accounts. Accounts
with orders cannot be deleted; deactivate them instead.

**Everyone:** own profile, avatar upload, addresses (one default per
type) and preferences.
""",
    },
    {
        "name": "Categories",
        "description": "Product categories. Categories in use cannot be deleted.",
    },
    {
        "name": "Products",
        "description": """Catalog browsing and administration.

- Paginated listing with category, price range and text search
- Absolute stock updates and a low-stock report for administrators
""",
    },
    {
        "name": "Orders",
        "description": """Order placement and lifecycle.

**Lifecycle:** `PENDING -> CONFIRMED -> PROCESSING -> SHIPPED -> DELIVERED`,
with `CANCELED` (before delivery) and `REFUNDED` as terminal exits.

Prices are captured when an order is placed and never change afterwards.
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
    logger.info("Starting Boardshop API v%s...", API_VERSION)
    engine = get_engine()
    await _init_database_schema(engine)
    yield

    # Shutdown - dispose the shared engine and its connection pool
    logger.info("Shutting down Boardshop API...")
    await engine.dispose()
    logger.info("Database connections closed")


async def _init_database_schema(engine: AsyncEngine) -> None:
    """Initialize database schema (if not existent) and verify connectivity."""
    try:
        await create_tables(engine)
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all endpoints.

    Returns
    -------
    APIRouter with all v1 endpoints mounted.
    """
    v1_router = APIRouter()

    v1_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    v1_router.include_router(users_router, prefix="/users", tags=["Users"])
    v1_router.include_router(
        categories_router,
        prefix="/categories",
        tags=["Categories"],
    )
    v1_router.include_router(products_router, prefix="/products", tags=["Products"])
    v1_router.include_router(orders_router, prefix="/orders", tags=["Orders"])

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
        description="Backend for an online **skateboard shop**.",
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

    # Register exception handlers for consistent error responses
    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    # Uploaded files (avatars) are served as-is
    app.mount(
        UPLOADS_URL_PREFIX,
        StaticFiles(directory=settings.upload_path, check_dir=False),
        name="uploads",
    )

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """Health check endpoint.

        Unversioned for load balancer/monitoring compatibility.
        """
        return {
            "status": "healthy",
            "version": API_VERSION,
            "api_versions": ["v1"],
        }

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
                "auth": f"{API_V1_PREFIX}/auth",
                "users": f"{API_V1_PREFIX}/users",
                "categories": f"{API_V1_PREFIX}/categories",
                "products": f"{API_V1_PREFIX}/products",
                "orders": f"{API_V1_PREFIX}/orders",
            },
        }

    return app


# Application instance for uvicorn
app = create_app()
