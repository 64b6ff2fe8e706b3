"""FastAPI dependency injection for the Boardshop API.

Provides dependencies for:
- Database sessions
- Authentication (current user from JWT)
- User context for commands and queries
- Service instances
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from boardshop.application.context import UserContext
from boardshop.application.services import AuthenticationService
from boardshop.domain.shared.exceptions import AuthenticationError
from boardshop.domain.user import User
from boardshop.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from boardshop.infrastructure.persistence.sqlalchemy.repositories.user import (
    UserRepositorySQLAlchemy,
)
from boardshop.infrastructure.storage import LocalFileStorage
from boardshop.presentation.api.config import get_api_settings
from boardshop_auth import JWTService, PasswordHashingService
from boardshop_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)

SettingsDep = Annotated[Settings, Depends(get_api_settings)]


@lru_cache()
def get_database_url() -> str:
    """
    Get database URL from application settings.

    Returns
    -------
    Database URL string
    """
    url = get_settings().database_url

    # Ensure data directory exists for file-based SQLite
    if url.startswith("sqlite") and ":memory:" not in url:
        db_path = url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return url


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    The engine manages the connection pool and is reused across all requests.

    Returns
    -------
    AsyncEngine instance
    """
    return create_async_engine(
        get_database_url(),
        echo=False,
        pool_pre_ping=True,  # Verify connections before use
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


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_jwt_service(settings: SettingsDep) -> JWTService:
    """Get JWT service configured with API settings."""
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_minutes=settings.jwt_access_token_expire_minutes,
    )


def get_password_service(settings: SettingsDep) -> PasswordHashingService:
    """Get password hashing service."""
    return PasswordHashingService(rounds=settings.password_bcrypt_rounds)


PasswordServiceDep = Annotated[PasswordHashingService, Depends(get_password_service)]


async def get_authentication_service(
    session: DBSession,
    jwt_service: JWTService = Depends(get_jwt_service),
    password_service: PasswordHashingService = Depends(get_password_service),
) -> AuthenticationService:
    """
    Get authentication service with all dependencies.

    This service orchestrates user registration, login, and token resolution.
    """
    return AuthenticationService(
        user_repository=UserRepositorySQLAlchemy(session),
        password_service=password_service,
        jwt_service=jwt_service,
    )


# Type alias for injected auth service
AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


# -----------------------------------------------------------------------------
# Current User (JWT Authentication)
# -----------------------------------------------------------------------------


async def get_current_user(
    auth_service: AuthService,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> User:
    """
    FastAPI dependency to get the current authenticated user from JWT.

    Raises
    ------
    AuthenticationError
        401 if the token is missing, invalid, expired or its user is gone
    AuthorizationError
        403 if the account has been deactivated
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError()

    return await auth_service.authenticate(credentials.credentials)


# Type alias for injected current user
CurrentUser = Annotated[User, Depends(get_current_user)]


# -----------------------------------------------------------------------------
# User Context & Repository Factory
# -----------------------------------------------------------------------------


async def get_user_context(
    user: User = Depends(get_current_user),
) -> UserContext:
    """Get the UserContext handed to commands and queries."""
    return UserContext.create(user)


# Type alias for injected user context
CurrentUserContext = Annotated[UserContext, Depends(get_user_context)]


async def get_repository_factory(
    session: AsyncSession = Depends(get_db_session),
    user_context: UserContext = Depends(get_user_context),
) -> SQLAlchemyRepositoryFactory:
    """Get repository factory for the current user."""
    return SQLAlchemyRepositoryFactory(session=session, user_context=user_context)


# Type alias for injected repository factory
RepoFactory = Annotated[SQLAlchemyRepositoryFactory, Depends(get_repository_factory)]


def get_file_storage(settings: SettingsDep) -> LocalFileStorage:
    """Get the storage used for uploaded files."""
    return LocalFileStorage(settings.upload_path, url_prefix="/uploads")


FileStorage = Annotated[LocalFileStorage, Depends(get_file_storage)]


# -----------------------------------------------------------------------------
# Application Queries & Commands
# -----------------------------------------------------------------------------
# Application layer classes have from_factory() classmethods that encapsulate
# their dependency knowledge. Use them directly in routers:
#
#   async def list_categories(factory: RepoFactory):
#       query = ListCategoriesQuery.from_factory(factory)  # NOQA: ERA001
