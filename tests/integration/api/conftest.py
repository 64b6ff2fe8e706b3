"""Pytest fixtures for API integration tests."""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from boardshop.domain.user import User, UserRole
from boardshop.infrastructure.persistence.sqlalchemy.models import Base
from boardshop.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)
from boardshop.presentation.api.app import API_V1_PREFIX, create_app
from boardshop.presentation.api.config import get_api_settings
from boardshop.presentation.api.dependencies import get_db_session
from boardshop_auth import PasswordHashingService
from boardshop_config.settings import Settings

ADMIN_EMAIL = "admin@skateshop.com"
ADMIN_PASSWORD = "password123"  # NOQA: S105


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def api_settings(tmp_path) -> Settings:
    """Test API settings with debug enabled and a throwaway upload dir."""
    return Settings(
        jwt_secret_key=SecretStr("test-jwt-secret-for-testing-only"),
        api_host="127.0.0.1",
        api_port=8000,
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        password_bcrypt_rounds=4,
        upload_dir=str(tmp_path / "uploads"),
        upload_max_file_size=1024,
    )


@pytest_asyncio.fixture
async def test_db_engine():
    """Create an in-memory SQLite database for testing."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def admin_user(test_db_engine) -> User:
    """An administrator stored directly in the database."""
    session_maker = async_sessionmaker(test_db_engine, class_=AsyncSession)
    user = User.create(
        ADMIN_EMAIL,
        password_hash=PasswordHashingService(rounds=4).hash(ADMIN_PASSWORD),
        role=UserRole.ADMIN,
        first_name="Shop",
    )
    async with session_maker() as session:
        await UserRepositorySQLAlchemy(session).save(user)
        await session.commit()
    return user


@pytest.fixture
def test_client(api_settings, test_db_engine) -> TestClient:
    """Create a test client with an in-memory database."""
    app = create_app(settings=api_settings)

    # Create a session maker that uses our test engine
    test_session_maker = async_sessionmaker(
        test_db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    # Override the database session dependency
    async def override_get_db_session():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_api_settings] = lambda: api_settings

    return TestClient(app)


@pytest.fixture
def registered_user_data() -> dict:
    """Test user registration data."""
    return {
        "email": "rider@example.com",
        "password": "SecurePassword123!",
        "first_name": "Ann",
    }


@pytest.fixture
def auth_headers(test_client, registered_user_data, api_v1_prefix) -> dict:
    """Get auth headers for a registered customer."""
    response = test_client.post(
        f"{api_v1_prefix}/auth/register",
        json=registered_user_data,
    )
    assert response.status_code == 201

    token = response.json()["access_token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(test_client, admin_user, api_v1_prefix) -> dict:
    """Get auth headers for the administrator."""
    response = test_client.post(
        f"{api_v1_prefix}/auth/login",
        json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 200

    token = response.json()["access_token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def decks_category(test_client, admin_headers, api_v1_prefix) -> dict:
    response = test_client.post(
        f"{api_v1_prefix}/categories",
        json={"name": "Decks"},
        headers=admin_headers,
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def deck_product(test_client, admin_headers, decks_category, api_v1_prefix) -> dict:
    response = test_client.post(
        f"{api_v1_prefix}/products",
        json={
            "title": "Deck",
            "price": "59.99",
            "category_id": decks_category["id"],
            "sku": "DECK-1",
            "stock_quantity": 25,
        },
        headers=admin_headers,
    )
    assert response.status_code == 201
    return response.json()
