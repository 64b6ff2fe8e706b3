"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/                  # Fast, isolated tests (no database)
    │   ├── boardshop_auth/
    │   ├── domain/
    │   ├── application/
    │   └── infrastructure/
    └── integration/           # In-memory SQLite via aiosqlite
        ├── persistence/       # Repositories against a real session
        └── api/               # Endpoints through FastAPI's TestClient

The environment is prepared before any application module is imported:
``boardshop.presentation.api.app`` builds its module-level app from the
settings on import.
"""

import os
import tempfile

os.environ.setdefault("JWT_SECRET_KEY", "test-jwt-secret-for-testing-only")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("PASSWORD_BCRYPT_ROUNDS", "4")
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="boardshop-uploads-"))
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest  # noqa: E402

from boardshop_config import clear_settings_cache  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Start and finish the session with freshly loaded settings."""
    clear_settings_cache()
    yield
    clear_settings_cache()
