"""Boardshop Auth - credential infrastructure.

This package is independent of the shop domain. It handles:
- Password hashing (bcrypt)
- JWT access token creation and verification

Architecture:
    boardshop_auth/
    ├── services/           # Pure logic (password hashing, JWT)
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from boardshop_auth import PasswordHashingService, JWTService
"""

from boardshop_auth.exceptions import (
    AuthError,
    InvalidCredentialsError,
    InvalidTokenError,
    WeakPasswordError,
)
from boardshop_auth.schemas import TokenPayload
from boardshop_auth.services import JWTService, PasswordHashingService

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    # Schemas
    "TokenPayload",
    # Exceptions
    "AuthError",
    "InvalidTokenError",
    "WeakPasswordError",
    "InvalidCredentialsError",
]
