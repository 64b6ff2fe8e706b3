"""Shared domain components.

This module exports the exceptions and utilities used across domain
boundaries.
"""

from boardshop.domain.shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)
from boardshop.domain.shared.money import to_money
from boardshop.domain.shared.time import utc_now

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "EntityNotFoundError",
    "ConflictError",
    # Utilities
    "to_money",
    "utc_now",
]
