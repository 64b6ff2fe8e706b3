"""User domain: accounts, addresses and preferences."""

from boardshop.domain.user.aggregates import User
from boardshop.domain.user.entities import Address
from boardshop.domain.user.exceptions import (
    AddressNotFoundError,
    CannotDeleteSelfError,
    EmailAlreadyExistsError,
    InvalidAvatarError,
    InvalidEmailError,
    UserHasOrdersError,
    UserNotFoundError,
)
from boardshop.domain.user.repositories import (
    AddressRepository,
    UserPreferencesRepository,
    UserRepository,
)
from boardshop.domain.user.value_objects import (
    AddressType,
    Email,
    SkillLevel,
    UserPreferences,
    UserRole,
)

__all__ = [
    # Aggregates and entities
    "User",
    "Address",
    # Value objects
    "AddressType",
    "Email",
    "SkillLevel",
    "UserPreferences",
    "UserRole",
    # Repositories
    "AddressRepository",
    "UserPreferencesRepository",
    "UserRepository",
    # Exceptions
    "AddressNotFoundError",
    "CannotDeleteSelfError",
    "EmailAlreadyExistsError",
    "InvalidAvatarError",
    "InvalidEmailError",
    "UserHasOrdersError",
    "UserNotFoundError",
]
