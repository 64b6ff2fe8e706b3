from boardshop.domain.user.repositories.address_repository import AddressRepository
from boardshop.domain.user.repositories.user_preferences_repository import (
    UserPreferencesRepository,
)
from boardshop.domain.user.repositories.user_repository import UserRepository

__all__ = [
    "AddressRepository",
    "UserPreferencesRepository",
    "UserRepository",
]
