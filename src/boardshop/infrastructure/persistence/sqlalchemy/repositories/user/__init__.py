from boardshop.infrastructure.persistence.sqlalchemy.repositories.user.address_repository import (  # NOQA: E501
    AddressRepositorySQLAlchemy,
)
from boardshop.infrastructure.persistence.sqlalchemy.repositories.user.user_preferences_repository import (  # NOQA: E501
    UserPreferencesRepositorySQLAlchemy,
)
from boardshop.infrastructure.persistence.sqlalchemy.repositories.user.user_repository import (  # NOQA: E501
    UserRepositorySQLAlchemy,
)

__all__ = [
    "AddressRepositorySQLAlchemy",
    "UserPreferencesRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
]
