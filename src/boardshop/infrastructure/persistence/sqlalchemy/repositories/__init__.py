"""SQLAlchemy repository implementations."""

from boardshop.infrastructure.persistence.sqlalchemy.repositories.catalog import (
    CategoryRepositorySQLAlchemy,
    ProductRepositorySQLAlchemy,
)
from boardshop.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)
from boardshop.infrastructure.persistence.sqlalchemy.repositories.ordering import (
    OrderRepositorySQLAlchemy,
)
from boardshop.infrastructure.persistence.sqlalchemy.repositories.user import (
    AddressRepositorySQLAlchemy,
    UserPreferencesRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)

__all__ = [
    "AddressRepositorySQLAlchemy",
    "CategoryRepositorySQLAlchemy",
    "OrderRepositorySQLAlchemy",
    "ProductRepositorySQLAlchemy",
    "SQLAlchemyRepositoryFactory",
    "UserPreferencesRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
]
