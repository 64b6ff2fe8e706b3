"""SQLAlchemy models for persistence layer."""

from boardshop.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from boardshop.infrastructure.persistence.sqlalchemy.models.catalog import (
    CategoryModel,
    ProductModel,
)
from boardshop.infrastructure.persistence.sqlalchemy.models.ordering import (
    OrderItemModel,
    OrderModel,
)
from boardshop.infrastructure.persistence.sqlalchemy.models.user import (
    AddressModel,
    UserModel,
    UserPreferencesModel,
)

__all__ = [
    "Base",
    "TimestampMixin",
    "UserModel",
    "AddressModel",
    "UserPreferencesModel",
    "CategoryModel",
    "ProductModel",
    "OrderModel",
    "OrderItemModel",
]
