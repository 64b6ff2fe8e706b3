from boardshop.infrastructure.persistence.sqlalchemy.repositories.catalog.category_repository import (  # NOQA: E501
    CategoryRepositorySQLAlchemy,
)
from boardshop.infrastructure.persistence.sqlalchemy.repositories.catalog.product_repository import (  # NOQA: E501
    ProductRepositorySQLAlchemy,
)

__all__ = ["CategoryRepositorySQLAlchemy", "ProductRepositorySQLAlchemy"]
