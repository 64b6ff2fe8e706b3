from boardshop.domain.catalog.repositories.category_repository import (
    CategoryRepository,
)
from boardshop.domain.catalog.repositories.product_repository import (
    ProductRepository,
)

__all__ = ["CategoryRepository", "ProductRepository"]
