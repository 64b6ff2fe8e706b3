from boardshop.infrastructure.persistence.sqlalchemy.models.catalog.category_model import (  # NOQA: E501
    CategoryModel,
)
from boardshop.infrastructure.persistence.sqlalchemy.models.catalog.product_model import (  # NOQA: E501
    ProductModel,
)

__all__ = ["CategoryModel", "ProductModel"]
