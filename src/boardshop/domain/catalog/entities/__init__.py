from boardshop.domain.catalog.entities.category import Category
from boardshop.domain.catalog.entities.product import Product

__all__ = ["Category", "Product"]
