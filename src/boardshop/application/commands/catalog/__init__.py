"""Catalog commands."""

from boardshop.application.commands.catalog.category_commands import (
    CreateCategoryCommand,
    DeleteCategoryCommand,
    UpdateCategoryCommand,
)
from boardshop.application.commands.catalog.product_commands import (
    CreateProductCommand,
    DeleteProductCommand,
    UpdateProductCommand,
    UpdateStockCommand,
)

__all__ = [
    "CreateCategoryCommand",
    "CreateProductCommand",
    "DeleteCategoryCommand",
    "DeleteProductCommand",
    "UpdateCategoryCommand",
    "UpdateProductCommand",
    "UpdateStockCommand",
]
