"""Catalog domain: categories and products."""

from boardshop.domain.catalog.entities import Category, Product
from boardshop.domain.catalog.exceptions import (
    CategoryAlreadyExistsError,
    CategoryInUseError,
    CategoryNotFoundError,
    DuplicateSkuError,
    InvalidPriceError,
    InvalidStockError,
    ProductInUseError,
    ProductNotFoundError,
    ProductUnavailableError,
)
from boardshop.domain.catalog.repositories import (
    CategoryRepository,
    ProductRepository,
)
from boardshop.domain.catalog.value_objects import ProductFilter

__all__ = [
    "Category",
    "Product",
    "ProductFilter",
    "CategoryRepository",
    "ProductRepository",
    "CategoryAlreadyExistsError",
    "CategoryInUseError",
    "CategoryNotFoundError",
    "DuplicateSkuError",
    "InvalidPriceError",
    "InvalidStockError",
    "ProductInUseError",
    "ProductNotFoundError",
    "ProductUnavailableError",
]
