"""Catalog queries."""

from boardshop.application.queries.catalog.category_queries import (
    GetCategoryQuery,
    ListCategoriesQuery,
)
from boardshop.application.queries.catalog.product_queries import (
    MAX_PAGE_SIZE,
    FindLowStockQuery,
    GetProductQuery,
    ListProductsQuery,
)

__all__ = [
    "MAX_PAGE_SIZE",
    "FindLowStockQuery",
    "GetCategoryQuery",
    "GetProductQuery",
    "ListCategoriesQuery",
    "ListProductsQuery",
]
