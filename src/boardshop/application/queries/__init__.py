"""Query layer - read operations that never mutate state.

Queries are organized by domain:
- user: Users, profiles, addresses and preferences
- catalog: Categories, products and stock reports
- ordering: Orders for administrators and customers
"""

from boardshop.application.queries.catalog import (
    FindLowStockQuery,
    GetCategoryQuery,
    GetProductQuery,
    ListCategoriesQuery,
    ListProductsQuery,
)
from boardshop.application.queries.ordering import (
    GetOrderQuery,
    ListOrdersForUserQuery,
    ListOrdersQuery,
)
from boardshop.application.queries.user import (
    GetProfileQuery,
    GetUserPreferencesQuery,
    GetUserQuery,
    ListAddressesQuery,
    ListUsersQuery,
)

__all__ = [
    "FindLowStockQuery",
    "GetCategoryQuery",
    "GetOrderQuery",
    "GetProductQuery",
    "GetProfileQuery",
    "GetUserPreferencesQuery",
    "GetUserQuery",
    "ListAddressesQuery",
    "ListCategoriesQuery",
    "ListOrdersForUserQuery",
    "ListOrdersQuery",
    "ListProductsQuery",
    "ListUsersQuery",
]
