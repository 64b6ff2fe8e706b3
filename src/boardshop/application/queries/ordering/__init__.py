"""Ordering queries."""

from boardshop.application.queries.ordering.order_queries import (
    GetOrderQuery,
    ListOrdersForUserQuery,
    ListOrdersQuery,
)

__all__ = [
    "GetOrderQuery",
    "ListOrdersForUserQuery",
    "ListOrdersQuery",
]
