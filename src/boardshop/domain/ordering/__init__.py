"""Ordering domain: orders, pricing and the status lifecycle."""

from boardshop.domain.ordering.aggregates import Order, OrderItem
from boardshop.domain.ordering.exceptions import (
    EmptyOrderError,
    InvalidQuantityError,
    InvalidStatusTransitionError,
    OrderNotEditableError,
    OrderNotFoundError,
    OrderNumberConflictError,
    OrderTotalTooLargeError,
)
from boardshop.domain.ordering.repositories import OrderRepository
from boardshop.domain.ordering.services import (
    MAX_LINE_QUANTITY,
    OrderLineRequest,
    OrderPricingService,
)
from boardshop.domain.ordering.value_objects import (
    ORDER_NUMBER_PATTERN,
    CustomerSummary,
    OrderStatus,
    ProductSummary,
    generate_order_number,
)

__all__ = [
    "Order",
    "OrderItem",
    "OrderLineRequest",
    "OrderPricingService",
    "OrderRepository",
    "OrderStatus",
    "CustomerSummary",
    "ProductSummary",
    "ORDER_NUMBER_PATTERN",
    "generate_order_number",
    "EmptyOrderError",
    "InvalidQuantityError",
    "InvalidStatusTransitionError",
    "OrderNotEditableError",
    "OrderNotFoundError",
    "OrderNumberConflictError",
    "OrderTotalTooLargeError",
    "MAX_LINE_QUANTITY",
]
