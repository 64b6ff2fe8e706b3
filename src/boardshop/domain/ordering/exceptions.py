"""Ordering domain exceptions."""

from decimal import Decimal
from uuid import UUID

from boardshop.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class OrderNotFoundError(EntityNotFoundError):
    """Raised when an order cannot be found (or is not visible to the caller)."""

    def __init__(self, order_id: str | UUID) -> None:
        super().__init__(
            message=f"Order '{order_id}' not found",
            code=ErrorCode.ORDER_NOT_FOUND,
            details={"order_id": str(order_id)},
        )


class EmptyOrderError(ValidationError):
    """Raised when an order would contain no items."""

    def __init__(self) -> None:
        super().__init__(
            message="Order must contain at least one item",
            code=ErrorCode.EMPTY_ORDER,
        )


class InvalidQuantityError(ValidationError):
    """Raised when an order line quantity is not a positive integer."""

    def __init__(self, product_id: str | UUID, quantity: int) -> None:
        super().__init__(
            message=f"Quantity must be a positive whole number, got {quantity}",
            code=ErrorCode.INVALID_QUANTITY,
            details={"product_id": str(product_id), "quantity": quantity},
        )


class OrderTotalTooLargeError(ValidationError):
    """Raised when the order subtotal exceeds what a stored amount can hold."""

    def __init__(self, amount: Decimal, limit: Decimal) -> None:
        super().__init__(
            message=f"Order amount {amount} exceeds the maximum of {limit}",
            code=ErrorCode.ORDER_TOTAL_TOO_LARGE,
            details={"amount": str(amount), "limit": str(limit)},
        )


class InvalidStatusTransitionError(ConflictError):
    """Raised when an order status change is not allowed."""

    def __init__(self, current: str, requested: str) -> None:
        super().__init__(
            message=f"Cannot change order status from {current} to {requested}",
            code=ErrorCode.INVALID_STATUS_TRANSITION,
            details={"current_status": current, "requested_status": requested},
        )


class OrderNotEditableError(ConflictError):
    """Raised when a customer edits an order that has left PENDING."""

    def __init__(self, order_id: str | UUID, status: str) -> None:
        super().__init__(
            message=f"Order '{order_id}' can no longer be modified (status {status})",
            code=ErrorCode.ORDER_NOT_EDITABLE,
            details={"order_id": str(order_id), "status": status},
        )


class OrderNumberConflictError(ConflictError):
    """Raised when no unique order number could be allocated."""

    def __init__(self, order_number: str | None = None) -> None:
        super().__init__(
            message="Could not allocate a unique order number, please retry",
            code=ErrorCode.ORDER_NUMBER_CONFLICT,
            details={"order_number": order_number},
        )
