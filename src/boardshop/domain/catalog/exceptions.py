"""Catalog domain exceptions."""

from decimal import Decimal
from uuid import UUID

from boardshop.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class CategoryNotFoundError(EntityNotFoundError):
    """Raised when a category cannot be found."""

    def __init__(self, category_id: str | UUID) -> None:
        super().__init__(
            message=f"Category '{category_id}' not found",
            code=ErrorCode.CATEGORY_NOT_FOUND,
            details={"category_id": str(category_id)},
        )


class CategoryAlreadyExistsError(ConflictError):
    """Raised when a category name is already taken."""

    def __init__(self, name: str) -> None:
        super().__init__(
            message=f"Category with name '{name}' already exists",
            code=ErrorCode.DUPLICATE_CATEGORY,
            details={"name": name},
        )


class CategoryInUseError(ConflictError):
    """Raised when deleting a category that products still reference."""

    def __init__(self, category_id: str | UUID, product_count: int) -> None:
        super().__init__(
            message=(
                f"Category '{category_id}' is used by {product_count} "
                "product(s) and cannot be deleted"
            ),
            code=ErrorCode.CATEGORY_IN_USE,
            details={
                "category_id": str(category_id),
                "product_count": product_count,
            },
        )


class ProductNotFoundError(EntityNotFoundError):
    """Raised when one or more products cannot be found."""

    def __init__(self, product_id: str | UUID) -> None:
        super().__init__(
            message=f"Product '{product_id}' not found",
            code=ErrorCode.PRODUCT_NOT_FOUND,
            details={"product_id": str(product_id)},
        )


class ProductInUseError(ConflictError):
    """Raised when deleting a product that order lines still reference."""

    def __init__(self, product_id: str | UUID) -> None:
        super().__init__(
            message=(
                f"Product '{product_id}' appears in existing orders and cannot "
                "be deleted; deactivate it instead"
            ),
            code=ErrorCode.PRODUCT_IN_USE,
            details={"product_id": str(product_id)},
        )


class ProductUnavailableError(ConflictError):
    """Raised when ordering a product that is no longer active."""

    def __init__(self, product_id: str | UUID) -> None:
        super().__init__(
            message=f"Product '{product_id}' is not available",
            code=ErrorCode.PRODUCT_UNAVAILABLE,
            details={"product_id": str(product_id)},
        )


class DuplicateSkuError(ConflictError):
    """Raised when a SKU is already used by another product."""

    def __init__(self, sku: str) -> None:
        super().__init__(
            message=f"Product with SKU '{sku}' already exists",
            code=ErrorCode.DUPLICATE_SKU,
            details={"sku": sku},
        )


class InvalidPriceError(ValidationError):
    """Raised when a price is negative."""

    def __init__(self, price: Decimal) -> None:
        super().__init__(
            message=f"Price cannot be negative: {price}",
            code=ErrorCode.INVALID_PRICE,
            details={"price": str(price)},
        )


class InvalidStockError(ValidationError):
    """Raised when a stock quantity is negative."""

    def __init__(self, quantity: int) -> None:
        super().__init__(
            message=f"Stock quantity cannot be negative: {quantity}",
            code=ErrorCode.INVALID_STOCK,
            details={"quantity": quantity},
        )
