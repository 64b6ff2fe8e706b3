"""Prices requested order lines against the catalog."""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from boardshop.domain.catalog import (
    Product,
    ProductNotFoundError,
    ProductUnavailableError,
)
from boardshop.domain.ordering.aggregates.order import OrderItem
from boardshop.domain.ordering.exceptions import (
    EmptyOrderError,
    InvalidQuantityError,
    OrderTotalTooLargeError,
)
from boardshop.domain.ordering.value_objects import ProductSummary
from boardshop.domain.shared.money import MAX_AMOUNT, to_money

MAX_LINE_QUANTITY = 10_000


@dataclass(frozen=True)
class OrderLineRequest:
    """A product and quantity requested by the customer."""

    product_id: UUID
    quantity: int


class OrderPricingService:
    """
    Turns requested lines into priced order items.

    Pricing is all or nothing: every line is validated before any item is
    produced, so a single bad line leaves the caller with nothing to persist.
    """

    def price(
        self,
        lines: list[OrderLineRequest],
        products: dict[UUID, Product],
    ) -> list[OrderItem]:
        """
        Snapshot current prices for each requested line.

        Parameters
        ----------
        lines
            Requested lines, in the order they should appear on the order
        products
            Products resolved for the requested ids

        Returns
        -------
        Priced order items, one per requested line

        Raises
        ------
        EmptyOrderError
            If no lines were requested
        InvalidQuantityError
            If a quantity is below 1 or above MAX_LINE_QUANTITY
        ProductNotFoundError
            If a requested product does not exist
        ProductUnavailableError
            If a requested product is inactive
        OrderTotalTooLargeError
            If the subtotal does not fit a stored amount
        """
        if not lines:
            raise EmptyOrderError()

        for line in lines:
            quantity = line.quantity
            if isinstance(quantity, bool) or not 1 <= quantity <= MAX_LINE_QUANTITY:
                raise InvalidQuantityError(line.product_id, line.quantity)

        missing = [line.product_id for line in lines if line.product_id not in products]
        if missing:
            raise ProductNotFoundError(", ".join(str(pid) for pid in missing))

        for line in lines:
            if not products[line.product_id].is_active:
                raise ProductUnavailableError(line.product_id)

        subtotal = sum(
            (to_money(products[line.product_id].price * line.quantity) for line in lines),
            Decimal("0.00"),
        )
        if subtotal > MAX_AMOUNT:
            raise OrderTotalTooLargeError(subtotal, MAX_AMOUNT)

        return [
            OrderItem(
                product_id=line.product_id,
                quantity=line.quantity,
                unit_price=products[line.product_id].price,
                product=ProductSummary(
                    id=products[line.product_id].id,
                    title=products[line.product_id].title,
                    image_url=products[line.product_id].image_url,
                    sku=products[line.product_id].sku,
                ),
            )
            for line in lines
        ]
