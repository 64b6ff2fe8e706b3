"""Order aggregate and its line items."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional, Union
from uuid import UUID, uuid4

from boardshop.domain.ordering.exceptions import (
    EmptyOrderError,
    InvalidQuantityError,
    InvalidStatusTransitionError,
)
from boardshop.domain.ordering.value_objects import (
    CustomerSummary,
    OrderStatus,
    ProductSummary,
)
from boardshop.domain.shared.money import to_money
from boardshop.domain.shared.time import utc_now


@dataclass(frozen=True)
class OrderItem:
    """
    One order line.

    ``unit_price`` is the product price captured when the line was created
    and never follows later catalog price changes.
    """

    product_id: UUID
    quantity: int
    unit_price: Decimal
    id: UUID = field(default_factory=uuid4)
    product: Optional[ProductSummary] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if isinstance(self.quantity, bool) or self.quantity < 1:
            raise InvalidQuantityError(self.product_id, self.quantity)
        object.__setattr__(self, "unit_price", to_money(self.unit_price))

    @property
    def line_total(self) -> Decimal:
        return to_money(self.unit_price * self.quantity)


class Order:
    """
    Order aggregate root.

    Owns its line items; ``subtotal`` and ``total_amount`` are always derived
    from them. ``total_amount`` equals the subtotal until taxes or shipping
    costs are introduced.
    """

    def __init__(  # NOQA: PLR0913
        self,
        user_id: UUID,
        order_number: str,
        items: list[OrderItem],
        status: Union[str, OrderStatus] = OrderStatus.PENDING,
        shipping_address_id: Optional[UUID] = None,
        id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
        customer: Optional[CustomerSummary] = None,
    ):
        if not items:
            raise EmptyOrderError()
        self._id = id if id is not None else uuid4()
        self._user_id = user_id
        self._order_number = order_number
        self._items = list(items)
        self._status = status if isinstance(status, OrderStatus) else OrderStatus(status)
        self._shipping_address_id = shipping_address_id
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()
        self._customer = customer
        self._items_replaced = False

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def user_id(self) -> UUID:
        return self._user_id

    @property
    def order_number(self) -> str:
        return self._order_number

    @property
    def status(self) -> OrderStatus:
        return self._status

    @property
    def items(self) -> tuple[OrderItem, ...]:
        return tuple(self._items)

    @property
    def subtotal(self) -> Decimal:
        return to_money(sum((item.line_total for item in self._items), Decimal(0)))

    @property
    def total_amount(self) -> Decimal:
        return self.subtotal

    @property
    def shipping_address_id(self) -> Optional[UUID]:
        return self._shipping_address_id

    @property
    def customer(self) -> Optional[CustomerSummary]:
        return self._customer

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @property
    def items_replaced(self) -> bool:
        """True when ``replace_items`` ran since the order was loaded."""
        return self._items_replaced

    @property
    def is_editable_by_customer(self) -> bool:
        return self._status == OrderStatus.PENDING

    def is_owned_by(self, user_id: UUID) -> bool:
        return self._user_id == user_id

    def change_status(self, new_status: Union[str, OrderStatus]) -> bool:
        """
        Move the order to a new status.

        Returns
        -------
        False when the order already has that status (nothing changes),
        True otherwise

        Raises
        ------
        InvalidStatusTransitionError
            If the lifecycle does not allow the move
        """
        target = (
            new_status if isinstance(new_status, OrderStatus) else OrderStatus(new_status)
        )
        if target == self._status:
            return False
        if not self._status.can_transition_to(target):
            raise InvalidStatusTransitionError(self._status.value, target.value)
        self._status = target
        self._updated_at = utc_now()
        return True

    def replace_items(self, items: list[OrderItem]) -> None:
        """Replace every line item; totals follow the new lines."""
        if not items:
            raise EmptyOrderError()
        self._items = list(items)
        self._items_replaced = True
        self._updated_at = utc_now()

    def change_shipping_address(self, address_id: Optional[UUID]) -> None:
        self._shipping_address_id = address_id
        self._updated_at = utc_now()

    @classmethod
    def place(
        cls,
        user_id: UUID,
        order_number: str,
        items: list[OrderItem],
        shipping_address_id: Optional[UUID] = None,
    ) -> "Order":
        return cls(
            user_id=user_id,
            order_number=order_number,
            items=items,
            status=OrderStatus.PENDING,
            shipping_address_id=shipping_address_id,
        )

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        user_id: UUID,
        order_number: str,
        status: Union[str, OrderStatus],
        items: list[OrderItem],
        created_at: datetime,
        updated_at: datetime,
        shipping_address_id: Optional[UUID] = None,
        customer: Optional[CustomerSummary] = None,
    ) -> "Order":
        return cls(
            id=id,
            user_id=user_id,
            order_number=order_number,
            status=status,
            items=items,
            shipping_address_id=shipping_address_id,
            created_at=created_at,
            updated_at=updated_at,
            customer=customer,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Order):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Order(id={self._id}, number={self._order_number}, "
            f"status={self._status.value}, subtotal={self.subtotal})"
        )
