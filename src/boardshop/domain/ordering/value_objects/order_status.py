"""Order status lifecycle."""

from enum import Enum


class OrderStatus(str, Enum):
    """
    Status of an order.

    The regular lifecycle runs PENDING -> CONFIRMED -> PROCESSING -> SHIPPED
    -> DELIVERED; steps may be skipped but never reversed. CANCELED is
    reachable from any state before DELIVERED and REFUNDED from any
    non-terminal state. CANCELED and REFUNDED are terminal.
    """

    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    PROCESSING = "PROCESSING"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELED = "CANCELED"
    REFUNDED = "REFUNDED"

    @property
    def is_terminal(self) -> bool:
        return self in (OrderStatus.CANCELED, OrderStatus.REFUNDED)

    def can_transition_to(self, target: "OrderStatus") -> bool:
        if target == self:
            return True
        if self.is_terminal:
            return False
        if target == OrderStatus.REFUNDED:
            return True
        if target == OrderStatus.CANCELED:
            return self != OrderStatus.DELIVERED
        return _PROGRESSION.index(target) > _PROGRESSION.index(self)


_PROGRESSION = (
    OrderStatus.PENDING,
    OrderStatus.CONFIRMED,
    OrderStatus.PROCESSING,
    OrderStatus.SHIPPED,
    OrderStatus.DELIVERED,
)
