"""Ordering commands."""

from boardshop.application.commands.ordering.create_order_command import (
    CreateOrderCommand,
)
from boardshop.application.commands.ordering.update_order_command import (
    UpdateOrderCommand,
)
from boardshop.application.commands.ordering.update_order_status_command import (
    UpdateOrderStatusCommand,
)

__all__ = [
    "CreateOrderCommand",
    "UpdateOrderCommand",
    "UpdateOrderStatusCommand",
]
