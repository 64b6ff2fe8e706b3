"""Move an order along its status lifecycle (administrator)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Union
from uuid import UUID

from boardshop.domain.ordering import (
    Order,
    OrderNotFoundError,
    OrderRepository,
    OrderStatus,
)

if TYPE_CHECKING:
    from boardshop.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class UpdateOrderStatusCommand:
    """Change an order's status; setting the current status is a no-op."""

    def __init__(self, order_repository: OrderRepository):
        self._order_repo = order_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateOrderStatusCommand:
        return cls(order_repository=factory.order_repository())

    async def execute(
        self,
        order_id: UUID,
        status: Union[str, OrderStatus],
    ) -> Order:
        order = await self._order_repo.find_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)

        previous = order.status
        if order.change_status(status):
            await self._order_repo.save(order)
            logger.info(
                "Order %s status changed: %s -> %s",
                order.order_number,
                previous.value,
                order.status.value,
            )

        return await self._order_repo.find_by_id(order_id, with_relations=True)
