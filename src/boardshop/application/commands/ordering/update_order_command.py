"""Edit the lines or shipping address of an order."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from boardshop.application.context import UserContext
from boardshop.domain.catalog import ProductRepository
from boardshop.domain.ordering import (
    Order,
    OrderLineRequest,
    OrderNotEditableError,
    OrderNotFoundError,
    OrderPricingService,
    OrderRepository,
)
from boardshop.domain.user import AddressNotFoundError, AddressRepository

if TYPE_CHECKING:
    from boardshop.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class UpdateOrderCommand:
    """
    Replace the items and/or shipping address of an order.

    Customers may only edit their own PENDING orders; administrators may
    edit any order. New lines are priced at current catalog prices.
    """

    def __init__(
        self,
        order_repository: OrderRepository,
        product_repository: ProductRepository,
        address_repository: AddressRepository,
        user_context: UserContext,
        pricing_service: Optional[OrderPricingService] = None,
    ):
        self._order_repo = order_repository
        self._product_repo = product_repository
        self._address_repo = address_repository
        self._user_context = user_context
        self._pricing = pricing_service or OrderPricingService()

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateOrderCommand:
        return cls(
            order_repository=factory.order_repository(),
            product_repository=factory.product_repository(),
            address_repository=factory.address_repository(),
            user_context=factory.user_context,
        )

    async def execute(
        self,
        order_id: UUID,
        lines: Optional[list[OrderLineRequest]] = None,
        shipping_address_id: Optional[UUID] = None,
    ) -> Order:
        order = await self._order_repo.find_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)

        if not self._user_context.is_admin:
            if not order.is_owned_by(self._user_context.user_id):
                raise OrderNotFoundError(order_id)
            if not order.is_editable_by_customer:
                raise OrderNotEditableError(order_id, order.status.value)

        if lines is not None:
            products = await self._product_repo.find_by_ids(
                [line.product_id for line in lines],
            )
            order.replace_items(self._pricing.price(lines, products))

        if shipping_address_id is not None:
            address = await self._address_repo.find_by_id(
                shipping_address_id,
                order.user_id,
            )
            if address is None:
                raise AddressNotFoundError(shipping_address_id)
            order.change_shipping_address(address.id)

        await self._order_repo.save(order)
        logger.info("Order %s updated by %s", order.order_number, self._user_context.email)

        return await self._order_repo.find_by_id(order_id, with_relations=True)
