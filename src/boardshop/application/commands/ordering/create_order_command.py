"""Place an order for the current user."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from boardshop.application.context import UserContext
from boardshop.domain.catalog import ProductRepository
from boardshop.domain.ordering import (
    Order,
    OrderLineRequest,
    OrderNumberConflictError,
    OrderPricingService,
    OrderRepository,
    generate_order_number,
)
from boardshop.domain.user import AddressNotFoundError, AddressRepository, AddressType

if TYPE_CHECKING:
    from boardshop.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)

MAX_ORDER_NUMBER_ATTEMPTS = 5


class CreateOrderCommand:
    """
    Price the requested lines and persist a new PENDING order.

    Every line is validated before anything is written; the order, its items
    and the order number are stored by a single repository call so the
    surrounding transaction either keeps all of it or none of it.
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
    def from_factory(cls, factory: RepositoryFactory) -> CreateOrderCommand:
        return cls(
            order_repository=factory.order_repository(),
            product_repository=factory.product_repository(),
            address_repository=factory.address_repository(),
            user_context=factory.user_context,
        )

    async def execute(
        self,
        lines: list[OrderLineRequest],
        shipping_address_id: Optional[UUID] = None,
    ) -> Order:
        """
        Place the order.

        Parameters
        ----------
        lines
            Requested products and quantities
        shipping_address_id
            One of the caller's addresses; defaults to their default
            shipping address when omitted

        Returns
        -------
        The persisted order with priced items

        Raises
        ------
        EmptyOrderError, InvalidQuantityError
            If the request is malformed
        ProductNotFoundError, ProductUnavailableError
            If a product is missing or inactive
        AddressNotFoundError
            If the address does not belong to the caller
        OrderNumberConflictError
            If no unused order number could be generated
        """
        products = await self._product_repo.find_by_ids(
            [line.product_id for line in lines],
        )
        items = self._pricing.price(lines, products)

        address_id = await self._resolve_shipping_address(shipping_address_id)
        order_number = await self._next_order_number()

        order = Order.place(
            user_id=self._user_context.user_id,
            order_number=order_number,
            items=items,
            shipping_address_id=address_id,
        )
        await self._order_repo.save(order)

        logger.info(
            "Order %s placed by %s: %d item(s), total %s",
            order.order_number,
            self._user_context.email,
            len(order.items),
            order.total_amount,
        )
        return order

    async def _resolve_shipping_address(
        self,
        shipping_address_id: Optional[UUID],
    ) -> Optional[UUID]:
        user_id = self._user_context.user_id
        if shipping_address_id is not None:
            address = await self._address_repo.find_by_id(shipping_address_id, user_id)
            if address is None:
                raise AddressNotFoundError(shipping_address_id)
            return address.id

        default = await self._address_repo.find_default(user_id, AddressType.SHIPPING)
        return default.id if default else None

    async def _next_order_number(self) -> str:
        for _ in range(MAX_ORDER_NUMBER_ATTEMPTS):
            candidate = generate_order_number()
            if not await self._order_repo.exists_by_order_number(candidate):
                return candidate
            logger.warning("Order number collision: %s", candidate)
        raise OrderNumberConflictError()
