"""Read operations on orders."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from boardshop.application.context import UserContext
from boardshop.domain.ordering import Order, OrderNotFoundError, OrderRepository

if TYPE_CHECKING:
    from boardshop.application.factories import RepositoryFactory


class ListOrdersQuery:
    """Every order with customer, items and product summaries (administrator)."""

    def __init__(self, order_repository: OrderRepository):
        self._order_repo = order_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListOrdersQuery:
        return cls(order_repository=factory.order_repository())

    async def execute(self) -> list[Order]:
        return await self._order_repo.find_all()


class ListOrdersForUserQuery:
    """The caller's orders with items and product summaries, newest first."""

    def __init__(self, order_repository: OrderRepository, user_context: UserContext):
        self._order_repo = order_repository
        self._user_context = user_context

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListOrdersForUserQuery:
        return cls(
            order_repository=factory.order_repository(),
            user_context=factory.user_context,
        )

    async def execute(self) -> list[Order]:
        return await self._order_repo.find_by_user(self._user_context.user_id)


class GetOrderQuery:
    """
    One order with customer, items and product summaries.

    Non-administrators only see their own orders; anyone else's order is
    reported as not found.
    """

    def __init__(self, order_repository: OrderRepository, user_context: UserContext):
        self._order_repo = order_repository
        self._user_context = user_context

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetOrderQuery:
        return cls(
            order_repository=factory.order_repository(),
            user_context=factory.user_context,
        )

    async def execute(self, order_id: UUID) -> Order:
        order = await self._order_repo.find_by_id(order_id, with_relations=True)
        if order is None:
            raise OrderNotFoundError(order_id)
        if not self._user_context.is_admin and not order.is_owned_by(
            self._user_context.user_id,
        ):
            raise OrderNotFoundError(order_id)
        return order
