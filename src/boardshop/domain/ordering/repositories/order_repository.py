"""Order repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from boardshop.domain.ordering.aggregates import Order


class OrderRepository(ABC):
    """Repository interface for Order aggregates.

    Read methods always load the line items. ``with_relations`` additionally
    loads the customer summary and a product summary per line.
    """

    @abstractmethod
    async def find_by_id(
        self,
        order_id: UUID,
        with_relations: bool = False,
    ) -> Optional[Order]:
        """Find an order by ID."""

    @abstractmethod
    async def find_all(self) -> list[Order]:
        """Return every order with relations, newest first."""

    @abstractmethod
    async def find_by_user(self, user_id: UUID) -> list[Order]:
        """Return a user's orders with product summaries, newest first."""

    @abstractmethod
    async def exists_by_order_number(self, order_number: str) -> bool:
        """Check whether an order number is already taken."""

    @abstractmethod
    async def count_by_user(self, user_id: UUID) -> int:
        """Count orders owned by a user."""

    @abstractmethod
    async def save(self, order: Order) -> None:
        """
        Save or update an order.

        New orders are inserted together with their items. For existing
        orders whose items were replaced, the stored item rows are deleted
        and the new ones inserted, in the same transaction.

        Raises
        ------
        OrderNumberConflictError
            If the order number is already taken
        """
