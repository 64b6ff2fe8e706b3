"""Address repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from boardshop.domain.user.entities import Address
from boardshop.domain.user.value_objects import AddressType


class AddressRepository(ABC):
    """Repository interface for user addresses."""

    @abstractmethod
    async def find_by_id(self, address_id: UUID, user_id: UUID) -> Optional[Address]:
        """Find an address owned by the given user."""

    @abstractmethod
    async def find_by_user(self, user_id: UUID) -> list[Address]:
        """Return a user's addresses, default first, then newest first."""

    @abstractmethod
    async def find_default(
        self,
        user_id: UUID,
        address_type: AddressType,
    ) -> Optional[Address]:
        """Return the default address of the given type, if any."""

    @abstractmethod
    async def save(self, address: Address) -> None:
        """
        Save or update an address.

        When the address is flagged as default, every other default of the
        same (user, type) is cleared first, in the same transaction.
        """

    @abstractmethod
    async def delete(self, address_id: UUID) -> None:
        """Delete an address by ID."""
