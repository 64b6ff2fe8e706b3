"""Create, update and delete addresses of the current user."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional
from uuid import UUID

from boardshop.application.context import UserContext
from boardshop.domain.user import (
    Address,
    AddressNotFoundError,
    AddressRepository,
    AddressType,
)

if TYPE_CHECKING:
    from boardshop.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class CreateAddressCommand:
    """Add an address; flagging it default clears the previous default."""

    def __init__(self, address_repository: AddressRepository, user_context: UserContext):
        self._address_repo = address_repository
        self._user_context = user_context

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateAddressCommand:
        return cls(
            address_repository=factory.address_repository(),
            user_context=factory.user_context,
        )

    async def execute(  # NOQA: PLR0913
        self,
        first_name: str,
        last_name: str,
        address_line1: str,
        city: str,
        state: str,
        postal_code: str,
        type: AddressType = AddressType.SHIPPING,
        company: Optional[str] = None,
        address_line2: Optional[str] = None,
        country: str = "US",
        phone: Optional[str] = None,
        is_default: bool = False,
    ) -> Address:
        address = Address(
            user_id=self._user_context.user_id,
            type=type,
            first_name=first_name,
            last_name=last_name,
            company=company,
            address_line1=address_line1,
            address_line2=address_line2,
            city=city,
            state=state,
            postal_code=postal_code,
            country=country,
            phone=phone,
            is_default=is_default,
        )
        await self._address_repo.save(address)
        logger.debug("Address %s created for user %s", address.id, address.user_id)
        return address


class UpdateAddressCommand:
    """Partially update one of the caller's addresses."""

    def __init__(self, address_repository: AddressRepository, user_context: UserContext):
        self._address_repo = address_repository
        self._user_context = user_context

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateAddressCommand:
        return cls(
            address_repository=factory.address_repository(),
            user_context=factory.user_context,
        )

    async def execute(self, address_id: UUID, **changes: Any) -> Address:
        address = await self._address_repo.find_by_id(
            address_id,
            self._user_context.user_id,
        )
        if address is None:
            raise AddressNotFoundError(address_id)

        address.update(**changes)
        await self._address_repo.save(address)
        return address


class DeleteAddressCommand:
    """Delete one of the caller's addresses."""

    def __init__(self, address_repository: AddressRepository, user_context: UserContext):
        self._address_repo = address_repository
        self._user_context = user_context

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteAddressCommand:
        return cls(
            address_repository=factory.address_repository(),
            user_context=factory.user_context,
        )

    async def execute(self, address_id: UUID) -> None:
        address = await self._address_repo.find_by_id(
            address_id,
            self._user_context.user_id,
        )
        if address is None:
            raise AddressNotFoundError(address_id)

        await self._address_repo.delete(address_id)
