"""SQLAlchemy implementation of AddressRepository."""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from boardshop.domain.user import Address, AddressRepository, AddressType
from boardshop.infrastructure.persistence.sqlalchemy.models.user import AddressModel

logger = logging.getLogger(__name__)


class AddressRepositorySQLAlchemy(AddressRepository):
    """SQLAlchemy implementation of the AddressRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, address_id: UUID, user_id: UUID) -> Optional[Address]:
        stmt = select(AddressModel).where(
            AddressModel.id == address_id,
            AddressModel.user_id == user_id,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def find_by_user(self, user_id: UUID) -> list[Address]:
        stmt = (
            select(AddressModel)
            .where(AddressModel.user_id == user_id)
            .order_by(AddressModel.is_default.desc(), AddressModel.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def find_default(
        self,
        user_id: UUID,
        address_type: AddressType,
    ) -> Optional[Address]:
        stmt = select(AddressModel).where(
            AddressModel.user_id == user_id,
            AddressModel.type == address_type.value,
            AddressModel.is_default.is_(True),
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def save(self, address: Address) -> None:
        existing = await self._find_model_by_id(address.id)

        if address.is_default:
            # Clear sibling defaults before this row is flushed as default
            await self._session.execute(
                update(AddressModel)
                .where(
                    AddressModel.user_id == address.user_id,
                    AddressModel.type == address.type.value,
                    AddressModel.id != address.id,
                    AddressModel.is_default.is_(True),
                )
                .values(is_default=False)
                .execution_options(synchronize_session="fetch"),
            )

        if existing:
            self._update_model(existing, address)
            logger.debug("Updated address: %s", address.id)
        else:
            self._session.add(self._map_to_model(address))
            logger.debug("Created address: %s (user: %s)", address.id, address.user_id)

        await self._session.flush()

    async def delete(self, address_id: UUID) -> None:
        await self._session.execute(
            delete(AddressModel).where(AddressModel.id == address_id),
        )
        await self._session.flush()
        logger.info("Deleted address: %s", address_id)

    async def _find_model_by_id(self, address_id: UUID) -> Optional[AddressModel]:
        stmt = select(AddressModel).where(AddressModel.id == address_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: AddressModel) -> Address:
        return Address(
            id=model.id,
            user_id=model.user_id,
            type=AddressType(model.type),
            first_name=model.first_name,
            last_name=model.last_name,
            company=model.company,
            address_line1=model.address_line1,
            address_line2=model.address_line2,
            city=model.city,
            state=model.state,
            postal_code=model.postal_code,
            country=model.country,
            phone=model.phone,
            is_default=model.is_default,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _map_to_model(self, address: Address) -> AddressModel:
        model = AddressModel(id=address.id, user_id=address.user_id)
        self._update_model(model, address)
        model.created_at = address.created_at
        return model

    def _update_model(self, model: AddressModel, address: Address) -> None:
        model.type = address.type.value
        model.first_name = address.first_name
        model.last_name = address.last_name
        model.company = address.company
        model.address_line1 = address.address_line1
        model.address_line2 = address.address_line2
        model.city = address.city
        model.state = address.state
        model.postal_code = address.postal_code
        model.country = address.country
        model.phone = address.phone
        model.is_default = address.is_default
        model.updated_at = address.updated_at
