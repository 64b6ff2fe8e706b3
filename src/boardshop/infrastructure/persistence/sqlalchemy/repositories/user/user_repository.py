"""SQLAlchemy implementation of UserRepository."""

import logging
from typing import Optional, Union
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from boardshop.domain.user import (
    Email,
    EmailAlreadyExistsError,
    User,
    UserRepository,
)
from boardshop.infrastructure.persistence.sqlalchemy.models.user import (
    AddressModel,
    UserModel,
    UserPreferencesModel,
)
from boardshop.infrastructure.persistence.sqlalchemy.repositories._utils import (
    is_unique_violation,
)

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        model = await self._find_model_by_id(user_id)

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        # Normalize email for lookup
        email_value = email.value if isinstance(email, Email) else Email(email).value

        stmt = select(UserModel).where(UserModel.email == email_value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        user = await self.find_by_email(email)
        return user is not None

    async def find_all(self) -> list[User]:
        stmt = select(UserModel).order_by(UserModel.created_at.desc())
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def save(self, user: User) -> None:
        existing = await self._find_model_by_id(user.id)

        try:
            if existing:
                self._update_model(existing, user)
                logger.debug("Updated user: %s", user.id)
            else:
                self._session.add(self._map_to_model(user))
                logger.info("Created user: %s (email: %s)", user.id, user.email)

            await self._session.flush()
        except IntegrityError as e:
            if is_unique_violation(e, "email"):
                raise EmailAlreadyExistsError(user.email) from e
            raise

    async def delete(self, user_id: UUID) -> None:
        # Dependent rows go first so SQLite without FK enforcement stays clean
        await self._session.execute(
            delete(UserPreferencesModel).where(UserPreferencesModel.user_id == user_id),
        )
        await self._session.execute(
            delete(AddressModel).where(AddressModel.user_id == user_id),
        )
        await self._session.execute(delete(UserModel).where(UserModel.id == user_id))
        await self._session.flush()
        logger.info("Deleted user: %s", user_id)

    async def _find_model_by_id(self, user_id: UUID) -> Optional[UserModel]:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            email=model.email,
            password_hash=model.password_hash,
            role=model.role,
            is_active=model.is_active,
            first_name=model.first_name,
            last_name=model.last_name,
            phone=model.phone,
            date_of_birth=model.date_of_birth,
            avatar=model.avatar,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            email=user.email,
            password_hash=user.password_hash,
            role=user.role.value,
            is_active=user.is_active,
            first_name=user.first_name,
            last_name=user.last_name,
            phone=user.phone,
            date_of_birth=user.date_of_birth,
            avatar=user.avatar,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def _update_model(self, model: UserModel, user: User) -> None:
        # Note: id never changes
        model.email = user.email
        model.password_hash = user.password_hash
        model.role = user.role.value
        model.is_active = user.is_active
        model.first_name = user.first_name
        model.last_name = user.last_name
        model.phone = user.phone
        model.date_of_birth = user.date_of_birth
        model.avatar = user.avatar
        model.updated_at = user.updated_at
