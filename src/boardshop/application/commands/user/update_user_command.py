"""Update any user account (administrator operation)."""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from boardshop.domain.user import (
    EmailAlreadyExistsError,
    User,
    UserNotFoundError,
    UserRepository,
    UserRole,
)
from boardshop_auth import PasswordHashingService

if TYPE_CHECKING:
    from boardshop.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class UpdateUserCommand:
    """Partially update a user; None means "leave unchanged"."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        password_service: PasswordHashingService,
    ) -> UpdateUserCommand:
        return cls(
            user_repository=factory.user_repository(),
            password_service=password_service,
        )

    async def execute(  # NOQA: PLR0913
        self,
        user_id: UUID,
        email: Optional[str] = None,
        password: Optional[str] = None,
        role: Optional[UserRole] = None,
        is_active: Optional[bool] = None,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        phone: Optional[str] = None,
        date_of_birth: Optional[date] = None,
        avatar: Optional[str] = None,
    ) -> User:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        if email is not None and email.strip().lower() != user.email:
            other = await self._user_repo.find_by_email(email)
            if other is not None and other.id != user.id:
                raise EmailAlreadyExistsError(other.email)
            user.change_email(email)

        if password is not None:
            user.change_password_hash(self._password_service.hash(password))

        if role is not None and role != user.role:
            user.change_role(role)
            logger.info("Role of user %s changed to %s", user.id, role.value)

        if is_active is not None and is_active != user.is_active:
            if is_active:
                user.activate()
            else:
                user.deactivate()
            logger.info("User %s active=%s", user.id, is_active)

        user.update_profile(
            first_name=first_name,
            last_name=last_name,
            phone=phone,
            date_of_birth=date_of_birth,
            avatar=avatar,
        )
        await self._user_repo.save(user)
        return user
