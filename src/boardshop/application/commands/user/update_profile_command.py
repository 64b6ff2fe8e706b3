"""Update the caller's own profile."""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING, Optional

from boardshop.application.context import UserContext
from boardshop.domain.user import User, UserNotFoundError, UserRepository
from boardshop_auth import PasswordHashingService

if TYPE_CHECKING:
    from boardshop.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class UpdateProfileCommand:
    """Update profile fields of the current user; a new password is re-hashed."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        user_context: UserContext,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._user_context = user_context

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        password_service: PasswordHashingService,
    ) -> UpdateProfileCommand:
        return cls(
            user_repository=factory.user_repository(),
            password_service=password_service,
            user_context=factory.user_context,
        )

    async def execute(  # NOQA: PLR0913
        self,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        phone: Optional[str] = None,
        date_of_birth: Optional[date] = None,
        avatar: Optional[str] = None,
        password: Optional[str] = None,
    ) -> User:
        user = await self._user_repo.find_by_id(self._user_context.user_id)
        if user is None:
            raise UserNotFoundError(self._user_context.user_id)

        if password is not None:
            user.change_password_hash(self._password_service.hash(password))
            logger.info("Password changed for user: %s", user.id)

        user.update_profile(
            first_name=first_name,
            last_name=last_name,
            phone=phone,
            date_of_birth=date_of_birth,
            avatar=avatar,
        )
        await self._user_repo.save(user)
        return user
