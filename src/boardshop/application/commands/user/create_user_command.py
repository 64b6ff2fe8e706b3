"""Create a user account on behalf of an administrator."""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING, Optional

from boardshop.domain.user import EmailAlreadyExistsError, User, UserRepository, UserRole
from boardshop_auth import PasswordHashingService

if TYPE_CHECKING:
    from boardshop.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class CreateUserCommand:
    """Command to create a user with an explicit role."""

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
    ) -> CreateUserCommand:
        return cls(
            user_repository=factory.user_repository(),
            password_service=password_service,
        )

    async def execute(  # NOQA: PLR0913
        self,
        email: str,
        password: str,
        role: UserRole = UserRole.USER,
        is_active: bool = True,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        phone: Optional[str] = None,
        date_of_birth: Optional[date] = None,
    ) -> User:
        if await self._user_repo.exists_by_email(email):
            raise EmailAlreadyExistsError(email.strip().lower())

        user = User.create(
            email,
            password_hash=self._password_service.hash(password),
            role=role,
            is_active=is_active,
            first_name=first_name,
            last_name=last_name,
            phone=phone,
            date_of_birth=date_of_birth,
        )
        await self._user_repo.save(user)
        logger.info("User created by admin: %s (role: %s)", user.email, role.value)
        return user
