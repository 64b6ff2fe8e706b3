from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from boardshop.domain.ordering import OrderRepository
from boardshop.domain.user import (
    CannotDeleteSelfError,
    UserHasOrdersError,
    UserNotFoundError,
    UserRepository,
)

if TYPE_CHECKING:
    from boardshop.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class DeleteUserCommand:
    """Command to delete a user. Users with orders must be deactivated instead."""

    def __init__(
        self,
        user_repository: UserRepository,
        order_repository: OrderRepository,
    ):
        self._user_repo = user_repository
        self._order_repo = order_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteUserCommand:
        return cls(
            user_repository=factory.user_repository(),
            order_repository=factory.order_repository(),
        )

    async def execute(self, user_id: UUID, requesting_admin_id: UUID) -> None:
        if user_id == requesting_admin_id:
            raise CannotDeleteSelfError

        user = await self._user_repo.find_by_id(user_id)
        if not user:
            raise UserNotFoundError(str(user_id))

        order_count = await self._order_repo.count_by_user(user_id)
        if order_count > 0:
            raise UserHasOrdersError(user_id, order_count)

        await self._user_repo.delete(user_id)
        logger.info("User deleted: %s", user.email)
