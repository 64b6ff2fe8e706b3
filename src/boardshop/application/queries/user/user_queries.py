"""Read operations on users, addresses and preferences."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional
from uuid import UUID

from boardshop.application.context import UserContext
from boardshop.application.dtos import UserProfile
from boardshop.domain.user import (
    Address,
    AddressRepository,
    User,
    UserNotFoundError,
    UserPreferences,
    UserPreferencesRepository,
    UserRepository,
)

if TYPE_CHECKING:
    from boardshop.application.factories import RepositoryFactory


class ListUsersQuery:
    """All users, newest first (administrator)."""

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListUsersQuery:
        return cls(user_repository=factory.user_repository())

    async def execute(self) -> list[User]:
        return await self._user_repo.find_all()


class GetUserQuery:
    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetUserQuery:
        return cls(user_repository=factory.user_repository())

    async def execute(self, user_id: UUID) -> User:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user


class GetProfileQuery:
    """The caller with their addresses and preferences."""

    def __init__(
        self,
        user_repository: UserRepository,
        address_repository: AddressRepository,
        preferences_repository: UserPreferencesRepository,
        user_context: UserContext,
    ):
        self._user_repo = user_repository
        self._address_repo = address_repository
        self._preferences_repo = preferences_repository
        self._user_context = user_context

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetProfileQuery:
        return cls(
            user_repository=factory.user_repository(),
            address_repository=factory.address_repository(),
            preferences_repository=factory.user_preferences_repository(),
            user_context=factory.user_context,
        )

    async def execute(self) -> UserProfile:
        user_id = self._user_context.user_id
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        return UserProfile(
            user=user,
            addresses=await self._address_repo.find_by_user(user_id),
            preferences=await self._preferences_repo.find_by_user_id(user_id),
        )


class ListAddressesQuery:
    """The caller's addresses, default first, then newest first."""

    def __init__(self, address_repository: AddressRepository, user_context: UserContext):
        self._address_repo = address_repository
        self._user_context = user_context

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListAddressesQuery:
        return cls(
            address_repository=factory.address_repository(),
            user_context=factory.user_context,
        )

    async def execute(self) -> list[Address]:
        return await self._address_repo.find_by_user(self._user_context.user_id)


class GetUserPreferencesQuery:
    """The caller's preferences; None when never saved."""

    def __init__(
        self,
        preferences_repository: UserPreferencesRepository,
        user_context: UserContext,
    ):
        self._preferences_repo = preferences_repository
        self._user_context = user_context

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetUserPreferencesQuery:
        return cls(
            preferences_repository=factory.user_preferences_repository(),
            user_context=factory.user_context,
        )

    async def execute(self) -> Optional[UserPreferences]:
        return await self._preferences_repo.find_by_user_id(self._user_context.user_id)
