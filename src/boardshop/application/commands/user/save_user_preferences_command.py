"""Create or update the current user's preferences."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from boardshop.application.context import UserContext
from boardshop.domain.user import UserPreferences, UserPreferencesRepository

if TYPE_CHECKING:
    from boardshop.application.factories import RepositoryFactory


class SaveUserPreferencesCommand:
    """Upsert preferences; fields not provided keep their stored (or default) value."""

    def __init__(
        self,
        preferences_repository: UserPreferencesRepository,
        user_context: UserContext,
    ):
        self._preferences_repo = preferences_repository
        self._user_context = user_context

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> SaveUserPreferencesCommand:
        return cls(
            preferences_repository=factory.user_preferences_repository(),
            user_context=factory.user_context,
        )

    async def execute(self, **changes: Any) -> UserPreferences:
        user_id = self._user_context.user_id
        current = await self._preferences_repo.find_by_user_id(user_id)
        preferences = (current or UserPreferences()).with_updates(**changes)
        await self._preferences_repo.save(user_id, preferences)
        return preferences
