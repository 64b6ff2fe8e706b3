"""User preferences repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from boardshop.domain.user.value_objects import UserPreferences


class UserPreferencesRepository(ABC):
    """Repository interface for the one-to-one user preferences."""

    @abstractmethod
    async def find_by_user_id(self, user_id: UUID) -> Optional[UserPreferences]:
        """Return stored preferences, or None when the user has none yet."""

    @abstractmethod
    async def save(self, user_id: UUID, preferences: UserPreferences) -> None:
        """Insert or replace the user's preferences."""
