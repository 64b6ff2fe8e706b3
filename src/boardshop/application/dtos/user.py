"""User read models."""

from dataclasses import dataclass
from typing import Optional

from boardshop.domain.user import Address, User, UserPreferences


@dataclass(frozen=True)
class UserProfile:
    """A user together with their addresses and preferences."""

    user: User
    addresses: list[Address]
    preferences: Optional[UserPreferences]
