"""Value objects for the user domain."""

from boardshop.domain.user.value_objects.address_type import AddressType
from boardshop.domain.user.value_objects.email import Email
from boardshop.domain.user.value_objects.user_preferences import (
    SkillLevel,
    UserPreferences,
)
from boardshop.domain.user.value_objects.user_role import UserRole

__all__ = [
    "AddressType",
    "Email",
    "SkillLevel",
    "UserPreferences",
    "UserRole",
]
