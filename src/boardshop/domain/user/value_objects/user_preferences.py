"""User preferences value object.

Skate, notification and shopping preferences of a single user. Stored
one-to-one with the user; a user without stored preferences has none.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any


class SkillLevel(str, Enum):
    BEGINNER = "BEGINNER"
    INTERMEDIATE = "INTERMEDIATE"
    ADVANCED = "ADVANCED"
    PROFESSIONAL = "PROFESSIONAL"


@dataclass(frozen=True)
class UserPreferences:
    """Immutable preference set; use ``with_updates`` to derive a new one."""

    preferred_deck_size: str | None = None
    preferred_brands: tuple[str, ...] = field(default_factory=tuple)
    skill_level: SkillLevel = SkillLevel.BEGINNER
    riding_style: tuple[str, ...] = field(default_factory=tuple)
    email_notifications: bool = True
    sms_notifications: bool = False
    push_notifications: bool = True
    marketing_emails: bool = True
    currency: str = "USD"
    measurement_unit: str = "IMPERIAL"

    def __post_init__(self) -> None:
        # Lists arriving from the API or the database become tuples
        object.__setattr__(self, "preferred_brands", tuple(self.preferred_brands))
        object.__setattr__(self, "riding_style", tuple(self.riding_style))
        if not isinstance(self.skill_level, SkillLevel):
            object.__setattr__(self, "skill_level", SkillLevel(self.skill_level))

    def with_updates(self, **changes: Any) -> "UserPreferences":
        # Only provided (non-None) values are updated; others are preserved.
        return replace(
            self,
            **{key: value for key, value in changes.items() if value is not None},
        )
