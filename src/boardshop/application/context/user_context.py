"""User context for request-scoped user identity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID

from boardshop.domain.user import UserRole

if TYPE_CHECKING:
    from boardshop.domain.user import User


@dataclass(frozen=True)
class UserContext:
    """
    Immutable context for the current authenticated user.

    This is created once per request after authentication and handed to
    commands and queries that act on behalf of the caller.
    """

    user_id: UUID
    email: str
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @classmethod
    def create(cls, user: User) -> UserContext:
        return cls(user_id=user.id, email=user.email, role=user.role)

    def __str__(self) -> str:
        return f"UserContext({self.email})"

    def __repr__(self) -> str:
        return (
            f"UserContext(user_id={self.user_id}, email={self.email!r}, "
            f"role={self.role.value})"
        )
