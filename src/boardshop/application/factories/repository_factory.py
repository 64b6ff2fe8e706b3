"""Repository factory protocol for application layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Protocol

from boardshop.domain.catalog import CategoryRepository, ProductRepository
from boardshop.domain.ordering import OrderRepository
from boardshop.domain.user import (
    AddressRepository,
    UserPreferencesRepository,
    UserRepository,
)

if TYPE_CHECKING:
    from boardshop.application.context import UserContext


class RepositoryFactory(Protocol):
    """Protocol for creating request-scoped repositories."""

    @property
    def user_context(self) -> Optional[UserContext]:
        """The authenticated caller, None on public endpoints."""
        ...

    @property
    def session(self) -> Any:
        """Get the database session for transaction management.

        The type is intentionally `Any` to avoid coupling the
        application layer to specific database implementations.
        Use this for commit/rollback at the presentation layer.
        """
        ...

    def user_repository(self) -> UserRepository:
        """Get user repository."""
        ...

    def address_repository(self) -> AddressRepository:
        """Get address repository."""
        ...

    def user_preferences_repository(self) -> UserPreferencesRepository:
        """Get user preferences repository."""
        ...

    def category_repository(self) -> CategoryRepository:
        """Get category repository."""
        ...

    def product_repository(self) -> ProductRepository:
        """Get product repository."""
        ...

    def order_repository(self) -> OrderRepository:
        """Get order repository."""
        ...
