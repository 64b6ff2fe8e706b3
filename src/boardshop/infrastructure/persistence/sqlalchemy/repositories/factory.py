"""SQLAlchemy repository factory for creating request-scoped repositories."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from boardshop.infrastructure.persistence.sqlalchemy.repositories.catalog import (
    CategoryRepositorySQLAlchemy,
    ProductRepositorySQLAlchemy,
)
from boardshop.infrastructure.persistence.sqlalchemy.repositories.ordering import (
    OrderRepositorySQLAlchemy,
)
from boardshop.infrastructure.persistence.sqlalchemy.repositories.user import (
    AddressRepositorySQLAlchemy,
    UserPreferencesRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)

if TYPE_CHECKING:
    from boardshop.application.context import UserContext


class SQLAlchemyRepositoryFactory:
    """SQLAlchemy implementation of the RepositoryFactory Protocol."""

    def __init__(
        self,
        session: AsyncSession,
        user_context: Optional[UserContext] = None,
    ):
        self._session = session
        self._user_context = user_context

        # Cached instances (created on demand)
        self._user_repo: UserRepositorySQLAlchemy | None = None
        self._address_repo: AddressRepositorySQLAlchemy | None = None
        self._preferences_repo: UserPreferencesRepositorySQLAlchemy | None = None
        self._category_repo: CategoryRepositorySQLAlchemy | None = None
        self._product_repo: ProductRepositorySQLAlchemy | None = None
        self._order_repo: OrderRepositorySQLAlchemy | None = None

    @property
    def user_context(self) -> Optional[UserContext]:
        return self._user_context

    @property
    def session(self) -> AsyncSession:
        return self._session

    def user_repository(self) -> UserRepositorySQLAlchemy:
        if self._user_repo is None:
            self._user_repo = UserRepositorySQLAlchemy(self._session)
        return self._user_repo

    def address_repository(self) -> AddressRepositorySQLAlchemy:
        if self._address_repo is None:
            self._address_repo = AddressRepositorySQLAlchemy(self._session)
        return self._address_repo

    def user_preferences_repository(self) -> UserPreferencesRepositorySQLAlchemy:
        if self._preferences_repo is None:
            self._preferences_repo = UserPreferencesRepositorySQLAlchemy(self._session)
        return self._preferences_repo

    def category_repository(self) -> CategoryRepositorySQLAlchemy:
        if self._category_repo is None:
            self._category_repo = CategoryRepositorySQLAlchemy(self._session)
        return self._category_repo

    def product_repository(self) -> ProductRepositorySQLAlchemy:
        if self._product_repo is None:
            self._product_repo = ProductRepositorySQLAlchemy(self._session)
        return self._product_repo

    def order_repository(self) -> OrderRepositorySQLAlchemy:
        if self._order_repo is None:
            self._order_repo = OrderRepositorySQLAlchemy(self._session)
        return self._order_repo
