"""Read operations on categories."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from boardshop.domain.catalog import Category, CategoryNotFoundError, CategoryRepository

if TYPE_CHECKING:
    from boardshop.application.factories import RepositoryFactory


class ListCategoriesQuery:
    """All categories ordered by name."""

    def __init__(self, category_repository: CategoryRepository):
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListCategoriesQuery:
        return cls(category_repository=factory.category_repository())

    async def execute(self) -> list[Category]:
        return await self._category_repo.find_all()


class GetCategoryQuery:
    def __init__(self, category_repository: CategoryRepository):
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetCategoryQuery:
        return cls(category_repository=factory.category_repository())

    async def execute(self, category_id: UUID) -> Category:
        category = await self._category_repo.find_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id)
        return category
