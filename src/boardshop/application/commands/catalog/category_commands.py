"""Category write operations (administrator)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from boardshop.domain.catalog import (
    Category,
    CategoryAlreadyExistsError,
    CategoryInUseError,
    CategoryNotFoundError,
    CategoryRepository,
)

if TYPE_CHECKING:
    from boardshop.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class CreateCategoryCommand:
    """Create a category with a unique name."""

    def __init__(self, category_repository: CategoryRepository):
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateCategoryCommand:
        return cls(category_repository=factory.category_repository())

    async def execute(self, name: str, description: Optional[str] = None) -> Category:
        category = Category(name=name, description=description)
        if await self._category_repo.find_by_name(category.name) is not None:
            raise CategoryAlreadyExistsError(category.name)

        await self._category_repo.save(category)
        logger.info("Category created: %s", category.name)
        return category


class UpdateCategoryCommand:
    """Rename or re-describe a category."""

    def __init__(self, category_repository: CategoryRepository):
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateCategoryCommand:
        return cls(category_repository=factory.category_repository())

    async def execute(
        self,
        category_id: UUID,
        name: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Category:
        category = await self._category_repo.find_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id)

        if name is not None and name.strip() != category.name:
            other = await self._category_repo.find_by_name(name.strip())
            if other is not None and other.id != category.id:
                raise CategoryAlreadyExistsError(other.name)
            category.rename(name)

        if description is not None:
            category.describe(description)

        await self._category_repo.save(category)
        return category


class DeleteCategoryCommand:
    """Delete a category that no product references."""

    def __init__(self, category_repository: CategoryRepository):
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteCategoryCommand:
        return cls(category_repository=factory.category_repository())

    async def execute(self, category_id: UUID) -> None:
        category = await self._category_repo.find_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id)

        product_count = await self._category_repo.count_products(category_id)
        if product_count > 0:
            raise CategoryInUseError(category_id, product_count)

        await self._category_repo.delete(category_id)
        logger.info("Category deleted: %s", category.name)
