"""Category repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from boardshop.domain.catalog.entities import Category


class CategoryRepository(ABC):
    """Repository interface for categories."""

    @abstractmethod
    async def find_by_id(self, category_id: UUID) -> Optional[Category]:
        """Find a category by ID."""

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[Category]:
        """Find a category by its exact name."""

    @abstractmethod
    async def find_all(self) -> list[Category]:
        """Return all categories ordered by name."""

    @abstractmethod
    async def count_products(self, category_id: UUID) -> int:
        """Count products (active or not) that reference the category."""

    @abstractmethod
    async def save(self, category: Category) -> None:
        """
        Save or update a category.

        Raises
        ------
        CategoryAlreadyExistsError
            If the name is taken by another category
        """

    @abstractmethod
    async def delete(self, category_id: UUID) -> None:
        """Delete a category by ID."""
