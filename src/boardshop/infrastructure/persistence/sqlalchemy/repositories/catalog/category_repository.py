"""SQLAlchemy implementation of CategoryRepository."""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from boardshop.domain.catalog import (
    Category,
    CategoryAlreadyExistsError,
    CategoryRepository,
)
from boardshop.infrastructure.persistence.sqlalchemy.models.catalog import (
    CategoryModel,
    ProductModel,
)
from boardshop.infrastructure.persistence.sqlalchemy.repositories._utils import (
    is_unique_violation,
)

logger = logging.getLogger(__name__)


class CategoryRepositorySQLAlchemy(CategoryRepository):
    """SQLAlchemy implementation of the CategoryRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, category_id: UUID) -> Optional[Category]:
        model = await self._find_model_by_id(category_id)
        return map_category(model) if model else None

    async def find_by_name(self, name: str) -> Optional[Category]:
        stmt = select(CategoryModel).where(CategoryModel.name == name)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return map_category(model) if model else None

    async def find_all(self) -> list[Category]:
        stmt = select(CategoryModel).order_by(CategoryModel.name)
        result = await self._session.execute(stmt)
        return [map_category(model) for model in result.scalars().all()]

    async def count_products(self, category_id: UUID) -> int:
        stmt = (
            select(func.count())
            .select_from(ProductModel)
            .where(ProductModel.category_id == category_id)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def save(self, category: Category) -> None:
        existing = await self._find_model_by_id(category.id)

        try:
            if existing:
                existing.name = category.name
                existing.description = category.description
                existing.updated_at = category.updated_at
                logger.debug("Updated category: %s", category.id)
            else:
                self._session.add(
                    CategoryModel(
                        id=category.id,
                        name=category.name,
                        description=category.description,
                        created_at=category.created_at,
                        updated_at=category.updated_at,
                    ),
                )
                logger.info("Created category: %s (%s)", category.name, category.id)

            await self._session.flush()
        except IntegrityError as e:
            if is_unique_violation(e, "name"):
                raise CategoryAlreadyExistsError(category.name) from e
            raise

    async def delete(self, category_id: UUID) -> None:
        await self._session.execute(
            delete(CategoryModel).where(CategoryModel.id == category_id),
        )
        await self._session.flush()
        logger.info("Deleted category: %s", category_id)

    async def _find_model_by_id(self, category_id: UUID) -> Optional[CategoryModel]:
        stmt = select(CategoryModel).where(CategoryModel.id == category_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()


def map_category(model: CategoryModel) -> Category:
    return Category(
        id=model.id,
        name=model.name,
        description=model.description,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )
