"""SQLAlchemy implementation of ProductRepository."""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import delete, func, inspect, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from boardshop.domain.catalog import (
    DuplicateSkuError,
    Product,
    ProductFilter,
    ProductRepository,
)
from boardshop.infrastructure.persistence.sqlalchemy.models.catalog import ProductModel
from boardshop.infrastructure.persistence.sqlalchemy.models.ordering import (
    OrderItemModel,
)
from boardshop.infrastructure.persistence.sqlalchemy.repositories._utils import (
    LIKE_ESCAPE,
    contains_pattern,
    is_unique_violation,
)
from boardshop.infrastructure.persistence.sqlalchemy.repositories.catalog.category_repository import (  # NOQA: E501
    map_category,
)

logger = logging.getLogger(__name__)


class ProductRepositorySQLAlchemy(ProductRepository):
    """SQLAlchemy implementation of the ProductRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(
        self,
        product_id: UUID,
        with_category: bool = False,
    ) -> Optional[Product]:
        stmt = select(ProductModel).where(ProductModel.id == product_id)
        if with_category:
            stmt = stmt.options(
                selectinload(ProductModel.category),
            ).execution_options(populate_existing=True)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def find_by_ids(self, product_ids: list[UUID]) -> dict[UUID, Product]:
        if not product_ids:
            return {}
        stmt = select(ProductModel).where(ProductModel.id.in_(set(product_ids)))
        result = await self._session.execute(stmt)
        return {model.id: self._map_to_domain(model) for model in result.scalars().all()}

    async def find_by_sku(self, sku: str) -> Optional[Product]:
        stmt = select(ProductModel).where(ProductModel.sku == sku)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def search(
        self,
        product_filter: ProductFilter,
        offset: int,
        limit: int,
    ) -> tuple[list[Product], int]:
        conditions = self._build_conditions(product_filter)

        count_stmt = select(func.count()).select_from(ProductModel).where(*conditions)
        total = (await self._session.execute(count_stmt)).scalar_one()

        stmt = (
            select(ProductModel)
            .where(*conditions)
            .options(selectinload(ProductModel.category))
            .execution_options(populate_existing=True)
            .order_by(ProductModel.created_at.desc(), ProductModel.id)
            .offset(offset)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        products = [self._map_to_domain(model) for model in result.scalars().all()]
        return products, total

    async def find_low_stock(self, threshold: int) -> list[Product]:
        stmt = (
            select(ProductModel)
            .where(
                ProductModel.is_active.is_(True),
                ProductModel.stock_quantity.is_not(None),
                ProductModel.stock_quantity <= threshold,
            )
            .options(selectinload(ProductModel.category))
            .execution_options(populate_existing=True)
            .order_by(ProductModel.stock_quantity.asc(), ProductModel.title)
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def is_referenced_by_orders(self, product_id: UUID) -> bool:
        stmt = (
            select(OrderItemModel.id)
            .where(OrderItemModel.product_id == product_id)
            .limit(1)
        )
        result = await self._session.execute(stmt)
        return result.first() is not None

    async def save(self, product: Product) -> None:
        existing = await self._find_model_by_id(product.id)

        try:
            if existing:
                self._update_model(existing, product)
                logger.debug("Updated product: %s", product.id)
            else:
                model = ProductModel(id=product.id, created_at=product.created_at)
                self._update_model(model, product)
                self._session.add(model)
                logger.info("Created product: %s (%s)", product.title, product.id)

            await self._session.flush()
        except IntegrityError as e:
            if product.sku and is_unique_violation(e, "sku"):
                raise DuplicateSkuError(product.sku) from e
            raise

    async def delete(self, product_id: UUID) -> None:
        await self._session.execute(
            delete(ProductModel).where(ProductModel.id == product_id),
        )
        await self._session.flush()
        logger.info("Deleted product: %s", product_id)

    async def _find_model_by_id(self, product_id: UUID) -> Optional[ProductModel]:
        stmt = select(ProductModel).where(ProductModel.id == product_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _build_conditions(self, product_filter: ProductFilter) -> list:
        conditions = []
        if product_filter.active_only:
            conditions.append(ProductModel.is_active.is_(True))
        if product_filter.category_id is not None:
            conditions.append(ProductModel.category_id == product_filter.category_id)
        if product_filter.min_price is not None:
            conditions.append(ProductModel.price >= product_filter.min_price)
        if product_filter.max_price is not None:
            conditions.append(ProductModel.price <= product_filter.max_price)
        if product_filter.search:
            pattern = contains_pattern(product_filter.search.strip())
            conditions.append(
                or_(
                    ProductModel.title.ilike(pattern, escape=LIKE_ESCAPE),
                    ProductModel.description.ilike(pattern, escape=LIKE_ESCAPE),
                    ProductModel.brand.ilike(pattern, escape=LIKE_ESCAPE),
                ),
            )
        return conditions

    def _map_to_domain(self, model: ProductModel) -> Product:
        category = None
        if "category" not in inspect(model).unloaded:
            category = map_category(model.category)

        return Product(
            id=model.id,
            title=model.title,
            description=model.description,
            price=model.price,
            category_id=model.category_id,
            image_url=model.image_url,
            brand=model.brand,
            sku=model.sku,
            stock_quantity=model.stock_quantity,
            tags=list(model.tags or []),
            weight=model.weight,
            dimensions=model.dimensions,
            is_active=model.is_active,
            created_at=model.created_at,
            updated_at=model.updated_at,
            category=category,
        )

    def _update_model(self, model: ProductModel, product: Product) -> None:
        model.title = product.title
        model.description = product.description
        model.price = product.price
        model.category_id = product.category_id
        model.image_url = product.image_url
        model.brand = product.brand
        model.sku = product.sku
        model.stock_quantity = product.stock_quantity
        model.tags = list(product.tags)
        model.weight = product.weight
        model.dimensions = product.dimensions
        model.is_active = product.is_active
        model.updated_at = product.updated_at
