"""Product write operations (administrator)."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Optional
from uuid import UUID

from boardshop.domain.catalog import (
    CategoryNotFoundError,
    CategoryRepository,
    DuplicateSkuError,
    Product,
    ProductInUseError,
    ProductNotFoundError,
    ProductRepository,
)

if TYPE_CHECKING:
    from boardshop.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class CreateProductCommand:
    """Create a product in an existing category."""

    def __init__(
        self,
        product_repository: ProductRepository,
        category_repository: CategoryRepository,
    ):
        self._product_repo = product_repository
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateProductCommand:
        return cls(
            product_repository=factory.product_repository(),
            category_repository=factory.category_repository(),
        )

    async def execute(  # NOQA: PLR0913
        self,
        title: str,
        price: Decimal,
        category_id: UUID,
        description: Optional[str] = None,
        image_url: Optional[str] = None,
        brand: Optional[str] = None,
        sku: Optional[str] = None,
        stock_quantity: Optional[int] = None,
        tags: Optional[list[str]] = None,
        weight: Optional[Decimal] = None,
        dimensions: Optional[str] = None,
        is_active: bool = True,
    ) -> Product:
        category = await self._category_repo.find_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id)

        if sku and await self._product_repo.find_by_sku(sku) is not None:
            raise DuplicateSkuError(sku)

        product = Product(
            title=title,
            price=price,
            category_id=category_id,
            description=description,
            image_url=image_url,
            brand=brand,
            sku=sku,
            stock_quantity=stock_quantity,
            tags=tags or [],
            weight=weight,
            dimensions=dimensions,
            is_active=is_active,
            category=category,
        )
        await self._product_repo.save(product)
        logger.info("Product created: %s (%s)", product.title, product.id)
        return product


class UpdateProductCommand:
    """Partially update a product; a new category must exist."""

    def __init__(
        self,
        product_repository: ProductRepository,
        category_repository: CategoryRepository,
    ):
        self._product_repo = product_repository
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateProductCommand:
        return cls(
            product_repository=factory.product_repository(),
            category_repository=factory.category_repository(),
        )

    async def execute(self, product_id: UUID, **changes: Any) -> Product:
        product = await self._product_repo.find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)

        category_id = changes.get("category_id")
        category = await self._category_repo.find_by_id(
            category_id if category_id is not None else product.category_id,
        )
        if category is None:
            raise CategoryNotFoundError(category_id or product.category_id)

        sku = changes.get("sku")
        if sku and sku != product.sku:
            other = await self._product_repo.find_by_sku(sku)
            if other is not None and other.id != product.id:
                raise DuplicateSkuError(sku)

        product.update(**changes)
        product.category = category
        await self._product_repo.save(product)
        logger.info("Product updated: %s", product.id)
        return product


class DeleteProductCommand:
    """Delete a product that no order line references."""

    def __init__(self, product_repository: ProductRepository):
        self._product_repo = product_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteProductCommand:
        return cls(product_repository=factory.product_repository())

    async def execute(self, product_id: UUID) -> None:
        product = await self._product_repo.find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)

        if await self._product_repo.is_referenced_by_orders(product_id):
            raise ProductInUseError(product_id)

        await self._product_repo.delete(product_id)
        logger.info("Product deleted: %s (%s)", product.title, product.id)


class UpdateStockCommand:
    """Set the absolute stock quantity of a product."""

    def __init__(self, product_repository: ProductRepository):
        self._product_repo = product_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateStockCommand:
        return cls(product_repository=factory.product_repository())

    async def execute(self, product_id: UUID, quantity: int) -> Product:
        product = await self._product_repo.find_by_id(product_id, with_category=True)
        if product is None:
            raise ProductNotFoundError(product_id)

        previous = product.stock_quantity
        product.set_stock(quantity)
        await self._product_repo.save(product)
        logger.info("Stock of %s changed: %s -> %s", product.id, previous, quantity)
        return product
