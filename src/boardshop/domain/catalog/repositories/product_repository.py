"""Product repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from boardshop.domain.catalog.entities import Product
from boardshop.domain.catalog.value_objects import ProductFilter


class ProductRepository(ABC):
    """Repository interface for products."""

    @abstractmethod
    async def find_by_id(
        self,
        product_id: UUID,
        with_category: bool = False,
    ) -> Optional[Product]:
        """
        Find a product by ID.

        Parameters
        ----------
        product_id
            The product's unique identifier
        with_category
            Load the category relation into ``Product.category``

        Returns
        -------
        Product if found, None otherwise
        """

    @abstractmethod
    async def find_by_ids(self, product_ids: list[UUID]) -> dict[UUID, Product]:
        """Resolve several products at once; missing ids are absent from the map."""

    @abstractmethod
    async def find_by_sku(self, sku: str) -> Optional[Product]:
        """Find a product by SKU."""

    @abstractmethod
    async def search(
        self,
        product_filter: ProductFilter,
        offset: int,
        limit: int,
    ) -> tuple[list[Product], int]:
        """
        Return one page of matching products (newest first) and the total count.

        Products are returned with their category loaded.
        """

    @abstractmethod
    async def find_low_stock(self, threshold: int) -> list[Product]:
        """
        Return active products whose tracked stock is at or below threshold.

        Ordered by stock ascending, with their category loaded.
        """

    @abstractmethod
    async def is_referenced_by_orders(self, product_id: UUID) -> bool:
        """Check whether any order line references the product."""

    @abstractmethod
    async def save(self, product: Product) -> None:
        """
        Save or update a product.

        Raises
        ------
        DuplicateSkuError
            If the SKU is used by another product
        """

    @abstractmethod
    async def delete(self, product_id: UUID) -> None:
        """Delete a product by ID."""
