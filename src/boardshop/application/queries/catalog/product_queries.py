"""Read operations on products."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from boardshop.application.dtos import ProductPage
from boardshop.domain.catalog import (
    Product,
    ProductFilter,
    ProductNotFoundError,
    ProductRepository,
)

if TYPE_CHECKING:
    from boardshop.application.factories import RepositoryFactory

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100
DEFAULT_LOW_STOCK_THRESHOLD = 10


class ListProductsQuery:
    """
    Paginated, filtered product listing.

    Each product carries its category. Results are ordered newest first.
    """

    def __init__(
        self,
        product_repository: ProductRepository,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        active_only_default: bool = True,
    ):
        self._product_repo = product_repository
        self._default_page_size = default_page_size
        self._active_only_default = active_only_default

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        active_only_default: bool = True,
    ) -> ListProductsQuery:
        return cls(
            product_repository=factory.product_repository(),
            default_page_size=default_page_size,
            active_only_default=active_only_default,
        )

    async def execute(  # NOQA: PLR0913
        self,
        page: int = 1,
        page_size: Optional[int] = None,
        category_id: Optional[UUID] = None,
        min_price: Optional[Decimal] = None,
        max_price: Optional[Decimal] = None,
        search: Optional[str] = None,
        active_only: Optional[bool] = None,
    ) -> ProductPage:
        """
        Return one page of products.

        Parameters
        ----------
        page
            1-based page number; values below 1 are treated as 1
        page_size
            Items per page, capped at 100; the configured default when None
        category_id, min_price, max_price, search
            Optional filters; ``search`` matches title, description and brand
            case-insensitively
        active_only
            Hide inactive products; the configured default when None

        Returns
        -------
        ProductPage with the items, total count and page metadata
        """
        page = max(page, 1)
        size = page_size if page_size is not None else self._default_page_size
        size = min(max(size, 1), MAX_PAGE_SIZE)

        product_filter = ProductFilter(
            category_id=category_id,
            min_price=min_price,
            max_price=max_price,
            search=search or None,
            active_only=(
                self._active_only_default if active_only is None else active_only
            ),
        )
        items, total = await self._product_repo.search(
            product_filter,
            offset=(page - 1) * size,
            limit=size,
        )
        return ProductPage(items=items, total=total, page=page, page_size=size)


class GetProductQuery:
    """A single product with its category."""

    def __init__(self, product_repository: ProductRepository):
        self._product_repo = product_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetProductQuery:
        return cls(product_repository=factory.product_repository())

    async def execute(self, product_id: UUID) -> Product:
        product = await self._product_repo.find_by_id(product_id, with_category=True)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product


class FindLowStockQuery:
    """Active, stock-tracked products at or below a threshold."""

    def __init__(
        self,
        product_repository: ProductRepository,
        default_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
    ):
        self._product_repo = product_repository
        self._default_threshold = default_threshold

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        default_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
    ) -> FindLowStockQuery:
        return cls(
            product_repository=factory.product_repository(),
            default_threshold=default_threshold,
        )

    async def execute(self, threshold: Optional[int] = None) -> list[Product]:
        return await self._product_repo.find_low_stock(
            self._default_threshold if threshold is None else threshold,
        )
