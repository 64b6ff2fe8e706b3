"""Products router: catalog browsing, administration and stock."""

import logging
from decimal import Decimal
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from boardshop.application.commands.catalog import (
    CreateProductCommand,
    DeleteProductCommand,
    UpdateProductCommand,
    UpdateStockCommand,
)
from boardshop.application.queries.catalog import (
    FindLowStockQuery,
    GetProductQuery,
    ListProductsQuery,
)
from boardshop.presentation.api.access_control import authorize
from boardshop.presentation.api.dependencies import RepoFactory, SettingsDep
from boardshop.presentation.api.schemas.catalog import (
    ProductCreateRequest,
    ProductListResponse,
    ProductResponse,
    ProductUpdateRequest,
    StockUpdateRequest,
)
from boardshop.presentation.api.schemas.common import MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(authorize)])

# Type aliases for query parameters
PageParam = Annotated[int, Query(ge=1, description="Page number (1-based)")]
PageSizeParam = Annotated[
    int | None,
    Query(ge=1, description="Items per page (capped at 100)"),
]
CategoryFilter = Annotated[UUID | None, Query(description="Only this category")]
MinPriceFilter = Annotated[Decimal | None, Query(ge=0)]
MaxPriceFilter = Annotated[Decimal | None, Query(ge=0)]
SearchFilter = Annotated[
    str | None,
    Query(max_length=200, description="Matches title, description and brand"),
]
ActiveOnlyFilter = Annotated[
    bool | None,
    Query(description="Only active products (configured default when omitted)"),
]
ThresholdParam = Annotated[
    int | None,
    Query(ge=0, description="Stock at or below this value (default 10)"),
]


@router.get("", summary="List products")
async def list_products(  # NOQA: PLR0913
    factory: RepoFactory,
    settings: SettingsDep,
    page: PageParam = 1,
    page_size: PageSizeParam = None,
    category_id: CategoryFilter = None,
    min_price: MinPriceFilter = None,
    max_price: MaxPriceFilter = None,
    search: SearchFilter = None,
    active_only: ActiveOnlyFilter = None,
) -> ProductListResponse:
    """Paginated product listing, newest first."""
    query = ListProductsQuery.from_factory(
        factory,
        default_page_size=settings.catalog_default_page_size,
        active_only_default=settings.catalog_active_only_default,
    )
    result = await query.execute(
        page=page,
        page_size=page_size,
        category_id=category_id,
        min_price=min_price,
        max_price=max_price,
        search=search,
        active_only=active_only,
    )
    return ProductListResponse.from_page(result)


@router.get(
    "/stock/low",
    summary="List low-stock products",
    responses={403: {"description": "Admin access required"}},
)
async def list_low_stock(
    factory: RepoFactory,
    settings: SettingsDep,
    threshold: ThresholdParam = None,
) -> list[ProductResponse]:
    """Active products with tracked stock at or below the threshold."""
    query = FindLowStockQuery.from_factory(
        factory,
        default_threshold=settings.low_stock_default_threshold,
    )
    products = await query.execute(threshold)
    return [ProductResponse.from_domain(p) for p in products]


@router.get(
    "/{product_id}",
    summary="Get a product",
    responses={404: {"description": "Product not found"}},
)
async def get_product(product_id: UUID, factory: RepoFactory) -> ProductResponse:
    product = await GetProductQuery.from_factory(factory).execute(product_id)
    return ProductResponse.from_domain(product)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a product",
    responses={
        404: {"description": "Category not found"},
        409: {"description": "SKU already exists"},
    },
)
async def create_product(
    request: ProductCreateRequest,
    factory: RepoFactory,
) -> ProductResponse:
    command = CreateProductCommand.from_factory(factory)

    try:
        product = await command.execute(**request.model_dump())
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return ProductResponse.from_domain(product)


@router.put(
    "/{product_id}",
    summary="Update a product",
    responses={
        404: {"description": "Product or category not found"},
        409: {"description": "SKU already exists"},
    },
)
async def update_product(
    product_id: UUID,
    request: ProductUpdateRequest,
    factory: RepoFactory,
) -> ProductResponse:
    command = UpdateProductCommand.from_factory(factory)

    try:
        product = await command.execute(
            product_id,
            **request.model_dump(exclude_unset=True),
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return ProductResponse.from_domain(product)


@router.delete(
    "/{product_id}",
    summary="Delete a product",
    responses={
        404: {"description": "Product not found"},
        409: {"description": "Product is referenced by orders; deactivate instead"},
    },
)
async def delete_product(product_id: UUID, factory: RepoFactory) -> MessageResponse:
    command = DeleteProductCommand.from_factory(factory)

    try:
        await command.execute(product_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return MessageResponse(message="Product deleted")


@router.put(
    "/{product_id}/stock",
    summary="Set stock quantity",
    responses={404: {"description": "Product not found"}},
)
async def update_stock(
    product_id: UUID,
    request: StockUpdateRequest,
    factory: RepoFactory,
) -> ProductResponse:
    """Set the absolute stock quantity (not a delta)."""
    command = UpdateStockCommand.from_factory(factory)

    try:
        product = await command.execute(product_id, request.quantity)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return ProductResponse.from_domain(product)
