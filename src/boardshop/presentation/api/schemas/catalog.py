"""Category and product schemas."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from boardshop.application.dtos import ProductPage
from boardshop.domain.catalog import Category, Product


class CategoryCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: str | None = Field(None, max_length=2000)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"name": "Decks", "description": "Skateboard decks"},
        },
    )


class CategoryUpdateRequest(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = Field(None, max_length=2000)


class CategoryResponse(BaseModel):
    id: UUID
    name: str
    description: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, category: Category) -> "CategoryResponse":
        return cls(
            id=category.id,
            name=category.name,
            description=category.description,
            created_at=category.created_at,
            updated_at=category.updated_at,
        )


class CategorySummaryResponse(BaseModel):
    id: UUID
    name: str


class ProductCreateRequest(BaseModel):
    """Request schema for creating a product."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    category_id: UUID
    image_url: str | None = Field(None, max_length=500)
    brand: str | None = Field(None, max_length=100)
    sku: str | None = Field(None, max_length=100)
    stock_quantity: int | None = Field(None, ge=0)
    tags: list[str] = Field(default_factory=list)
    weight: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=2)
    dimensions: str | None = Field(None, max_length=100)
    is_active: bool = True

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Pro Deck 8.25",
                "price": "59.99",
                "category_id": "3fa85f64-5717-4562-b3fc-2c963f66afa6",
                "brand": "Boardshop",
                "sku": "DECK-PRO-825",
                "stock_quantity": 25,
                "tags": ["deck", "maple"],
            },
        },
    )


class ProductUpdateRequest(BaseModel):
    """Partial product update; omitted fields are left unchanged."""

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    price: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=2)
    category_id: UUID | None = None
    image_url: str | None = Field(None, max_length=500)
    brand: str | None = Field(None, max_length=100)
    sku: str | None = Field(None, max_length=100)
    stock_quantity: int | None = Field(None, ge=0)
    tags: list[str] | None = None
    weight: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=2)
    dimensions: str | None = Field(None, max_length=100)
    is_active: bool | None = None


class StockUpdateRequest(BaseModel):
    quantity: int = Field(..., ge=0, description="New absolute stock quantity")


class ProductResponse(BaseModel):
    id: UUID
    title: str
    description: str | None
    price: Decimal
    category_id: UUID
    category: CategorySummaryResponse | None = None
    image_url: str | None
    brand: str | None
    sku: str | None
    stock_quantity: int | None
    tags: list[str]
    weight: Decimal | None
    dimensions: str | None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, product: Product) -> "ProductResponse":
        category = None
        if product.category is not None:
            category = CategorySummaryResponse(
                id=product.category.id,
                name=product.category.name,
            )
        return cls(
            id=product.id,
            title=product.title,
            description=product.description,
            price=product.price,
            category_id=product.category_id,
            category=category,
            image_url=product.image_url,
            brand=product.brand,
            sku=product.sku,
            stock_quantity=product.stock_quantity,
            tags=list(product.tags),
            weight=product.weight,
            dimensions=product.dimensions,
            is_active=product.is_active,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


class ProductListResponse(BaseModel):
    """One page of products."""

    items: list[ProductResponse]
    total: int = Field(..., description="Total number of matching products")
    page: int
    page_size: int
    pages: int

    @classmethod
    def from_page(cls, page: ProductPage) -> "ProductListResponse":
        return cls(
            items=[ProductResponse.from_domain(p) for p in page.items],
            total=page.total,
            page=page.page,
            page_size=page.page_size,
            pages=page.pages,
        )
