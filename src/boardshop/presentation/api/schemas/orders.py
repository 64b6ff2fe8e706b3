"""Order schemas."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from boardshop.domain.ordering import (
    MAX_LINE_QUANTITY,
    Order,
    OrderLineRequest,
    OrderStatus,
)


class OrderItemRequest(BaseModel):
    product_id: UUID
    quantity: int = Field(..., ge=1, le=MAX_LINE_QUANTITY)

    def to_line(self) -> OrderLineRequest:
        return OrderLineRequest(product_id=self.product_id, quantity=self.quantity)


class OrderCreateRequest(BaseModel):
    """Request schema for placing an order."""

    items: list[OrderItemRequest] = Field(..., min_length=1)
    shipping_address_id: UUID | None = Field(
        None,
        description="One of your addresses; defaults to your default shipping address",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "items": [
                    {
                        "product_id": "3fa85f64-5717-4562-b3fc-2c963f66afa6",
                        "quantity": 2,
                    },
                ],
            },
        },
    )


class OrderUpdateRequest(BaseModel):
    """Replace the items and/or shipping address of an order."""

    items: list[OrderItemRequest] | None = Field(None, min_length=1)
    shipping_address_id: UUID | None = None


class OrderStatusUpdateRequest(BaseModel):
    status: OrderStatus


class ProductSummaryResponse(BaseModel):
    id: UUID
    title: str
    image_url: str | None
    sku: str | None


class OrderItemResponse(BaseModel):
    id: UUID
    product_id: UUID
    quantity: int
    unit_price: Decimal
    total_price: Decimal
    product: ProductSummaryResponse | None = None


class CustomerSummaryResponse(BaseModel):
    id: UUID
    email: str
    first_name: str | None
    last_name: str | None


class OrderResponse(BaseModel):
    id: UUID
    order_number: str
    user_id: UUID
    status: OrderStatus
    subtotal: Decimal
    total_amount: Decimal
    shipping_address_id: UUID | None
    items: list[OrderItemResponse]
    user: CustomerSummaryResponse | None = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, order: Order) -> "OrderResponse":
        customer = None
        if order.customer is not None:
            customer = CustomerSummaryResponse(
                id=order.customer.id,
                email=order.customer.email,
                first_name=order.customer.first_name,
                last_name=order.customer.last_name,
            )
        return cls(
            id=order.id,
            order_number=order.order_number,
            user_id=order.user_id,
            status=order.status,
            subtotal=order.subtotal,
            total_amount=order.total_amount,
            shipping_address_id=order.shipping_address_id,
            items=[
                OrderItemResponse(
                    id=item.id,
                    product_id=item.product_id,
                    quantity=item.quantity,
                    unit_price=item.unit_price,
                    total_price=item.line_total,
                    product=(
                        ProductSummaryResponse(
                            id=item.product.id,
                            title=item.product.title,
                            image_url=item.product.image_url,
                            sku=item.product.sku,
                        )
                        if item.product
                        else None
                    ),
                )
                for item in order.items
            ],
            user=customer,
            created_at=order.created_at,
            updated_at=order.updated_at,
        )
