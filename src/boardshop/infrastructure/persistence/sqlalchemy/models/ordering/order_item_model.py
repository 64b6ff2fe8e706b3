"""SQLAlchemy model for order items."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import CheckConstraint, ForeignKey, Integer, Numeric, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from boardshop.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)

if TYPE_CHECKING:
    from boardshop.infrastructure.persistence.sqlalchemy.models.catalog.product_model import (  # NOQA: E501
        ProductModel,
    )
    from boardshop.infrastructure.persistence.sqlalchemy.models.ordering.order_model import (  # NOQA: E501
        OrderModel,
    )


class OrderItemModel(Base, TimestampMixin):
    """Database model for order lines.

    ``unit_price`` is a snapshot of the product price at order time.
    ``position`` keeps the lines in the order the customer listed them.
    """

    __tablename__ = "order_items"

    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_order_items_quantity_positive"),
        CheckConstraint("unit_price >= 0", name="ck_order_items_price_non_negative"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    order_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("orders.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    product_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("products.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    unit_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    total_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)

    # Relationships
    order: Mapped[OrderModel] = relationship(
        "OrderModel",
        back_populates="items",
        lazy="raise",
    )
    product: Mapped[ProductModel] = relationship("ProductModel", lazy="raise")

    def __repr__(self) -> str:
        return (
            f"<OrderItemModel(id={self.id}, product_id={self.product_id}, "
            f"quantity={self.quantity}, unit_price={self.unit_price})>"
        )
