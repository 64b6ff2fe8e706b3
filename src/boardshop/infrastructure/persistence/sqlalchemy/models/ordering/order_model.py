"""SQLAlchemy model for orders."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from sqlalchemy import CheckConstraint, ForeignKey, Index, Numeric, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from boardshop.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)

if TYPE_CHECKING:
    from boardshop.infrastructure.persistence.sqlalchemy.models.ordering.order_item_model import (  # NOQA: E501
        OrderItemModel,
    )
    from boardshop.infrastructure.persistence.sqlalchemy.models.user.user_model import (  # NOQA: E501
        UserModel,
    )


class OrderModel(Base, TimestampMixin):
    """Database model for orders.

    Relationships use ``lazy="raise"``: every read path states what it loads.
    """

    __tablename__ = "orders"

    __table_args__ = (
        CheckConstraint(
            "total_amount >= subtotal",
            name="ck_orders_total_covers_subtotal",
        ),
        Index("ix_orders_user_created", "user_id", "created_at"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="RESTRICT"),
        nullable=False,
    )
    order_number: Mapped[str] = mapped_column(String(40), unique=True, nullable=False)
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="PENDING",
        index=True,
    )
    subtotal: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    total_amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    shipping_address_id: Mapped[Optional[UUID]] = mapped_column(
        Uuid,
        ForeignKey("addresses.id", ondelete="SET NULL"),
        nullable=True,
    )

    # Relationships
    user: Mapped[UserModel] = relationship("UserModel", lazy="raise")
    items: Mapped[list[OrderItemModel]] = relationship(
        "OrderItemModel",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItemModel.position",
        lazy="raise",
    )

    def __repr__(self) -> str:
        return (
            f"<OrderModel(id={self.id}, number={self.order_number}, "
            f"status={self.status})>"
        )
