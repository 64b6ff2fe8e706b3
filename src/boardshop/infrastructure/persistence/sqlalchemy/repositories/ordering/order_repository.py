"""SQLAlchemy implementation of OrderRepository."""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import delete, func, inspect, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from boardshop.domain.ordering import (
    CustomerSummary,
    Order,
    OrderItem,
    OrderNumberConflictError,
    OrderRepository,
    ProductSummary,
)
from boardshop.infrastructure.persistence.sqlalchemy.models.ordering import (
    OrderItemModel,
    OrderModel,
)
from boardshop.infrastructure.persistence.sqlalchemy.repositories._utils import (
    is_unique_violation,
)

logger = logging.getLogger(__name__)


class OrderRepositorySQLAlchemy(OrderRepository):
    """SQLAlchemy implementation of the OrderRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(
        self,
        order_id: UUID,
        with_relations: bool = False,
    ) -> Optional[Order]:
        stmt = select(OrderModel).where(OrderModel.id == order_id)
        stmt = stmt.options(*self._load_options(with_relations))
        result = await self._session.execute(
            stmt.execution_options(populate_existing=True),
        )
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def find_all(self) -> list[Order]:
        # Loads: customer, items, product per item
        stmt = (
            select(OrderModel)
            .options(*self._load_options(with_relations=True))
            .order_by(OrderModel.created_at.desc())
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def find_by_user(self, user_id: UUID) -> list[Order]:
        # Loads: items, product per item
        stmt = (
            select(OrderModel)
            .where(OrderModel.user_id == user_id)
            .options(
                selectinload(OrderModel.items).selectinload(OrderItemModel.product),
            )
            .order_by(OrderModel.created_at.desc())
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def exists_by_order_number(self, order_number: str) -> bool:
        stmt = select(OrderModel.id).where(OrderModel.order_number == order_number)
        result = await self._session.execute(stmt)
        return result.first() is not None

    async def count_by_user(self, user_id: UUID) -> int:
        stmt = (
            select(func.count())
            .select_from(OrderModel)
            .where(OrderModel.user_id == user_id)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def save(self, order: Order) -> None:
        model = await self._find_model_by_id(order.id)

        try:
            if model is None:
                self._session.add(
                    OrderModel(
                        id=order.id,
                        user_id=order.user_id,
                        order_number=order.order_number,
                        status=order.status.value,
                        subtotal=order.subtotal,
                        total_amount=order.total_amount,
                        shipping_address_id=order.shipping_address_id,
                        created_at=order.created_at,
                        updated_at=order.updated_at,
                    ),
                )
                # Order row first, item rows reference it
                await self._session.flush()
                self._add_item_models(order)
                logger.debug("Inserted order %s with %d item(s)", order.id, len(order.items))
            else:
                model.status = order.status.value
                model.subtotal = order.subtotal
                model.total_amount = order.total_amount
                model.shipping_address_id = order.shipping_address_id
                model.updated_at = order.updated_at
                if order.items_replaced:
                    await self._session.execute(
                        delete(OrderItemModel)
                        .where(OrderItemModel.order_id == order.id)
                        .execution_options(synchronize_session="fetch"),
                    )
                    self._add_item_models(order)
                    logger.debug(
                        "Replaced items of order %s (%d item(s))",
                        order.id,
                        len(order.items),
                    )

            await self._session.flush()
        except IntegrityError as e:
            if is_unique_violation(e, "order_number"):
                raise OrderNumberConflictError(order.order_number) from e
            raise

    async def _find_model_by_id(self, order_id: UUID) -> Optional[OrderModel]:
        stmt = select(OrderModel).where(OrderModel.id == order_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _add_item_models(self, order: Order) -> None:
        for position, item in enumerate(order.items):
            self._session.add(
                OrderItemModel(
                    id=item.id,
                    order_id=order.id,
                    product_id=item.product_id,
                    position=position,
                    quantity=item.quantity,
                    unit_price=item.unit_price,
                    total_price=item.line_total,
                ),
            )

    @staticmethod
    def _load_options(with_relations: bool) -> list:
        if not with_relations:
            return [selectinload(OrderModel.items)]
        return [
            selectinload(OrderModel.user),
            selectinload(OrderModel.items).selectinload(OrderItemModel.product),
        ]

    def _map_to_domain(self, model: OrderModel) -> Order:
        items = [self._map_item(item_model) for item_model in model.items]

        customer = None
        if "user" not in inspect(model).unloaded:
            customer = CustomerSummary(
                id=model.user.id,
                email=model.user.email,
                first_name=model.user.first_name,
                last_name=model.user.last_name,
            )

        return Order.reconstitute(
            id=model.id,
            user_id=model.user_id,
            order_number=model.order_number,
            status=model.status,
            items=items,
            shipping_address_id=model.shipping_address_id,
            created_at=model.created_at,
            updated_at=model.updated_at,
            customer=customer,
        )

    def _map_item(self, model: OrderItemModel) -> OrderItem:
        product = None
        if "product" not in inspect(model).unloaded:
            product = ProductSummary(
                id=model.product.id,
                title=model.product.title,
                image_url=model.product.image_url,
                sku=model.product.sku,
            )
        return OrderItem(
            id=model.id,
            product_id=model.product_id,
            quantity=model.quantity,
            unit_price=model.unit_price,
            product=product,
        )
