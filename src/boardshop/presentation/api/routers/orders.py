"""Orders router."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, status

from boardshop.application.commands.ordering import (
    CreateOrderCommand,
    UpdateOrderCommand,
    UpdateOrderStatusCommand,
)
from boardshop.application.queries.ordering import (
    GetOrderQuery,
    ListOrdersForUserQuery,
    ListOrdersQuery,
)
from boardshop.presentation.api.access_control import authorize
from boardshop.presentation.api.dependencies import RepoFactory
from boardshop.presentation.api.schemas.orders import (
    OrderCreateRequest,
    OrderResponse,
    OrderStatusUpdateRequest,
    OrderUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(authorize)])


@router.get(
    "",
    summary="List all orders",
    responses={403: {"description": "Admin access required"}},
)
async def list_orders(factory: RepoFactory) -> list[OrderResponse]:
    """Every order with customer, items and product summaries."""
    orders = await ListOrdersQuery.from_factory(factory).execute()
    return [OrderResponse.from_domain(o) for o in orders]


@router.get("/my-orders", summary="List own orders")
async def list_my_orders(factory: RepoFactory) -> list[OrderResponse]:
    orders = await ListOrdersForUserQuery.from_factory(factory).execute()
    return [OrderResponse.from_domain(o) for o in orders]


@router.get(
    "/{order_id}",
    summary="Get an order",
    responses={404: {"description": "Order not found"}},
)
async def get_order(order_id: UUID, factory: RepoFactory) -> OrderResponse:
    """Own order, or any order for administrators."""
    order = await GetOrderQuery.from_factory(factory).execute(order_id)
    return OrderResponse.from_domain(order)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Place an order",
    responses={
        400: {"description": "Empty cart or invalid quantity"},
        404: {"description": "Product or address not found"},
        409: {"description": "Product unavailable"},
    },
)
async def create_order(
    request: OrderCreateRequest,
    factory: RepoFactory,
) -> OrderResponse:
    """
    Place an order at current catalog prices.

    Nothing is stored unless every line is valid.
    """
    command = CreateOrderCommand.from_factory(factory)

    try:
        order = await command.execute(
            lines=[item.to_line() for item in request.items],
            shipping_address_id=request.shipping_address_id,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return OrderResponse.from_domain(order)


@router.put(
    "/{order_id}",
    summary="Edit an order",
    responses={
        404: {"description": "Order, product or address not found"},
        409: {"description": "Order can no longer be edited"},
    },
)
async def update_order(
    order_id: UUID,
    request: OrderUpdateRequest,
    factory: RepoFactory,
) -> OrderResponse:
    """Replace the items and/or shipping address of a pending order."""
    command = UpdateOrderCommand.from_factory(factory)

    try:
        order = await command.execute(
            order_id,
            lines=(
                [item.to_line() for item in request.items]
                if request.items is not None
                else None
            ),
            shipping_address_id=request.shipping_address_id,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return OrderResponse.from_domain(order)


@router.put(
    "/{order_id}/status",
    summary="Change order status",
    responses={
        403: {"description": "Admin access required"},
        404: {"description": "Order not found"},
        409: {"description": "Transition not allowed"},
    },
)
async def update_order_status(
    order_id: UUID,
    request: OrderStatusUpdateRequest,
    factory: RepoFactory,
) -> OrderResponse:
    command = UpdateOrderStatusCommand.from_factory(factory)

    try:
        order = await command.execute(order_id, request.status)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return OrderResponse.from_domain(order)
