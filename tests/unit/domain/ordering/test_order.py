"""Tests for the Order aggregate."""

from decimal import Decimal
from uuid import uuid4

import pytest

from boardshop.domain.ordering import (
    ORDER_NUMBER_PATTERN,
    EmptyOrderError,
    InvalidQuantityError,
    InvalidStatusTransitionError,
    Order,
    OrderItem,
    OrderStatus,
    generate_order_number,
)


def _item(price: str, quantity: int = 1) -> OrderItem:
    return OrderItem(product_id=uuid4(), quantity=quantity, unit_price=Decimal(price))


def _order(*items: OrderItem) -> Order:
    return Order.place(
        user_id=uuid4(),
        order_number=generate_order_number(),
        items=list(items),
    )


class TestOrderItem:
    def test_line_total(self):
        assert _item("59.99", 2).line_total == Decimal("119.98")

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_quantity_must_be_positive(self, quantity):
        with pytest.raises(InvalidQuantityError):
            _item("1.00", quantity)

    def test_unit_price_is_rounded(self):
        assert _item("19.999").unit_price == Decimal("20.00")


class TestOrder:
    def test_place_starts_pending_with_derived_totals(self):
        order = _order(_item("59.99", 2), _item("12.99"))

        assert order.status == OrderStatus.PENDING
        assert order.subtotal == Decimal("132.97")
        assert order.total_amount == order.subtotal
        assert ORDER_NUMBER_PATTERN.match(order.order_number)

    def test_empty_order_rejected(self):
        with pytest.raises(EmptyOrderError):
            _order()

    def test_change_status(self):
        order = _order(_item("10.00"))

        assert order.change_status(OrderStatus.CONFIRMED) is True
        assert order.status == OrderStatus.CONFIRMED

    def test_change_to_same_status_is_a_no_op(self):
        order = _order(_item("10.00"))
        updated_at = order.updated_at

        assert order.change_status("PENDING") is False
        assert order.updated_at == updated_at

    def test_backwards_transition_rejected(self):
        order = _order(_item("10.00"))
        order.change_status(OrderStatus.SHIPPED)

        with pytest.raises(InvalidStatusTransitionError):
            order.change_status(OrderStatus.CONFIRMED)

    def test_replace_items_recomputes_totals(self):
        order = _order(_item("10.00"))

        order.replace_items([_item("5.00", 3)])

        assert order.items_replaced
        assert order.subtotal == Decimal("15.00")

    def test_replace_items_with_nothing_rejected(self):
        order = _order(_item("10.00"))

        with pytest.raises(EmptyOrderError):
            order.replace_items([])

    def test_only_pending_orders_are_editable(self):
        order = _order(_item("10.00"))
        assert order.is_editable_by_customer

        order.change_status(OrderStatus.CONFIRMED)
        assert not order.is_editable_by_customer

    def test_ownership(self):
        order = _order(_item("10.00"))

        assert order.is_owned_by(order.user_id)
        assert not order.is_owned_by(uuid4())
