"""Tests for the order status lifecycle."""

import pytest

from boardshop.domain.ordering import OrderStatus

S = OrderStatus


@pytest.mark.parametrize(
    ("current", "target"),
    [
        (S.PENDING, S.CONFIRMED),
        (S.PENDING, S.SHIPPED),
        (S.CONFIRMED, S.PROCESSING),
        (S.PROCESSING, S.SHIPPED),
        (S.SHIPPED, S.DELIVERED),
        (S.PENDING, S.CANCELED),
        (S.SHIPPED, S.CANCELED),
        (S.DELIVERED, S.REFUNDED),
        (S.PENDING, S.REFUNDED),
    ],
)
def test_allowed_transitions(current, target):
    assert current.can_transition_to(target)


@pytest.mark.parametrize(
    ("current", "target"),
    [
        (S.CONFIRMED, S.PENDING),
        (S.DELIVERED, S.SHIPPED),
        (S.DELIVERED, S.CANCELED),
        (S.CANCELED, S.PENDING),
        (S.CANCELED, S.REFUNDED),
        (S.REFUNDED, S.DELIVERED),
    ],
)
def test_forbidden_transitions(current, target):
    assert not current.can_transition_to(target)


def test_terminal_states():
    assert {s for s in S if s.is_terminal} == {S.CANCELED, S.REFUNDED}
