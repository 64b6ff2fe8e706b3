from boardshop.domain.ordering.aggregates.order import Order, OrderItem

__all__ = ["Order", "OrderItem"]
