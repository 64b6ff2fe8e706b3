from boardshop.domain.ordering.value_objects.order_number import (
    ORDER_NUMBER_PATTERN,
    generate_order_number,
)
from boardshop.domain.ordering.value_objects.order_status import OrderStatus
from boardshop.domain.ordering.value_objects.summaries import (
    CustomerSummary,
    ProductSummary,
)

__all__ = [
    "ORDER_NUMBER_PATTERN",
    "CustomerSummary",
    "OrderStatus",
    "ProductSummary",
    "generate_order_number",
]
