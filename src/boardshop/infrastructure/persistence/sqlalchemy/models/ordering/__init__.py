from boardshop.infrastructure.persistence.sqlalchemy.models.ordering.order_item_model import (  # NOQA: E501
    OrderItemModel,
)
from boardshop.infrastructure.persistence.sqlalchemy.models.ordering.order_model import (  # NOQA: E501
    OrderModel,
)

__all__ = ["OrderItemModel", "OrderModel"]
