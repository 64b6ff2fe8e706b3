from boardshop.domain.ordering.services.order_pricing_service import (
    MAX_LINE_QUANTITY,
    OrderLineRequest,
    OrderPricingService,
)

__all__ = ["MAX_LINE_QUANTITY", "OrderLineRequest", "OrderPricingService"]
