"""Product listing filter."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional
from uuid import UUID


@dataclass(frozen=True)
class ProductFilter:
    """Criteria for catalog listings. All criteria are combined with AND.

    ``search`` matches title, description or brand, case-insensitively.
    """

    category_id: Optional[UUID] = None
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None
    search: Optional[str] = None
    active_only: bool = True
