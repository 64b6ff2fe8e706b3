"""Product entity."""

from dataclasses import dataclass, field, fields
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional
from uuid import UUID, uuid4

from boardshop.domain.catalog.entities.category import Category
from boardshop.domain.catalog.exceptions import InvalidPriceError, InvalidStockError
from boardshop.domain.shared.exceptions import ValidationError
from boardshop.domain.shared.money import to_money
from boardshop.domain.shared.time import utc_now

_IMMUTABLE_FIELDS = frozenset({"id", "created_at", "category"})


@dataclass
class Product:
    """
    A sellable catalog item.

    Price is a non-negative Decimal with two places. Stock is optional; a
    product without stock tracking has ``stock_quantity`` None and never
    shows up in low-stock reports. ``category`` is only populated when the
    repository was asked to load it.
    """

    title: str
    price: Decimal
    category_id: UUID
    description: Optional[str] = None
    image_url: Optional[str] = None
    brand: Optional[str] = None
    sku: Optional[str] = None
    stock_quantity: Optional[int] = None
    tags: list[str] = field(default_factory=list)
    weight: Optional[Decimal] = None
    dimensions: Optional[str] = None
    is_active: bool = True
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)
    category: Optional[Category] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        self._validate()

    def update(self, **changes: Any) -> None:
        # Only provided (non-None) values are updated; others are preserved.
        updatable = {f.name for f in fields(self)} - _IMMUTABLE_FIELDS
        for key, value in changes.items():
            if value is None:
                continue
            if key not in updatable:
                msg = f"Product field cannot be updated: {key}"
                raise AttributeError(msg)
            setattr(self, key, value)
        if "category_id" in changes and changes["category_id"] is not None:
            self.category = None
        self._validate()
        self.updated_at = utc_now()

    def set_stock(self, quantity: int) -> None:
        """Set the absolute stock quantity."""
        if quantity < 0:
            raise InvalidStockError(quantity)
        self.stock_quantity = quantity
        self.updated_at = utc_now()

    def deactivate(self) -> None:
        self.is_active = False
        self.updated_at = utc_now()

    def is_low_stock(self, threshold: int) -> bool:
        return (
            self.is_active
            and self.stock_quantity is not None
            and self.stock_quantity <= threshold
        )

    def _validate(self) -> None:
        self.title = (self.title or "").strip()
        if not self.title:
            msg = "Product title cannot be empty"
            raise ValidationError(msg)

        self.price = to_money(self.price)
        if self.price < 0:
            raise InvalidPriceError(self.price)

        if self.stock_quantity is not None and self.stock_quantity < 0:
            raise InvalidStockError(self.stock_quantity)

        if self.weight is not None:
            self.weight = to_money(self.weight)
            if self.weight < 0:
                msg = f"Weight cannot be negative: {self.weight}"
                raise ValidationError(msg)

        self.tags = list(self.tags or [])
