"""Catalog read models."""

from dataclasses import dataclass
from math import ceil

from boardshop.domain.catalog import Product


@dataclass(frozen=True)
class ProductPage:
    """One page of a product listing."""

    items: list[Product]
    total: int
    page: int
    page_size: int

    @property
    def pages(self) -> int:
        return ceil(self.total / self.page_size) if self.page_size > 0 else 0
