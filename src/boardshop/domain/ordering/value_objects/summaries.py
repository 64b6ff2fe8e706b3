"""Read-only summaries of related entities loaded alongside orders."""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID


@dataclass(frozen=True)
class CustomerSummary:
    id: UUID
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None


@dataclass(frozen=True)
class ProductSummary:
    id: UUID
    title: str
    image_url: Optional[str] = None
    sku: Optional[str] = None
