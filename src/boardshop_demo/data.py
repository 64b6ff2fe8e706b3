"""Demo catalog and account definitions.

All data is fictional and used for demonstration purposes only.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from boardshop.domain.user import UserRole


@dataclass(frozen=True)
class DemoUserDef:
    email: str
    role: UserRole
    first_name: Optional[str] = None
    last_name: Optional[str] = None


@dataclass(frozen=True)
class DemoProductDef:
    """Definition for a demo product; ``sku`` identifies it across runs."""

    sku: str
    title: str
    description: str
    price: Decimal
    category: str
    brand: Optional[str] = None
    stock_quantity: Optional[int] = None
    tags: tuple[str, ...] = ()


DEMO_PASSWORD = "password123"  # NOQA: S105

DEMO_IMAGE_URL = "https://images.unsplash.com/photo-1572776685600-cf276d3c3b32?w=400"

# =============================================================================
# Categories
# =============================================================================

DEMO_CATEGORIES: tuple[str, ...] = (
    "Decks",
    "Trucks",
    "Wheels",
    "Bearings",
    "Grip Tape",
)

# =============================================================================
# Accounts
# =============================================================================

DEMO_USERS: tuple[DemoUserDef, ...] = (
    DemoUserDef(email="admin@skateshop.com", role=UserRole.ADMIN, first_name="Shop"),
    DemoUserDef(email="user@skateshop.com", role=UserRole.USER, first_name="Demo"),
)

# =============================================================================
# Products
# =============================================================================

DEMO_PRODUCTS: tuple[DemoProductDef, ...] = (
    DemoProductDef(
        sku="DECK-PRO-800",
        title="Pro Skateboard Deck",
        description='High-quality 8.0" skateboard deck made from 7-ply maple',
        price=Decimal("59.99"),
        category="Decks",
        stock_quantity=25,
        tags=("deck", "maple"),
    ),
    DemoProductDef(
        sku="TRUCK-ALU-139",
        title="Aluminum Skateboard Trucks",
        description="Lightweight aluminum trucks with perfect turning radius",
        price=Decimal("45.99"),
        category="Trucks",
        stock_quantity=15,
        tags=("trucks",),
    ),
    DemoProductDef(
        sku="BEAR-ABEC7",
        title="High-Speed Bearings",
        description="ABEC-7 rated bearings for maximum speed and durability",
        price=Decimal("19.99"),
        category="Bearings",
        stock_quantity=40,
        tags=("bearings", "abec-7"),
    ),
    DemoProductDef(
        sku="GRIP-BLK-9X33",
        title="Grip Tape Sheet",
        description="Black grip tape with excellent traction for all skate styles",
        price=Decimal("12.99"),
        category="Grip Tape",
        stock_quantity=8,
        tags=("grip",),
    ),
    DemoProductDef(
        sku="WHEEL-54-99A",
        title="Wide Wheels Set",
        description="54mm wheels perfect for cruising and street skating",
        price=Decimal("34.99"),
        category="Wheels",
        stock_quantity=30,
        tags=("wheels", "street"),
    ),
)
