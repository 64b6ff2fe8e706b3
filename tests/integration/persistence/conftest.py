"""Fixtures for repository tests against an in-memory SQLite database."""

from decimal import Decimal

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from boardshop.domain.catalog import Category, Product
from boardshop.domain.user import User
from boardshop.infrastructure.persistence.sqlalchemy.models import Base
from boardshop.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)


@pytest_asyncio.fixture
async def db_session():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_maker() as session:
        yield session

    await engine.dispose()


@pytest.fixture
def factory(db_session) -> SQLAlchemyRepositoryFactory:
    return SQLAlchemyRepositoryFactory(session=db_session)


@pytest_asyncio.fixture
async def customer(factory) -> User:
    user = User.create("rider@example.com", password_hash="hash")
    await factory.user_repository().save(user)
    return user


@pytest_asyncio.fixture
async def decks(factory) -> Category:
    category = Category(name="Decks")
    await factory.category_repository().save(category)
    return category


@pytest_asyncio.fixture
async def deck(factory, decks) -> Product:
    product = Product(
        title="Pro Skateboard Deck",
        description='High-quality 8.0" deck made from 7-ply maple',
        price=Decimal("59.99"),
        category_id=decks.id,
        brand="Baker",
        sku="DECK-PRO-800",
        stock_quantity=25,
    )
    await factory.product_repository().save(product)
    return product
