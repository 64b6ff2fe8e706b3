"""Demo data seeding for Boardshop.

Creates the demo categories, an administrator and a customer account,
and the demo products. Rows that already exist (matched by category
name, email or SKU) are kept as they are, so the seeder can run any
number of times.

Usage:
    poetry run seed-demo
    # or
    python -m boardshop_demo.seed

Options:
    --dry-run   Show what would be created without writing to database
"""

import asyncio
import logging
import sys
from dataclasses import dataclass

from boardshop.application.commands.catalog import (
    CreateCategoryCommand,
    CreateProductCommand,
)
from boardshop.application.commands.user import CreateUserCommand
from boardshop.domain.catalog import Category
from boardshop.infrastructure.persistence.sqlalchemy.init_db import create_tables
from boardshop.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from boardshop.presentation.api.dependencies import get_engine, get_session_maker
from boardshop_auth import PasswordHashingService
from boardshop_config.settings import get_settings
from boardshop_demo.data import (
    DEMO_CATEGORIES,
    DEMO_IMAGE_URL,
    DEMO_PASSWORD,
    DEMO_PRODUCTS,
    DEMO_USERS,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)


@dataclass
class SeedStats:
    """Statistics about what was seeded."""

    categories_created: int = 0
    users_created: int = 0
    products_created: int = 0


async def seed_categories(
    factory: SQLAlchemyRepositoryFactory,
) -> tuple[dict[str, Category], int]:
    repo = factory.category_repository()
    command = CreateCategoryCommand.from_factory(factory)
    categories: dict[str, Category] = {}
    created = 0

    for name in DEMO_CATEGORIES:
        category = await repo.find_by_name(name)
        if category is None:
            category = await command.execute(name=name)
            created += 1
        categories[name] = category

    return categories, created


async def seed_users(factory: SQLAlchemyRepositoryFactory) -> int:
    settings = get_settings()
    repo = factory.user_repository()
    command = CreateUserCommand.from_factory(
        factory,
        PasswordHashingService(rounds=settings.password_bcrypt_rounds),
    )
    created = 0

    for user_def in DEMO_USERS:
        if await repo.exists_by_email(user_def.email):
            logger.info("User exists, skipping: %s", user_def.email)
            continue
        await command.execute(
            email=user_def.email,
            password=DEMO_PASSWORD,
            role=user_def.role,
            first_name=user_def.first_name,
            last_name=user_def.last_name,
        )
        created += 1

    return created


async def seed_products(
    factory: SQLAlchemyRepositoryFactory,
    categories: dict[str, Category],
) -> int:
    repo = factory.product_repository()
    command = CreateProductCommand.from_factory(factory)
    created = 0

    for product_def in DEMO_PRODUCTS:
        if await repo.find_by_sku(product_def.sku) is not None:
            continue
        await command.execute(
            title=product_def.title,
            description=product_def.description,
            price=product_def.price,
            category_id=categories[product_def.category].id,
            image_url=DEMO_IMAGE_URL,
            brand=product_def.brand,
            sku=product_def.sku,
            stock_quantity=product_def.stock_quantity,
            tags=list(product_def.tags),
        )
        created += 1

    return created


async def seed_demo_data(dry_run: bool = False) -> SeedStats:
    """Main seeding function.

    Parameters
    ----------
    dry_run
        Show what would be created without writing

    Returns
    -------
    Statistics about what was seeded
    """
    if dry_run:
        logger.info("DRY RUN - no data will be written")
        for name in DEMO_CATEGORIES:
            logger.info("  Category: %s", name)
        for user_def in DEMO_USERS:
            logger.info("  User: %s (%s)", user_def.email, user_def.role.value)
        for product_def in DEMO_PRODUCTS:
            logger.info(
                "  Product: %s [%s] %s",
                product_def.title,
                product_def.sku,
                product_def.price,
            )
        return SeedStats(
            categories_created=len(DEMO_CATEGORIES),
            users_created=len(DEMO_USERS),
            products_created=len(DEMO_PRODUCTS),
        )

    await create_tables(get_engine())

    async with get_session_maker()() as session:
        factory = SQLAlchemyRepositoryFactory(session=session)

        try:
            categories, categories_created = await seed_categories(factory)
            users_created = await seed_users(factory)
            products_created = await seed_products(factory, categories)
            await session.commit()
        except Exception:
            await session.rollback()
            raise

    stats = SeedStats(
        categories_created=categories_created,
        users_created=users_created,
        products_created=products_created,
    )

    logger.info("=" * 50)
    logger.info("Demo data seeding complete!")
    logger.info("=" * 50)
    logger.info("  Categories created: %d", stats.categories_created)
    logger.info("  Users created: %d", stats.users_created)
    logger.info("  Products created: %d", stats.products_created)
    for user_def in DEMO_USERS:
        logger.info("  Login: %s / %s", user_def.email, DEMO_PASSWORD)
    logger.info("=" * 50)

    return stats


def main():
    """CLI entry point."""
    dry_run = "--dry-run" in sys.argv or "-n" in sys.argv

    if "--help" in sys.argv or "-h" in sys.argv:
        print(__doc__)
        sys.exit(0)

    logger.info("Boardshop Demo Data Seeder")
    logger.info("=" * 50)

    settings = get_settings()
    db_url = settings.database_url
    db_display = db_url.split("@")[-1] if "@" in db_url else db_url
    logger.info("Database: %s", db_display)

    asyncio.run(seed_demo_data(dry_run=dry_run))


if __name__ == "__main__":
    main()
