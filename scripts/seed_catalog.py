#!/usr/bin/env python3
"""Seed product catalog script.

Creates tables, default roles, an admin account and a small sample
catalog of categories, brands and products.

Usage:
    python scripts/seed_catalog.py
    python scripts/seed_catalog.py --admin-username admin --admin-password secret123
    python scripts/seed_catalog.py --no-products
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from products_api.auth.models import User
from products_api.auth.repository import RoleRepository, UserRepository
from products_api.auth.security import hash_password
from products_api.auth.service import ADMIN_ROLE, DEFAULT_ROLE
from products_api.catalog.models import Brand, Category, Product
from products_api.catalog.repository import BrandRepository, CategoryRepository, ProductRepository
from products_api.infrastructure.database import Base, async_session_factory, engine

SAMPLE_PRODUCTS = [
    {
        "title": "iPhone 9",
        "description": "An apple mobile which is nothing like apple",
        "price": 549,
        "discount_percentage": 12.96,
        "rating": 4.69,
        "stock": 94,
        "category": "smartphones",
        "brand": "Apple",
    },
    {
        "title": "Samsung Universe 9",
        "description": "Samsung's new variant which goes beyond Galaxy to the Universe",
        "price": 1249,
        "discount_percentage": 15.46,
        "rating": 4.09,
        "stock": 36,
        "category": "smartphones",
        "brand": "Samsung",
    },
    {
        "title": "MacBook Pro",
        "description": "MacBook Pro 2021 with mini-LED display may launch between September, November",
        "price": 1749,
        "discount_percentage": 11.02,
        "rating": 4.57,
        "stock": 83,
        "category": "laptops",
        "brand": "Apple",
    },
    {
        "title": "Samsung Galaxy Book",
        "description": "Samsung Galaxy Book S (2020) Laptop With Intel Lakefield Chip, 8GB of RAM Launched",
        "price": 1499,
        "discount_percentage": 4.15,
        "rating": 4.25,
        "stock": 50,
        "category": "laptops",
        "brand": "Samsung",
    },
    {
        "title": "Brown Perfume",
        "description": "Royal_Mirage Sport Brown Perfume for Men & Women - 120ml",
        "price": 40,
        "discount_percentage": 15.66,
        "rating": 4.0,
        "stock": 52,
        "category": "fragrances",
        "brand": "Royal_Mirage",
    },
]


async def create_tables() -> None:
    """Create database tables if they don't exist."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def seed_users(admin_username: str, admin_email: str, admin_password: str) -> bool:
    """Create default roles and the admin account.

    Returns:
        True if the admin account was created, False if it already existed.
    """
    async with async_session_factory() as session:
        roles = RoleRepository(session)
        users = UserRepository(session)

        user_role = await roles.get_or_create(DEFAULT_ROLE)
        admin_role = await roles.get_or_create(ADMIN_ROLE)

        created = False
        if not await users.exists_by_username(admin_username):
            await users.save(
                User(
                    name="Administrator",
                    username=admin_username,
                    email=admin_email,
                    password=hash_password(admin_password),
                    roles=[user_role, admin_role],
                )
            )
            created = True

        await session.commit()
        return created


async def seed_products() -> dict:
    """Insert the sample catalog, reusing existing categories and brands.

    Returns:
        Seeding result with counts.
    """
    async with async_session_factory() as session:
        categories = CategoryRepository(session)
        brands = BrandRepository(session)
        products = ProductRepository(session)

        category_cache: dict[str, Category] = {}
        brand_cache: dict[str, Brand] = {}

        for item in SAMPLE_PRODUCTS:
            category_name = item["category"]
            if category_name not in category_cache:
                category_cache[category_name] = (
                    await categories.get_by_name(category_name)
                    or await categories.save(Category(name=category_name))
                )

            brand_name = item["brand"]
            if brand_name not in brand_cache:
                brand_cache[brand_name] = (
                    await brands.get_by_name(brand_name)
                    or await brands.save(Brand(name=brand_name))
                )

            fields = {k: v for k, v in item.items() if k not in ("category", "brand")}
            await products.save(
                Product(
                    **fields,
                    images=[],
                    category=category_cache[category_name],
                    brand=brand_cache[brand_name],
                )
            )

        await session.commit()

        return {
            "products_created": len(SAMPLE_PRODUCTS),
            "categories_used": len(category_cache),
            "brands_used": len(brand_cache),
        }


async def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Seed roles, an admin account and sample products",
    )
    parser.add_argument("--admin-username", default="admin", help="Admin login name")
    parser.add_argument("--admin-email", default="admin@example.com", help="Admin email")
    parser.add_argument("--admin-password", default="admin123", help="Admin password")
    parser.add_argument(
        "--no-products",
        action="store_true",
        help="Only create tables, roles and the admin account",
    )

    args = parser.parse_args()

    print("=" * 60)
    print("Products API Seeder")
    print("=" * 60)

    print("Creating database tables...")
    await create_tables()
    print("Tables ready.")
    print()

    created = await seed_users(args.admin_username, args.admin_email, args.admin_password)
    if created:
        print(f"  ✓ Admin account '{args.admin_username}' created")
    else:
        print(f"  ✓ Admin account '{args.admin_username}' already exists")

    if not args.no_products:
        result = await seed_products()
        print(f"  ✓ Created: {result['products_created']} products")
        print(f"  ✓ Categories: {result['categories_used']}")
        print(f"  ✓ Brands: {result['brands_used']}")

    print()
    print("=" * 60)
    print("Seeding complete!")
    print("=" * 60)

    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
