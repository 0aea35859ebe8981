"""Shared fixtures for API tests.

Each test gets its own SQLite file. Tables and fixture rows are written
through a synchronous engine; the application reads and writes through
an aiosqlite engine swapped in for ``get_session``.
"""

from collections.abc import AsyncGenerator, Generator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import NullPool

from products_api.auth.models import Role, User
from products_api.auth.security import JwtTokenProvider, hash_password
from products_api.catalog.models import Brand, Category, Product
from products_api.infrastructure.database import Base, get_session
from products_api.main import app


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Create the schema and fixture rows in a fresh database file.

    Rows:
        categories: 1 smartphones, 2 laptops, 3 fragrances (empty)
        brands: 1 Apple, 2 Samsung
        products: 1-15 smartphones priced 100..1500, 16-25 laptops
            priced 1600..2500; odd ids Apple, even ids Samsung
        users: "admin" (ROLE_USER, ROLE_ADMIN), password "admin-pass"
    """
    path = tmp_path / "products-api-test.sqlite3"
    engine = create_engine(f"sqlite+pysqlite:///{path}")
    Base.metadata.create_all(engine)

    with Session(engine) as session:
        phones = Category(name="smartphones")
        laptops = Category(name="laptops")
        fragrances = Category(name="fragrances")
        apple = Brand(name="Apple")
        samsung = Brand(name="Samsung")
        session.add_all([phones, laptops, fragrances, apple, samsung])

        for i in range(1, 26):
            session.add(
                Product(
                    title=f"Product {i:02d}",
                    description="A phone" if i <= 15 else "A laptop",
                    price=i * 100,
                    discount_percentage=5.0,
                    rating=4.5,
                    stock=10 + i,
                    thumbnail=f"https://img.example.com/{i}/thumb.jpg",
                    images=[f"https://img.example.com/{i}/1.jpg"],
                    category=phones if i <= 15 else laptops,
                    brand=apple if i % 2 else samsung,
                )
            )

        user_role = Role(name="ROLE_USER")
        admin_role = Role(name="ROLE_ADMIN")
        session.add(
            User(
                name="Administrator",
                username="admin",
                email="admin@example.com",
                password=hash_password("admin-pass"),
                roles=[user_role, admin_role],
            )
        )
        session.commit()

    engine.dispose()
    return path


@pytest.fixture
def client(db_path: Path) -> Generator[TestClient, None, None]:
    """Test client wired to the per-test database, without authentication."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{db_path}", poolclass=NullPool)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_session() -> AsyncGenerator[AsyncSession, None]:
        async with factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_session] = override_get_session
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def token_provider() -> JwtTokenProvider:
    return JwtTokenProvider()


@pytest.fixture
def admin_headers(token_provider: JwtTokenProvider) -> dict[str, str]:
    """Bearer headers for a caller holding ROLE_ADMIN."""
    token = token_provider.generate_token("admin", ["ROLE_USER", "ROLE_ADMIN"])
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers(token_provider: JwtTokenProvider) -> dict[str, str]:
    """Bearer headers for a caller holding only ROLE_USER."""
    token = token_provider.generate_token("alice", ["ROLE_USER"])
    return {"Authorization": f"Bearer {token}"}
