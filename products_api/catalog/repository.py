"""Catalog repositories for database operations.

Provides CRUD operations for products, categories and brands, with
filtering, sorting and pagination for products.
"""

from collections.abc import Sequence
from typing import Any

from sqlalchemy import and_, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from products_api.catalog.models import Brand, Category, Product


class ProductRepository:
    """Repository for Product database operations.

    Handles all database interactions for products including
    filtering, sorting, and pagination.

    Example usage:
        async with async_session_factory() as session:
            repo = ProductRepository(session)
            products = await repo.find_all(
                category_id=3,
                min_price=100,
                sort_by="price",
                limit=10,
            )
    """

    SORT_COLUMNS = {
        "id": Product.id,
        "title": Product.title,
        "description": Product.description,
        "price": Product.price,
        "discount_percentage": Product.discount_percentage,
        "rating": Product.rating,
        "stock": Product.stock,
        "category_id": Product.category_id,
        "brand_id": Product.brand_id,
    }

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def save(self, product: Product) -> Product:
        """Save a product to database.

        Flushes so the generated id is available to the caller.

        Args:
            product: Product to save.

        Returns:
            Saved product.
        """
        self.session.add(product)
        await self.session.flush()
        return product

    async def get_by_id(self, product_id: int) -> Product | None:
        """Get product by ID.

        Args:
            product_id: Product ID.

        Returns:
            Product if found, None otherwise.
        """
        result = await self.session.execute(
            select(Product).where(Product.id == product_id)
        )
        return result.scalar_one_or_none()

    async def find_all(
        self,
        category_id: int | None = None,
        brand_id: int | None = None,
        title: str | None = None,
        description: str | None = None,
        min_price: int | None = None,
        max_price: int | None = None,
        sort_by: str = "id",
        ascending: bool = True,
        limit: int = 10,
        offset: int = 0,
    ) -> Sequence[Product]:
        """Find products with filtering, sorting, and pagination.

        Args:
            category_id: Filter by owning category.
            brand_id: Filter by owning brand.
            title: Case-insensitive substring of the title.
            description: Case-insensitive substring of the description.
            min_price: Minimum price (inclusive).
            max_price: Maximum price (inclusive).
            sort_by: Sort field; unknown fields sort by id.
            ascending: Sort direction.
            limit: Maximum results.
            offset: Result offset for pagination.

        Returns:
            Sequence of matching products.
        """
        query = select(Product)

        conditions = self._build_conditions(
            category_id=category_id,
            brand_id=brand_id,
            title=title,
            description=description,
            min_price=min_price,
            max_price=max_price,
        )
        if conditions:
            query = query.where(and_(*conditions))

        # Sorting, with id as tie-breaker so pages never overlap
        sort_column = self._get_sort_column(sort_by)
        query = query.order_by(sort_column.asc() if ascending else sort_column.desc())
        if sort_column is not Product.id:
            query = query.order_by(Product.id.asc())

        query = query.limit(limit).offset(offset)

        result = await self.session.execute(query)
        return result.scalars().all()

    async def count(
        self,
        category_id: int | None = None,
        brand_id: int | None = None,
        title: str | None = None,
        description: str | None = None,
        min_price: int | None = None,
        max_price: int | None = None,
    ) -> int:
        """Count products matching filters.

        Accepts the same filters as ``find_all``.

        Returns:
            Count of matching products.
        """
        query = select(func.count(Product.id))

        conditions = self._build_conditions(
            category_id=category_id,
            brand_id=brand_id,
            title=title,
            description=description,
            min_price=min_price,
            max_price=max_price,
        )
        if conditions:
            query = query.where(and_(*conditions))

        result = await self.session.execute(query)
        return result.scalar_one()

    async def delete(self, product: Product) -> None:
        """Delete a product.

        Args:
            product: Product to delete.
        """
        await self.session.delete(product)
        await self.session.flush()

    @staticmethod
    def _build_conditions(
        category_id: int | None,
        brand_id: int | None,
        title: str | None,
        description: str | None,
        min_price: int | None,
        max_price: int | None,
    ) -> list[Any]:
        conditions = []

        if category_id is not None:
            conditions.append(Product.category_id == category_id)

        if brand_id is not None:
            conditions.append(Product.brand_id == brand_id)

        if title:
            conditions.append(Product.title.icontains(title, autoescape=True))

        if description:
            conditions.append(Product.description.icontains(description, autoescape=True))

        if min_price is not None:
            conditions.append(Product.price >= min_price)

        if max_price is not None:
            conditions.append(Product.price <= max_price)

        return conditions

    def _get_sort_column(self, sort_by: str) -> Any:
        """Get SQLAlchemy column for sorting.

        Args:
            sort_by: Sort field name.

        Returns:
            SQLAlchemy column.
        """
        return self.SORT_COLUMNS.get(sort_by, Product.id)


class NamedEntityRepository:
    """Shared operations for the id/name lookup tables.

    Subclasses set ``model`` to the mapped class.
    """

    model: Any = None

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def save(self, entity: Any) -> Any:
        """Save an entity to database.

        Args:
            entity: Category or brand to save.

        Returns:
            Saved entity with its generated id.
        """
        self.session.add(entity)
        await self.session.flush()
        return entity

    async def get_by_id(self, entity_id: int) -> Any | None:
        """Get entity by ID.

        Args:
            entity_id: Entity ID.

        Returns:
            Entity if found, None otherwise.
        """
        return await self.session.get(self.model, entity_id)

    async def get_by_name(self, name: str) -> Any | None:
        """Get entity by its unique name.

        Args:
            name: Exact name.

        Returns:
            Entity if found, None otherwise.
        """
        result = await self.session.execute(
            select(self.model).where(self.model.name == name)
        )
        return result.scalar_one_or_none()

    async def exists_by_id(self, entity_id: int) -> bool:
        """Check whether an entity with the given ID exists.

        Args:
            entity_id: Entity ID.

        Returns:
            True if a row exists.
        """
        result = await self.session.execute(
            select(func.count(self.model.id)).where(self.model.id == entity_id)
        )
        return result.scalar_one() > 0

    async def find_all(self) -> Sequence[Any]:
        """List all entities.

        Returns:
            Entities ordered by ID.
        """
        result = await self.session.execute(select(self.model).order_by(self.model.id))
        return result.scalars().all()

    async def delete(self, entity: Any) -> None:
        """Delete an entity.

        Args:
            entity: Entity to delete.
        """
        await self.session.delete(entity)
        await self.session.flush()


class CategoryRepository(NamedEntityRepository):
    """Repository for Category database operations."""

    model = Category


class BrandRepository(NamedEntityRepository):
    """Repository for Brand database operations."""

    model = Brand
