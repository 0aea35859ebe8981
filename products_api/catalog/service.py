"""Catalog services for product, category and brand operations.

High-level services that combine repository operations with
business logic: existence checks, pagination and DTO mapping.
"""

import math
from dataclasses import dataclass

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from products_api.catalog.mappers import (
    brand_to_dto,
    brand_to_entity,
    category_to_dto,
    category_to_entity,
    product_to_dto,
    product_to_entity,
)
from products_api.catalog.models import Product
from products_api.catalog.repository import (
    BrandRepository,
    CategoryRepository,
    ProductRepository,
)
from products_api.catalog.schemas import BrandDto, CategoryDto, PageResponse, ProductDto
from products_api.domain.exceptions import ProductAPIError, ResourceNotFoundError
from products_api.infrastructure.config import settings

logger = structlog.get_logger()


@dataclass
class ProductFilter:
    """Filter parameters for product listing.

    Attributes:
        title: Case-insensitive substring of the title.
        description: Case-insensitive substring of the description.
        min_price: Minimum price (inclusive).
        max_price: Maximum price (inclusive).
    """

    title: str | None = None
    description: str | None = None
    min_price: int | None = None
    max_price: int | None = None


@dataclass
class PaginationParams:
    """Pagination parameters.

    Attributes:
        page_no: Page number (0-indexed).
        page_size: Items per page.
        sort_by: Sort field.
        sort_dir: Sort direction; "ASC" in any case sorts ascending,
            anything else descending.
    """

    page_no: int = settings.default_page_number
    page_size: int = settings.default_page_size
    sort_by: str = settings.default_sort_by
    sort_dir: str = settings.default_sort_direction

    @property
    def offset(self) -> int:
        """Calculate offset from page number."""
        return self.page_no * self.page_size

    @property
    def ascending(self) -> bool:
        """Whether results are sorted in ascending order."""
        return self.sort_dir.upper() == "ASC"


def build_page_response(
    content: list[ProductDto],
    total: int,
    pagination: PaginationParams,
) -> PageResponse[ProductDto]:
    """Assemble a page of products with its metadata.

    Args:
        content: Items on the current page.
        total: Total number of matching items across all pages.
        pagination: Pagination used to fetch ``content``.

    Returns:
        Page response.
    """
    total_pages = math.ceil(total / pagination.page_size) if pagination.page_size else 0
    return PageResponse[ProductDto](
        content=content,
        page_no=pagination.page_no,
        page_size=pagination.page_size,
        total_elements=total,
        total_pages=total_pages,
        last=pagination.page_no + 1 >= total_pages,
    )


class ProductService:
    """Service for product operations.

    Example usage:
        async with async_session_factory() as session:
            service = ProductService(session)
            page = await service.get_all_products(
                PaginationParams(page_no=0, page_size=10, sort_by="price"),
                ProductFilter(max_price=500),
            )
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize service with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session
        self.products = ProductRepository(session)
        self.categories = CategoryRepository(session)
        self.brands = BrandRepository(session)

    async def get_all_products(
        self,
        pagination: PaginationParams,
        filters: ProductFilter | None = None,
    ) -> PageResponse[ProductDto]:
        """List products with optional filters, sorted and paginated.

        Args:
            pagination: Pagination and sorting parameters.
            filters: Optional title/description/price filters.

        Returns:
            One page of products.
        """
        filters = filters or ProductFilter()

        products = await self.products.find_all(
            title=filters.title,
            description=filters.description,
            min_price=filters.min_price,
            max_price=filters.max_price,
            sort_by=pagination.sort_by,
            ascending=pagination.ascending,
            limit=pagination.page_size,
            offset=pagination.offset,
        )
        total = await self.products.count(
            title=filters.title,
            description=filters.description,
            min_price=filters.min_price,
            max_price=filters.max_price,
        )

        return build_page_response(
            [product_to_dto(p) for p in products], total, pagination
        )

    async def get_all_products_by_category_id(
        self,
        category_id: int,
        pagination: PaginationParams,
    ) -> PageResponse[ProductDto]:
        """List the products of one category.

        Args:
            category_id: Category id.
            pagination: Pagination and sorting parameters.

        Returns:
            One page of the category's products.

        Raises:
            ResourceNotFoundError: If the category does not exist.
        """
        if not await self.categories.exists_by_id(category_id):
            raise ResourceNotFoundError("Category", "id", category_id)

        products = await self.products.find_all(
            category_id=category_id,
            sort_by=pagination.sort_by,
            ascending=pagination.ascending,
            limit=pagination.page_size,
            offset=pagination.offset,
        )
        total = await self.products.count(category_id=category_id)

        return build_page_response(
            [product_to_dto(p) for p in products], total, pagination
        )

    async def get_product_by_id(self, product_id: int) -> ProductDto:
        """Get a product by id.

        Raises:
            ResourceNotFoundError: If the product does not exist.
        """
        return product_to_dto(await self._get_product(product_id))

    async def create_product(self, product_dto: ProductDto) -> ProductDto:
        """Create a product.

        Args:
            product_dto: Product to create; ``category_id`` and ``brand_id``
                must reference existing rows.

        Returns:
            Created product.

        Raises:
            ResourceNotFoundError: If the category or brand does not exist.
        """
        category = await self.categories.get_by_id(product_dto.category_id)
        if category is None:
            raise ResourceNotFoundError("Category", "id", product_dto.category_id)

        brand = await self.brands.get_by_id(product_dto.brand_id)
        if brand is None:
            raise ResourceNotFoundError("Brand", "id", product_dto.brand_id)

        product = await self.products.save(product_to_entity(product_dto, category, brand))

        logger.info(
            "Product created",
            product_id=product.id,
            category_id=category.id,
            brand_id=brand.id,
        )
        return product_to_dto(product)

    async def update_product(self, product_dto: ProductDto, product_id: int) -> ProductDto:
        """Update a product's title, description and price.

        Every other field and both associations are left untouched.

        Args:
            product_dto: New values.
            product_id: Product to update.

        Returns:
            Updated product.

        Raises:
            ResourceNotFoundError: If the product does not exist.
        """
        product = await self._get_product(product_id)

        product.title = product_dto.title
        product.description = product_dto.description
        product.price = product_dto.price

        product = await self.products.save(product)

        logger.info("Product updated", product_id=product_id)
        return product_to_dto(product)

    async def delete_product_by_id(self, product_id: int) -> None:
        """Delete a product.

        Raises:
            ResourceNotFoundError: If the product does not exist.
        """
        product = await self._get_product(product_id)
        await self.products.delete(product)

        logger.info("Product deleted", product_id=product_id)

    async def _get_product(self, product_id: int) -> Product:
        product = await self.products.get_by_id(product_id)
        if product is None:
            raise ResourceNotFoundError("Product", "id", product_id)
        return product


class CategoryService:
    """Service for category operations."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.categories = CategoryRepository(session)
        self.products = ProductRepository(session)

    async def get_all_categories(self) -> list[CategoryDto]:
        return [category_to_dto(c) for c in await self.categories.find_all()]

    async def get_category_by_id(self, category_id: int) -> CategoryDto:
        category = await self.categories.get_by_id(category_id)
        if category is None:
            raise ResourceNotFoundError("Category", "id", category_id)
        return category_to_dto(category)

    async def create_category(self, category_dto: CategoryDto) -> CategoryDto:
        """Create a category.

        Raises:
            ProductAPIError: If a category with the same name exists.
        """
        if await self.categories.get_by_name(category_dto.name) is not None:
            raise ProductAPIError(400, f"Category '{category_dto.name}' already exists")

        category = await self.categories.save(category_to_entity(category_dto))
        logger.info("Category created", category_id=category.id, name=category.name)
        return category_to_dto(category)

    async def delete_category_by_id(self, category_id: int) -> None:
        """Delete a category that no product references.

        Raises:
            ResourceNotFoundError: If the category does not exist.
            ProductAPIError: If products still belong to the category.
        """
        category = await self.categories.get_by_id(category_id)
        if category is None:
            raise ResourceNotFoundError("Category", "id", category_id)

        if await self.products.count(category_id=category_id) > 0:
            raise ProductAPIError(400, f"Category {category_id} still has products")

        await self.categories.delete(category)
        logger.info("Category deleted", category_id=category_id)


class BrandService:
    """Service for brand operations."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.brands = BrandRepository(session)
        self.products = ProductRepository(session)

    async def get_all_brands(self) -> list[BrandDto]:
        return [brand_to_dto(b) for b in await self.brands.find_all()]

    async def get_brand_by_id(self, brand_id: int) -> BrandDto:
        brand = await self.brands.get_by_id(brand_id)
        if brand is None:
            raise ResourceNotFoundError("Brand", "id", brand_id)
        return brand_to_dto(brand)

    async def create_brand(self, brand_dto: BrandDto) -> BrandDto:
        """Create a brand.

        Raises:
            ProductAPIError: If a brand with the same name exists.
        """
        if await self.brands.get_by_name(brand_dto.name) is not None:
            raise ProductAPIError(400, f"Brand '{brand_dto.name}' already exists")

        brand = await self.brands.save(brand_to_entity(brand_dto))
        logger.info("Brand created", brand_id=brand.id, name=brand.name)
        return brand_to_dto(brand)

    async def delete_brand_by_id(self, brand_id: int) -> None:
        """Delete a brand that no product references.

        Raises:
            ResourceNotFoundError: If the brand does not exist.
            ProductAPIError: If products still belong to the brand.
        """
        brand = await self.brands.get_by_id(brand_id)
        if brand is None:
            raise ResourceNotFoundError("Brand", "id", brand_id)

        if await self.products.count(brand_id=brand_id) > 0:
            raise ProductAPIError(400, f"Brand {brand_id} still has products")

        await self.brands.delete(brand)
        logger.info("Brand deleted", brand_id=brand_id)
