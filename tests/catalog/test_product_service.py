"""Tests for ProductService."""

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession

from products_api.catalog.models import Brand, Category, Product
from products_api.catalog.schemas import ProductDto
from products_api.catalog.service import PaginationParams, ProductFilter, ProductService
from products_api.domain.exceptions import ResourceNotFoundError


@pytest_asyncio.fixture
async def catalog(session: AsyncSession) -> dict:
    """Two categories, two brands and 25 products.

    Products 1-15 are phones priced 100..1500, products 16-25 are
    laptops priced 1600..2500.
    """
    phones = Category(name="smartphones")
    laptops = Category(name="laptops")
    apple = Brand(name="Apple")
    samsung = Brand(name="Samsung")
    session.add_all([phones, laptops, apple, samsung])
    await session.flush()

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
    await session.flush()

    return {"phones": phones, "laptops": laptops, "apple": apple, "samsung": samsung}


@pytest.fixture
def service(session: AsyncSession) -> ProductService:
    return ProductService(session)


def new_product(category_id: int, brand_id: int, **overrides) -> ProductDto:
    data = {
        "title": "Pixel 8",
        "description": "Google phone",
        "price": 699,
        "discount_percentage": 10.0,
        "rating": 4.4,
        "stock": 12,
        "thumbnail": "https://img.example.com/pixel/thumb.jpg",
        "images": ["https://img.example.com/pixel/1.jpg", "https://img.example.com/pixel/2.jpg"],
        "category_id": category_id,
        "brand_id": brand_id,
    }
    data.update(overrides)
    return ProductDto(**data)


class TestGetAllProducts:
    """Tests for listing products."""

    @pytest.mark.asyncio
    async def test_first_page_is_full(self, service: ProductService, catalog: dict) -> None:
        """First page holds exactly page_size items."""
        page = await service.get_all_products(PaginationParams(page_no=0, page_size=10))

        assert len(page.content) == 10
        assert page.page_no == 0
        assert page.page_size == 10
        assert page.total_elements == 25
        assert page.total_pages == 3
        assert page.last is False

    @pytest.mark.asyncio
    async def test_last_page_holds_remainder(self, service: ProductService, catalog: dict) -> None:
        """Last page holds fewer items and is flagged as last."""
        page = await service.get_all_products(PaginationParams(page_no=2, page_size=10))

        assert len(page.content) == 5
        assert page.total_pages == 3
        assert page.last is True

    @pytest.mark.asyncio
    async def test_page_beyond_end_is_empty(self, service: ProductService, catalog: dict) -> None:
        page = await service.get_all_products(PaginationParams(page_no=5, page_size=10))

        assert page.content == []
        assert page.total_elements == 25
        assert page.last is True

    @pytest.mark.asyncio
    async def test_pages_do_not_overlap(self, service: ProductService, catalog: dict) -> None:
        """Walking all pages yields every product exactly once."""
        seen: list[int] = []
        for page_no in range(3):
            page = await service.get_all_products(
                PaginationParams(page_no=page_no, page_size=10, sort_by="rating")
            )
            seen.extend(p.id for p in page.content)

        assert len(seen) == 25
        assert len(set(seen)) == 25

    @pytest.mark.asyncio
    async def test_empty_catalog(self, service: ProductService) -> None:
        page = await service.get_all_products(PaginationParams())

        assert page.content == []
        assert page.total_elements == 0
        assert page.total_pages == 0
        assert page.last is True

    @pytest.mark.asyncio
    async def test_sort_descending(self, service: ProductService, catalog: dict) -> None:
        page = await service.get_all_products(
            PaginationParams(page_size=5, sort_by="price", sort_dir="desc")
        )

        assert [p.price for p in page.content] == [2500, 2400, 2300, 2200, 2100]

    @pytest.mark.asyncio
    async def test_sort_direction_is_case_insensitive(
        self, service: ProductService, catalog: dict
    ) -> None:
        page = await service.get_all_products(
            PaginationParams(page_size=3, sort_by="price", sort_dir="aSc")
        )

        assert [p.price for p in page.content] == [100, 200, 300]

    @pytest.mark.asyncio
    async def test_unrecognised_direction_sorts_descending(
        self, service: ProductService, catalog: dict
    ) -> None:
        page = await service.get_all_products(
            PaginationParams(page_size=2, sort_by="price", sort_dir="sideways")
        )

        assert [p.price for p in page.content] == [2500, 2400]

    @pytest.mark.asyncio
    async def test_unknown_sort_field_falls_back_to_id(
        self, service: ProductService, catalog: dict
    ) -> None:
        page = await service.get_all_products(
            PaginationParams(page_size=25, sort_by="no_such_column")
        )

        ids = [p.id for p in page.content]
        assert ids == sorted(ids)

    @pytest.mark.asyncio
    async def test_filter_by_title_is_case_insensitive(
        self, service: ProductService, catalog: dict
    ) -> None:
        page = await service.get_all_products(
            PaginationParams(page_size=25), ProductFilter(title="product 1")
        )

        # Product 10..19
        assert page.total_elements == 10
        assert all("Product 1" in p.title for p in page.content)

    @pytest.mark.asyncio
    async def test_filter_treats_wildcards_literally(
        self, service: ProductService, catalog: dict
    ) -> None:
        """LIKE wildcards in filter text match only themselves."""
        for text in ("_", "%", "Product_0"):
            page = await service.get_all_products(
                PaginationParams(page_size=25), ProductFilter(title=text)
            )
            assert page.total_elements == 0

        page = await service.get_all_products(
            PaginationParams(page_size=25), ProductFilter(description="%")
        )
        assert page.total_elements == 0

    @pytest.mark.asyncio
    async def test_filter_by_description(self, service: ProductService, catalog: dict) -> None:
        page = await service.get_all_products(
            PaginationParams(page_size=25), ProductFilter(description="LAPTOP")
        )

        assert page.total_elements == 10

    @pytest.mark.asyncio
    async def test_filter_by_price_range_is_inclusive(
        self, service: ProductService, catalog: dict
    ) -> None:
        page = await service.get_all_products(
            PaginationParams(page_size=25, sort_by="price"),
            ProductFilter(min_price=500, max_price=900),
        )

        assert [p.price for p in page.content] == [500, 600, 700, 800, 900]
        assert page.total_elements == 5
        assert page.total_pages == 1

    @pytest.mark.asyncio
    async def test_total_counts_filtered_rows(self, service: ProductService, catalog: dict) -> None:
        """Totals reflect the filters, not the whole table."""
        page = await service.get_all_products(
            PaginationParams(page_size=2), ProductFilter(min_price=2000)
        )

        assert len(page.content) == 2
        assert page.total_elements == 6
        assert page.total_pages == 3


class TestGetAllProductsByCategoryId:
    """Tests for listing the products of a category."""

    @pytest.mark.asyncio
    async def test_returns_only_category_products(
        self, service: ProductService, catalog: dict
    ) -> None:
        laptops = catalog["laptops"]

        page = await service.get_all_products_by_category_id(
            laptops.id, PaginationParams(page_size=25)
        )

        assert page.total_elements == 10
        assert all(p.category_id == laptops.id for p in page.content)
        assert all(p.category.name == "laptops" for p in page.content)

    @pytest.mark.asyncio
    async def test_paginates(self, service: ProductService, catalog: dict) -> None:
        page = await service.get_all_products_by_category_id(
            catalog["phones"].id, PaginationParams(page_no=1, page_size=10)
        )

        assert len(page.content) == 5
        assert page.total_elements == 15
        assert page.total_pages == 2
        assert page.last is True

    @pytest.mark.asyncio
    async def test_unknown_category_raises(self, service: ProductService, catalog: dict) -> None:
        with pytest.raises(ResourceNotFoundError) as exc_info:
            await service.get_all_products_by_category_id(999, PaginationParams())

        error = exc_info.value
        assert error.resource_name == "Category"
        assert error.field_name == "id"
        assert error.field_value == 999
        assert error.status_code == 404
        assert error.message == "Category not found with id : '999'"


class TestGetProductById:
    """Tests for fetching a single product."""

    @pytest.mark.asyncio
    async def test_returns_product(self, service: ProductService, catalog: dict) -> None:
        product = await service.get_product_by_id(1)

        assert product.id == 1
        assert product.title == "Product 01"
        assert product.brand.name == "Apple"
        assert product.brand_id == catalog["apple"].id

    @pytest.mark.asyncio
    async def test_missing_product_raises(self, service: ProductService, catalog: dict) -> None:
        with pytest.raises(ResourceNotFoundError) as exc_info:
            await service.get_product_by_id(404)

        assert exc_info.value.resource_name == "Product"


class TestCreateProduct:
    """Tests for creating products."""

    @pytest.mark.asyncio
    async def test_create_then_fetch_returns_same_values(
        self, service: ProductService, catalog: dict
    ) -> None:
        dto = new_product(catalog["phones"].id, catalog["samsung"].id)

        created = await service.create_product(dto)
        fetched = await service.get_product_by_id(created.id)

        assert created.id is not None
        assert fetched == created
        assert fetched.title == dto.title
        assert fetched.description == dto.description
        assert fetched.price == dto.price
        assert fetched.discount_percentage == dto.discount_percentage
        assert fetched.rating == dto.rating
        assert fetched.stock == dto.stock
        assert fetched.thumbnail == dto.thumbnail
        assert fetched.images == dto.images
        assert fetched.category_id == catalog["phones"].id
        assert fetched.brand_id == catalog["samsung"].id

    @pytest.mark.asyncio
    async def test_client_supplied_id_is_ignored(
        self, service: ProductService, catalog: dict
    ) -> None:
        dto = new_product(catalog["phones"].id, catalog["apple"].id, id=1)

        created = await service.create_product(dto)

        assert created.id == 26
        assert (await service.get_product_by_id(1)).title == "Product 01"

    @pytest.mark.asyncio
    async def test_unknown_category_raises(self, service: ProductService, catalog: dict) -> None:
        with pytest.raises(ResourceNotFoundError) as exc_info:
            await service.create_product(new_product(999, catalog["apple"].id))

        assert exc_info.value.resource_name == "Category"

    @pytest.mark.asyncio
    async def test_unknown_brand_raises(self, service: ProductService, catalog: dict) -> None:
        with pytest.raises(ResourceNotFoundError) as exc_info:
            await service.create_product(new_product(catalog["phones"].id, 999))

        assert exc_info.value.resource_name == "Brand"


class TestUpdateProduct:
    """Tests for updating products."""

    @pytest.mark.asyncio
    async def test_updates_only_title_description_and_price(
        self, service: ProductService, catalog: dict
    ) -> None:
        before = await service.get_product_by_id(3)
        changes = new_product(
            catalog["laptops"].id,
            catalog["samsung"].id,
            title="Renamed",
            description="New description",
            price=42,
            discount_percentage=99.0,
            rating=0.5,
            stock=0,
            thumbnail="https://elsewhere.example.com/x.jpg",
            images=[],
        )

        updated = await service.update_product(changes, 3)

        assert updated.title == "Renamed"
        assert updated.description == "New description"
        assert updated.price == 42

        assert updated.discount_percentage == before.discount_percentage
        assert updated.rating == before.rating
        assert updated.stock == before.stock
        assert updated.thumbnail == before.thumbnail
        assert updated.images == before.images
        assert updated.category_id == before.category_id
        assert updated.brand_id == before.brand_id

        assert await service.get_product_by_id(3) == updated

    @pytest.mark.asyncio
    async def test_missing_product_raises(self, service: ProductService, catalog: dict) -> None:
        with pytest.raises(ResourceNotFoundError):
            await service.update_product(
                new_product(catalog["phones"].id, catalog["apple"].id), 999
            )


class TestDeleteProduct:
    """Tests for deleting products."""

    @pytest.mark.asyncio
    async def test_deleted_product_is_not_found(
        self, service: ProductService, catalog: dict
    ) -> None:
        await service.delete_product_by_id(5)

        with pytest.raises(ResourceNotFoundError):
            await service.get_product_by_id(5)

        page = await service.get_all_products(PaginationParams(page_size=25))
        assert page.total_elements == 24

    @pytest.mark.asyncio
    async def test_missing_product_raises(self, service: ProductService, catalog: dict) -> None:
        with pytest.raises(ResourceNotFoundError):
            await service.delete_product_by_id(999)
