"""Converters between catalog entities and transfer objects."""

from products_api.catalog.models import Brand, Category, Product
from products_api.catalog.schemas import BrandDto, CategoryDto, ProductDto


def category_to_dto(category: Category) -> CategoryDto:
    """Convert Category entity to CategoryDto."""
    return CategoryDto(id=category.id, name=category.name)


def category_to_entity(dto: CategoryDto) -> Category:
    """Convert CategoryDto to a new Category entity."""
    return Category(name=dto.name)


def brand_to_dto(brand: Brand) -> BrandDto:
    """Convert Brand entity to BrandDto."""
    return BrandDto(id=brand.id, name=brand.name)


def brand_to_entity(dto: BrandDto) -> Brand:
    """Convert BrandDto to a new Brand entity."""
    return Brand(name=dto.name)


def product_to_dto(product: Product) -> ProductDto:
    """Convert Product entity to ProductDto.

    The category and brand relationships must already be loaded.
    """
    return ProductDto(
        id=product.id,
        title=product.title,
        description=product.description,
        price=product.price,
        discount_percentage=product.discount_percentage,
        rating=product.rating,
        stock=product.stock,
        thumbnail=product.thumbnail,
        images=list(product.images or []),
        category=category_to_dto(product.category),
        category_id=product.category.id,
        brand=brand_to_dto(product.brand),
        brand_id=product.brand.id,
    )


def product_to_entity(dto: ProductDto, category: Category, brand: Brand) -> Product:
    """Convert ProductDto to a new Product entity.

    Any client-supplied id is ignored; the database assigns one.

    Args:
        dto: Incoming product data.
        category: Resolved owning category.
        brand: Resolved owning brand.

    Returns:
        Unsaved Product entity.
    """
    return Product(
        title=dto.title,
        description=dto.description,
        price=dto.price,
        discount_percentage=dto.discount_percentage,
        rating=dto.rating,
        stock=dto.stock,
        thumbnail=dto.thumbnail,
        images=list(dto.images),
        category=category,
        brand=brand,
    )
