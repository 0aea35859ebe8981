"""Product Catalog.

Persistence, mapping and service operations for products,
categories and brands.
"""

from products_api.catalog.models import Brand, Category, Product
from products_api.catalog.repository import (
    BrandRepository,
    CategoryRepository,
    ProductRepository,
)
from products_api.catalog.schemas import BrandDto, CategoryDto, PageResponse, ProductDto
from products_api.catalog.service import (
    BrandService,
    CategoryService,
    PaginationParams,
    ProductFilter,
    ProductService,
)

__all__ = [
    # Models
    "Brand",
    "Category",
    "Product",
    # Repositories
    "BrandRepository",
    "CategoryRepository",
    "ProductRepository",
    # Transfer objects
    "BrandDto",
    "CategoryDto",
    "PageResponse",
    "ProductDto",
    # Services
    "BrandService",
    "CategoryService",
    "PaginationParams",
    "ProductFilter",
    "ProductService",
]
