"""Catalog transfer objects.

Pydantic models exposed at the API boundary, decoupled from the
persisted schema in ``products_api.catalog.models``.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CategoryDto(BaseModel):
    """Category representation."""

    id: int | None = Field(default=None, description="Category id")
    name: str = Field(..., min_length=1, max_length=100, description="Category name")


class BrandDto(BaseModel):
    """Brand representation."""

    id: int | None = Field(default=None, description="Brand id")
    name: str = Field(..., min_length=1, max_length=100, description="Brand name")


class ProductDto(BaseModel):
    """Product representation.

    ``category`` and ``brand`` are filled in on output; on input only the
    ``category_id`` and ``brand_id`` references are read.
    """

    id: int | None = Field(default=None, description="Product id")
    title: str = Field(..., min_length=1, max_length=255, description="Product title")
    description: str | None = Field(default=None, description="Product description")
    price: int = Field(..., ge=0, description="Price in whole currency units")
    discount_percentage: float = Field(default=0.0, ge=0, le=100)
    rating: float = Field(default=0.0, ge=0, le=5)
    stock: int = Field(default=0, ge=0)
    thumbnail: str | None = Field(default=None, description="Thumbnail URL")
    images: list[str] = Field(default_factory=list, description="Image URLs")
    category: CategoryDto | None = None
    category_id: int = Field(..., description="Owning category id")
    brand: BrandDto | None = None
    brand_id: int = Field(..., description="Owning brand id")


class PageResponse(BaseModel, Generic[T]):
    """One page of results plus the metadata needed to walk the rest.

    Serialized with camelCase keys (``pageNo``, ``totalElements``, ...).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    content: list[T]
    page_no: int
    page_size: int
    total_elements: int
    total_pages: int
    last: bool
