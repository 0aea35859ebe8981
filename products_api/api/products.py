"""Product API endpoints.

Provides endpoints for the product catalog:
- GET /api/products - list products (paginated, filterable)
- GET /api/products/category/{id} - list products of a category
- GET /api/products/{id} - product details
- POST /api/products - create a product
- PUT /api/products/{id} - update title, description and price
- DELETE /api/products/{id} - delete a product
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Response, status

from products_api.api.dependencies import get_product_service, require_admin
from products_api.api.schemas import ErrorResponse
from products_api.auth.security import AuthenticatedUser
from products_api.catalog.schemas import PageResponse, ProductDto
from products_api.catalog.service import PaginationParams, ProductFilter, ProductService
from products_api.infrastructure.config import settings

router = APIRouter(prefix="/api/products", tags=["Products"])

ProductServiceDep = Annotated[ProductService, Depends(get_product_service)]
AdminDep = Annotated[AuthenticatedUser, Depends(require_admin)]


# ============================================================================
# Dependencies
# ============================================================================


def get_pagination(
    page_no: int = Query(
        default=settings.default_page_number, alias="pageNo", ge=0, description="Page number (0-based)"
    ),
    page_size: int = Query(
        default=settings.default_page_size, alias="pageSize", ge=1, le=100, description="Items per page"
    ),
    sort_by: str = Query(default=settings.default_sort_by, alias="sortBy", description="Sort field"),
    sort_dir: str = Query(
        default=settings.default_sort_direction, alias="sortDir", description="Sort direction (asc/desc)"
    ),
) -> PaginationParams:
    """Read pagination query parameters."""
    return PaginationParams(
        page_no=page_no,
        page_size=page_size,
        sort_by=sort_by,
        sort_dir=sort_dir,
    )


PaginationDep = Annotated[PaginationParams, Depends(get_pagination)]


def set_page_status(response: Response, page: PageResponse[ProductDto]) -> None:
    """Answer 206 Partial Content when the page holds fewer than all matches."""
    if len(page.content) < page.total_elements:
        response.status_code = status.HTTP_206_PARTIAL_CONTENT


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "",
    response_model=PageResponse[ProductDto],
    responses={
        206: {"model": PageResponse[ProductDto], "description": "Success - Partial content"},
        500: {"model": ErrorResponse},
    },
    summary="Get all products",
    description="Get a paginated list of products, optionally filtered by title, description and price range.",
)
async def get_all_products(
    response: Response,
    service: ProductServiceDep,
    pagination: PaginationDep,
    title: str | None = Query(default=None, description="Title contains"),
    description: str | None = Query(default=None, description="Description contains"),
    min_price: int | None = Query(default=None, ge=0, description="Minimum price"),
    max_price: int | None = Query(default=None, ge=0, description="Maximum price"),
) -> PageResponse[ProductDto]:
    """List products.

    Returns:
        One page of products; 206 when more pages exist.
    """
    page = await service.get_all_products(
        pagination,
        ProductFilter(
            title=title,
            description=description,
            min_price=min_price,
            max_price=max_price,
        ),
    )
    set_page_status(response, page)
    return page


@router.get(
    "/category/{category_id}",
    response_model=PageResponse[ProductDto],
    responses={
        206: {"model": PageResponse[ProductDto], "description": "Success - Partial content"},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Get products by category",
    description="Get a paginated list of the products of a category.",
)
async def get_all_products_by_category_id(
    response: Response,
    service: ProductServiceDep,
    pagination: PaginationDep,
    category_id: int = Path(..., description="Category id", examples=[1]),
) -> PageResponse[ProductDto]:
    """List products of one category.

    Raises:
        ResourceNotFoundError: If the category does not exist.
    """
    page = await service.get_all_products_by_category_id(category_id, pagination)
    set_page_status(response, page)
    return page


@router.get(
    "/{product_id}",
    response_model=ProductDto,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Get a product",
)
async def get_product_by_id(
    service: ProductServiceDep,
    product_id: int = Path(..., description="Product id", examples=[1]),
) -> ProductDto:
    return await service.get_product_by_id(product_id)


@router.post(
    "",
    response_model=ProductDto,
    status_code=status.HTTP_201_CREATED,
    responses={
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Create a single product",
)
async def create_product(
    product: ProductDto,
    service: ProductServiceDep,
    _admin: AdminDep,
) -> ProductDto:
    """Create a product.

    The referenced category and brand must exist.
    """
    return await service.create_product(product)


@router.put(
    "/{product_id}",
    response_model=ProductDto,
    responses={
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Update a product",
    description="Update the title, description and price of a product.",
)
async def update_product(
    product: ProductDto,
    service: ProductServiceDep,
    _admin: AdminDep,
    product_id: int = Path(..., description="Product id", examples=[1]),
) -> ProductDto:
    return await service.update_product(product, product_id)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Delete a product",
)
async def delete_product(
    service: ProductServiceDep,
    _admin: AdminDep,
    product_id: int = Path(..., description="Product id", examples=[1]),
) -> Response:
    await service.delete_product_by_id(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
