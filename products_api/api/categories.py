"""Category API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response, status

from products_api.api.dependencies import get_category_service, require_admin
from products_api.api.schemas import ErrorResponse
from products_api.auth.security import AuthenticatedUser
from products_api.catalog.schemas import CategoryDto
from products_api.catalog.service import CategoryService

router = APIRouter(prefix="/api/categories", tags=["Categories"])

CategoryServiceDep = Annotated[CategoryService, Depends(get_category_service)]
AdminDep = Annotated[AuthenticatedUser, Depends(require_admin)]


@router.get("", response_model=list[CategoryDto], summary="Get all categories")
async def get_all_categories(service: CategoryServiceDep) -> list[CategoryDto]:
    return await service.get_all_categories()


@router.get(
    "/{category_id}",
    response_model=CategoryDto,
    responses={404: {"model": ErrorResponse}},
    summary="Get a category",
)
async def get_category_by_id(
    service: CategoryServiceDep,
    category_id: int = Path(..., description="Category id", examples=[1]),
) -> CategoryDto:
    return await service.get_category_by_id(category_id)


@router.post(
    "",
    response_model=CategoryDto,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
    },
    summary="Create a category",
)
async def create_category(
    category: CategoryDto,
    service: CategoryServiceDep,
    _admin: AdminDep,
) -> CategoryDto:
    return await service.create_category(category)


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Delete a category",
    description="Delete a category. Categories that still own products cannot be deleted.",
)
async def delete_category(
    service: CategoryServiceDep,
    _admin: AdminDep,
    category_id: int = Path(..., description="Category id", examples=[1]),
) -> Response:
    await service.delete_category_by_id(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
