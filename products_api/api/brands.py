"""Brand API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response, status

from products_api.api.dependencies import get_brand_service, require_admin
from products_api.api.schemas import ErrorResponse
from products_api.auth.security import AuthenticatedUser
from products_api.catalog.schemas import BrandDto
from products_api.catalog.service import BrandService

router = APIRouter(prefix="/api/brands", tags=["Brands"])

BrandServiceDep = Annotated[BrandService, Depends(get_brand_service)]
AdminDep = Annotated[AuthenticatedUser, Depends(require_admin)]


@router.get("", response_model=list[BrandDto], summary="Get all brands")
async def get_all_brands(service: BrandServiceDep) -> list[BrandDto]:
    return await service.get_all_brands()


@router.get(
    "/{brand_id}",
    response_model=BrandDto,
    responses={404: {"model": ErrorResponse}},
    summary="Get a brand",
)
async def get_brand_by_id(
    service: BrandServiceDep,
    brand_id: int = Path(..., description="Brand id", examples=[1]),
) -> BrandDto:
    return await service.get_brand_by_id(brand_id)


@router.post(
    "",
    response_model=BrandDto,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
    },
    summary="Create a brand",
)
async def create_brand(
    brand: BrandDto,
    service: BrandServiceDep,
    _admin: AdminDep,
) -> BrandDto:
    return await service.create_brand(brand)


@router.delete(
    "/{brand_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Delete a brand",
)
async def delete_brand(
    service: BrandServiceDep,
    _admin: AdminDep,
    brand_id: int = Path(..., description="Brand id", examples=[1]),
) -> Response:
    await service.delete_brand_by_id(brand_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
