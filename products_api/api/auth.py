"""Authentication API endpoints.

Provides endpoints for obtaining a bearer token and registering users:
- POST /api/auth/login (alias /api/auth/signin)
- POST /api/auth/register (alias /api/auth/signup)
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from products_api.api.dependencies import get_auth_service
from products_api.api.schemas import ErrorResponse, MessageResponse
from products_api.auth.schemas import JwtAuthResponse, LoginDto, RegisterDto
from products_api.auth.service import AuthService

router = APIRouter(prefix="/api/auth", tags=["Auth"])

AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]


@router.post(
    "/login",
    response_model=JwtAuthResponse,
    responses={401: {"model": ErrorResponse}},
    summary="Log in",
    description="Exchange a username (or email) and password for a bearer token.",
)
@router.post("/signin", response_model=JwtAuthResponse, include_in_schema=False)
async def login(login_dto: LoginDto, service: AuthServiceDep) -> JwtAuthResponse:
    """Authenticate and issue a token.

    Raises:
        AuthenticationError: On bad credentials.
    """
    token = await service.login(login_dto)
    return JwtAuthResponse(access_token=token)


@router.post(
    "/register",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
    summary="Register",
    description="Create an account with the default user role.",
)
@router.post(
    "/signup",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
async def register(register_dto: RegisterDto, service: AuthServiceDep) -> MessageResponse:
    """Register a new user.

    Raises:
        ProductAPIError: If the username or email is taken.
    """
    return MessageResponse(message=await service.register(register_dto))
