"""Shared FastAPI dependencies.

Service factories bound to the request's database session, and guards
that require an authenticated user or a role.
"""

from collections.abc import Callable
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from products_api.auth.security import AuthenticatedUser
from products_api.auth.service import ADMIN_ROLE, AuthService
from products_api.catalog.service import BrandService, CategoryService, ProductService
from products_api.domain.exceptions import AccessDeniedError, AuthenticationError
from products_api.infrastructure.database import get_session

SessionDep = Annotated[AsyncSession, Depends(get_session)]


# ============================================================================
# Services
# ============================================================================


def get_product_service(session: SessionDep) -> ProductService:
    return ProductService(session)


def get_category_service(session: SessionDep) -> CategoryService:
    return CategoryService(session)


def get_brand_service(session: SessionDep) -> BrandService:
    return BrandService(session)


def get_auth_service(session: SessionDep) -> AuthService:
    return AuthService(session)


# ============================================================================
# Security
# ============================================================================


def get_current_user(request: Request) -> AuthenticatedUser | None:
    """Identity set by the JWT middleware, or None."""
    return getattr(request.state, "user", None)


def require_user(
    user: Annotated[AuthenticatedUser | None, Depends(get_current_user)],
) -> AuthenticatedUser:
    """Require an authenticated caller.

    Raises:
        AuthenticationError: If the request carried no valid bearer token.
    """
    if user is None:
        raise AuthenticationError("Authentication required")
    return user


def require_role(role: str) -> Callable[..., AuthenticatedUser]:
    """Build a dependency that requires the caller to hold ``role``.

    Args:
        role: Role name, e.g. "ROLE_ADMIN".

    Returns:
        Dependency callable.
    """

    def dependency(
        user: Annotated[AuthenticatedUser, Depends(require_user)],
    ) -> AuthenticatedUser:
        if not user.has_role(role):
            raise AccessDeniedError(
                f"Role {role} required",
                details={"username": user.username, "required_role": role},
            )
        return user

    return dependency


require_admin = require_role(ADMIN_ROLE)
