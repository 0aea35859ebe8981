"""Domain layer - errors shared by the catalog and auth services.

Example usage:
    from products_api.domain import ResourceNotFoundError

    raise ResourceNotFoundError("Product", "id", 42)
"""

from products_api.domain.exceptions import (
    AccessDeniedError,
    AuthenticationError,
    DomainError,
    InvalidTokenError,
    ProductAPIError,
    ResourceNotFoundError,
)

__all__ = [
    "AccessDeniedError",
    "AuthenticationError",
    "DomainError",
    "InvalidTokenError",
    "ProductAPIError",
    "ResourceNotFoundError",
]
