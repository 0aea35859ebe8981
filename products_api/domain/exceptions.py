"""Domain exceptions.

All domain-level errors raised by the service layer. The API layer maps
each of them onto an HTTP status code.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the API layer.
    """

    status_code: int = 400
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ResourceNotFoundError(DomainError):
    """Raised when a requested resource does not exist."""

    status_code = 404
    error_code = "RESOURCE_NOT_FOUND"

    def __init__(self, resource_name: str, field_name: str, field_value: Any) -> None:
        """Initialize resource not found error.

        Args:
            resource_name: Type of resource (e.g., "Product", "Category").
            field_name: Field used for the lookup.
            field_value: Value that matched nothing.
        """
        super().__init__(
            f"{resource_name} not found with {field_name} : '{field_value}'",
            details={
                "resource_name": resource_name,
                "field_name": field_name,
                "field_value": field_value,
            },
        )
        self.resource_name = resource_name
        self.field_name = field_name
        self.field_value = field_value


class ProductAPIError(DomainError):
    """Raised for client errors that carry their own HTTP status."""

    error_code = "BAD_REQUEST"

    def __init__(
        self,
        status_code: int,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize API error.

        Args:
            status_code: HTTP status to answer with.
            message: Human-readable error message.
            details: Optional additional context.
        """
        super().__init__(message, details=details)
        self.status_code = status_code


class AuthenticationError(DomainError):
    """Raised when credentials or a token cannot be verified."""

    status_code = 401
    error_code = "UNAUTHORIZED"


class InvalidTokenError(AuthenticationError):
    """Raised when a bearer token is malformed, tampered with, or expired."""

    error_code = "INVALID_TOKEN"


class AccessDeniedError(DomainError):
    """Raised when an authenticated user lacks a required role."""

    status_code = 403
    error_code = "FORBIDDEN"
