"""Authentication and authorization.

Users, roles, password hashing and bearer token handling.
"""

from products_api.auth.models import Role, User
from products_api.auth.security import AuthenticatedUser, JwtTokenProvider
from products_api.auth.service import ADMIN_ROLE, DEFAULT_ROLE, AuthService

__all__ = [
    "ADMIN_ROLE",
    "DEFAULT_ROLE",
    "AuthenticatedUser",
    "AuthService",
    "JwtTokenProvider",
    "Role",
    "User",
]
