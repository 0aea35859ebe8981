"""Password hashing and bearer token handling.

Passwords are hashed with bcrypt. Tokens are HS256 JWTs signed and
verified with authlib.
"""

import time
from dataclasses import dataclass, field
from typing import Any

import bcrypt
from authlib.jose import JoseError, JsonWebToken

from products_api.domain.exceptions import InvalidTokenError
from products_api.infrastructure.config import settings


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode(), password_hash.encode())
    except (ValueError, AttributeError):
        return False


@dataclass(frozen=True)
class AuthenticatedUser:
    """Identity established from a verified bearer token.

    Attributes:
        username: Token subject.
        roles: Role names carried by the token.
    """

    username: str
    roles: tuple[str, ...] = field(default_factory=tuple)

    def has_role(self, role: str) -> bool:
        return role in self.roles


class JwtTokenProvider:
    """Issues and verifies signed access tokens.

    Example usage:
        provider = JwtTokenProvider()
        token = provider.generate_token("alice", ["ROLE_USER"])
        user = provider.authenticate(token)
    """

    def __init__(
        self,
        secret: str | None = None,
        algorithm: str | None = None,
        expires_in_seconds: int | None = None,
    ) -> None:
        """Initialize provider, falling back to application settings.

        Args:
            secret: HMAC signing secret.
            algorithm: Signing algorithm.
            expires_in_seconds: Token lifetime.
        """
        self.secret = secret or settings.jwt_secret
        self.algorithm = algorithm or settings.jwt_algorithm
        self.expires_in_seconds = expires_in_seconds or settings.jwt_expiration_seconds
        self._jwt = JsonWebToken([self.algorithm])

    def generate_token(self, username: str, roles: list[str] | None = None) -> str:
        """Generate a signed token for a user.

        Args:
            username: Subject claim.
            roles: Role names to embed.

        Returns:
            Compact serialized JWT.
        """
        now = int(time.time())
        payload = {
            "sub": username,
            "roles": list(roles or []),
            "iat": now,
            "exp": now + self.expires_in_seconds,
        }
        header = {"alg": self.algorithm, "typ": "JWT"}

        token = self._jwt.encode(header, payload, self.secret)
        return token.decode() if isinstance(token, bytes) else token

    def decode_token(self, token: str) -> dict[str, Any]:
        """Verify signature and expiry, returning the claims.

        Raises:
            InvalidTokenError: If the token is malformed, tampered with,
                or expired.
        """
        try:
            claims = self._jwt.decode(token, self.secret)
            claims.validate(now=int(time.time()))
        except JoseError as e:
            raise InvalidTokenError("Invalid or expired token", details={"reason": str(e)}) from e
        except ValueError as e:
            raise InvalidTokenError("Malformed token", details={"reason": str(e)}) from e

        if not claims.get("sub"):
            raise InvalidTokenError("Token has no subject")

        return dict(claims)

    def get_username(self, token: str) -> str:
        """Extract the subject from a verified token."""
        return self.decode_token(token)["sub"]

    def authenticate(self, token: str) -> AuthenticatedUser:
        """Build the request identity from a verified token."""
        claims = self.decode_token(token)
        return AuthenticatedUser(
            username=claims["sub"],
            roles=tuple(claims.get("roles") or ()),
        )
