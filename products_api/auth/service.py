"""Authentication service.

Verifies credentials, issues bearer tokens and registers new users.
"""

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from products_api.auth.models import User
from products_api.auth.repository import RoleRepository, UserRepository
from products_api.auth.schemas import LoginDto, RegisterDto
from products_api.auth.security import JwtTokenProvider, hash_password, verify_password
from products_api.domain.exceptions import AuthenticationError, ProductAPIError

logger = structlog.get_logger()

DEFAULT_ROLE = "ROLE_USER"
ADMIN_ROLE = "ROLE_ADMIN"


class AuthService:
    """Service for login and registration.

    Example usage:
        async with async_session_factory() as session:
            service = AuthService(session)
            await service.register(RegisterDto(username="alice", ...))
            token = await service.login(LoginDto(username="alice", password="..."))
    """

    def __init__(
        self,
        session: AsyncSession,
        token_provider: JwtTokenProvider | None = None,
    ) -> None:
        """Initialize service with database session.

        Args:
            session: Async SQLAlchemy session.
            token_provider: Token issuer; defaults to one built from settings.
        """
        self.session = session
        self.users = UserRepository(session)
        self.roles = RoleRepository(session)
        self.token_provider = token_provider or JwtTokenProvider()

    async def login(self, login_dto: LoginDto) -> str:
        """Authenticate a user and issue a token.

        Args:
            login_dto: Username (or email) and password.

        Returns:
            Signed bearer token carrying the username and roles.

        Raises:
            AuthenticationError: If the user is unknown or the password
                does not match.
        """
        user = await self.users.get_by_username_or_email(login_dto.username)
        if user is None or not verify_password(login_dto.password, user.password):
            logger.warning("Login failed", username=login_dto.username)
            raise AuthenticationError("Invalid username or password")

        logger.info("User logged in", username=user.username)
        return self.token_provider.generate_token(user.username, user.role_names)

    async def register(self, register_dto: RegisterDto) -> str:
        """Register a new user with the default role.

        Args:
            register_dto: New account details.

        Returns:
            Status message.

        Raises:
            ProductAPIError: If the username or email is already taken.
        """
        if await self.users.exists_by_username(register_dto.username):
            raise ProductAPIError(400, "Username is already exists !")

        if register_dto.email and await self.users.exists_by_email(register_dto.email):
            raise ProductAPIError(400, "Email is already exists !")

        user = User(
            name=register_dto.name,
            username=register_dto.username,
            email=register_dto.email,
            password=hash_password(register_dto.password),
            roles=[await self.roles.get_or_create(DEFAULT_ROLE)],
        )
        await self.users.save(user)

        logger.info("User registered", username=user.username, user_id=user.id)
        return "User registered successfully"
