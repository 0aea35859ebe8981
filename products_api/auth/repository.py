"""User and role repositories."""

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from products_api.auth.models import Role, User


class UserRepository:
    """Repository for User database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def save(self, user: User) -> User:
        """Save a user to database.

        Args:
            user: User to save.

        Returns:
            Saved user with its generated id.
        """
        self.session.add(user)
        await self.session.flush()
        return user

    async def get_by_username(self, username: str) -> User | None:
        """Get user by username.

        Args:
            username: Exact username.

        Returns:
            User if found, None otherwise.
        """
        result = await self.session.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def get_by_username_or_email(self, username_or_email: str) -> User | None:
        """Get user by either username or email address.

        Args:
            username_or_email: Login name or email.

        Returns:
            User if found, None otherwise.
        """
        result = await self.session.execute(
            select(User).where(
                or_(User.username == username_or_email, User.email == username_or_email)
            )
        )
        return result.scalars().first()

    async def exists_by_username(self, username: str) -> bool:
        """Check whether a username is taken.

        Args:
            username: Username to check.

        Returns:
            True if a user has this username.
        """
        result = await self.session.execute(
            select(func.count(User.id)).where(User.username == username)
        )
        return result.scalar_one() > 0

    async def exists_by_email(self, email: str) -> bool:
        """Check whether an email address is taken.

        Args:
            email: Email to check.

        Returns:
            True if a user has this email.
        """
        result = await self.session.execute(
            select(func.count(User.id)).where(User.email == email)
        )
        return result.scalar_one() > 0


class RoleRepository:
    """Repository for Role database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def get_by_name(self, name: str) -> Role | None:
        """Get role by name.

        Args:
            name: Role name, e.g. "ROLE_USER".

        Returns:
            Role if found, None otherwise.
        """
        result = await self.session.execute(select(Role).where(Role.name == name))
        return result.scalar_one_or_none()

    async def get_or_create(self, name: str) -> Role:
        """Get a role by name, inserting it first if missing.

        Args:
            name: Role name.

        Returns:
            Existing or newly created role.
        """
        role = await self.get_by_name(name)
        if role is None:
            role = Role(name=name)
            self.session.add(role)
            await self.session.flush()
        return role
