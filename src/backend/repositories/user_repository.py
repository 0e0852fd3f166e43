"""
User repository for database operations.
"""

from typing import Optional
from uuid import uuid4

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from models.user import User, UserRole


class UserRepository:
    """Repository for user database operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, user_id: str) -> Optional[User]:
        """Get a user by ID."""
        result = await self.db.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by email."""
        result = await self.db.execute(select(User).where(User.email == email.lower()))
        return result.scalar_one_or_none()

    async def email_exists(self, email: str) -> bool:
        """Check if email is already registered."""
        result = await self.db.execute(select(func.count(User.id)).where(User.email == email.lower()))
        count = result.scalar() or 0
        return count > 0

    async def create(
        self,
        name: str,
        email: str,
        role: UserRole = UserRole.CITIZEN,
        image: Optional[str] = None,
        constituency_id: Optional[str] = None,
    ) -> User:
        """Create a new user. The role is fixed from here on."""
        user = User(
            id=str(uuid4()),
            name=name,
            email=email.lower(),
            role=role.value,
            image=image,
            constituency_id=constituency_id,
        )

        self.db.add(user)
        await self.db.flush()
        await self.db.refresh(user)

        return user
