"""
Constituency and project repository for database operations.
"""

from typing import Optional

from sqlalchemy import distinct, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload, selectinload
from sqlalchemy.sql import Select

from db.types import enum_order
from models.constituency import Constituency, Project, ProjectStatus
from models.representative import Representative
from models.user import User


class ConstituencyRepository:
    """Repository for constituency and project database operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    def _base_query(self) -> Select:
        """Constituencies with their representative's user loaded, ordered by name."""
        return (
            select(Constituency)
            .options(selectinload(Constituency.representative).joinedload(Representative.user))
            .order_by(Constituency.name.asc())
        )

    async def list_all(self) -> list[Constituency]:
        """Get all constituencies."""
        result = await self.db.execute(self._base_query())
        return list(result.scalars().all())

    async def get_by_id(self, constituency_id: str) -> Optional[Constituency]:
        """Get a constituency by ID."""
        result = await self.db.execute(self._base_query().where(Constituency.id == constituency_id))
        return result.scalar_one_or_none()

    async def list_by_parish(self, parish: str) -> list[Constituency]:
        """Get constituencies in one parish (exact match)."""
        result = await self.db.execute(self._base_query().where(Constituency.parish == parish))
        return list(result.scalars().all())

    async def search(self, query: str) -> list[Constituency]:
        """Case-insensitive literal substring search on name, parish or representative name."""
        result = await self.db.execute(
            self._base_query()
            .outerjoin(Representative, Representative.constituency_id == Constituency.id)
            .outerjoin(User, User.id == Representative.user_id)
            .where(
                or_(
                    Constituency.name.icontains(query, autoescape=True),
                    Constituency.parish.icontains(query, autoescape=True),
                    User.name.icontains(query, autoescape=True),
                )
            )
        )
        return list(result.scalars().all())

    async def get_recent_projects(self, constituency_id: str, limit: int) -> list[Project]:
        """Get the most recently started projects."""
        result = await self.db.execute(
            select(Project)
            .where(Project.constituency_id == constituency_id)
            .order_by(Project.start_date.desc())
            .limit(limit)
        )
        return list(result.scalars().all())

    async def get_projects(self, constituency_id: str) -> list[Project]:
        """Get every project with updates, by status order then newest start."""
        result = await self.db.execute(
            select(Project)
            .options(selectinload(Project.updates))
            .where(Project.constituency_id == constituency_id)
            .order_by(
                enum_order(Project.status, ProjectStatus).asc(),
                Project.start_date.desc(),
            )
        )
        return list(result.scalars().all())

    async def get_project_by_id(self, project_id: str) -> Optional[Project]:
        """Get a project with its updates and constituency."""
        result = await self.db.execute(
            select(Project)
            .options(selectinload(Project.updates), joinedload(Project.constituency))
            .where(Project.id == project_id)
        )
        return result.scalar_one_or_none()

    async def count_by_parish(self) -> list[tuple[str, int]]:
        """Get (parish, constituency count) pairs, alphabetical."""
        result = await self.db.execute(
            select(Constituency.parish, func.count(Constituency.id))
            .group_by(Constituency.parish)
            .order_by(Constituency.parish.asc())
        )
        return [(parish, count) for parish, count in result.all()]

    # =========================================================================
    # Statistics
    # =========================================================================

    async def count_constituencies(self) -> int:
        result = await self.db.execute(select(func.count(Constituency.id)))
        return result.scalar() or 0

    async def count_by_party(self) -> list[tuple[str, int]]:
        """Get (party, seats) pairs ordered by party."""
        result = await self.db.execute(
            select(Representative.party, func.count(Representative.id))
            .group_by(Representative.party)
            .order_by(Representative.party.asc())
        )
        return [(party, count) for party, count in result.all()]

    async def count_constituencies_with_projects(self) -> int:
        result = await self.db.execute(select(func.count(distinct(Project.constituency_id))))
        return result.scalar() or 0

    async def count_projects(self) -> int:
        result = await self.db.execute(select(func.count(Project.id)))
        return result.scalar() or 0

    async def count_projects_by_status(self) -> list[tuple[str, int]]:
        """Get (status, project count) pairs in lifecycle order."""
        order = enum_order(Project.status, ProjectStatus)
        result = await self.db.execute(
            select(Project.status, func.count(Project.id))
            .group_by(Project.status)
            .order_by(order.asc())
        )
        return [(status, count) for status, count in result.all()]
