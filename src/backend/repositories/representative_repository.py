"""
Representative repository for database operations.
"""

from typing import Optional

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import contains_eager, joinedload, selectinload
from sqlalchemy.sql import Select

from db.types import enum_order
from models.bill import VotingRecord
from models.constituency import Constituency
from models.representative import (
    CommitteeMember,
    MetricType,
    ParliamentaryActivity,
    PerformanceMetric,
    Representative,
    Statement,
)
from models.user import User


class RepresentativeRepository:
    """Repository for representative database operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    def _base_query(self) -> Select:
        """Representatives with user, constituency and social media, ordered by name."""
        return (
            select(Representative)
            .join(Representative.user)
            .join(Representative.constituency)
            .options(
                contains_eager(Representative.user),
                contains_eager(Representative.constituency),
                selectinload(Representative.social_media),
            )
            .order_by(func.lower(User.name).asc())
        )

    async def list_all(self) -> list[Representative]:
        """Get all representatives."""
        result = await self.db.execute(self._base_query())
        return list(result.scalars().all())

    async def get_by_id(self, representative_id: str) -> Optional[Representative]:
        """Get a representative with committee memberships loaded."""
        result = await self.db.execute(
            self._base_query()
            .options(selectinload(Representative.committee_members).joinedload(CommitteeMember.committee))
            .where(Representative.id == representative_id)
        )
        return result.scalar_one_or_none()

    async def get_by_constituency(self, constituency_id: str) -> Optional[Representative]:
        """Get the representative holding a constituency's seat."""
        result = await self.db.execute(self._base_query().where(Representative.constituency_id == constituency_id))
        return result.scalar_one_or_none()

    async def list_by_party(self, party: str) -> list[Representative]:
        """Get representatives of one party (exact match)."""
        result = await self.db.execute(self._base_query().where(Representative.party == party))
        return list(result.scalars().all())

    async def search(self, query: str) -> list[Representative]:
        """Case-insensitive literal substring search on user name or constituency name."""
        result = await self.db.execute(
            self._base_query().where(
                or_(
                    User.name.icontains(query, autoescape=True),
                    Constituency.name.icontains(query, autoescape=True),
                )
            )
        )
        return list(result.scalars().all())

    async def get_voting_records(self, representative_id: str, limit: int) -> list[VotingRecord]:
        """Get the newest voting records with their bills."""
        result = await self.db.execute(
            select(VotingRecord)
            .options(joinedload(VotingRecord.bill))
            .where(VotingRecord.representative_id == representative_id)
            .order_by(VotingRecord.date.desc())
            .limit(limit)
        )
        return list(result.scalars().all())

    async def get_activity(self, representative_id: str, limit: int) -> list[ParliamentaryActivity]:
        """Get the newest parliamentary activity."""
        result = await self.db.execute(
            select(ParliamentaryActivity)
            .where(ParliamentaryActivity.representative_id == representative_id)
            .order_by(ParliamentaryActivity.date.desc())
            .limit(limit)
        )
        return list(result.scalars().all())

    async def get_performance_metrics(self, representative_id: str) -> list[PerformanceMetric]:
        """Get every metric, newest period first, then by metric type order."""
        result = await self.db.execute(
            select(PerformanceMetric)
            .where(PerformanceMetric.representative_id == representative_id)
            .order_by(
                PerformanceMetric.period.desc(),
                enum_order(PerformanceMetric.metric_type, MetricType).asc(),
            )
        )
        return list(result.scalars().all())

    async def get_statements(self, representative_id: str, limit: int) -> list[Statement]:
        """Get the newest public statements."""
        result = await self.db.execute(
            select(Statement)
            .where(Statement.representative_id == representative_id)
            .order_by(Statement.date.desc())
            .limit(limit)
        )
        return list(result.scalars().all())

    async def get_committees(self, representative_id: str) -> list[CommitteeMember]:
        """Get committee memberships, longest-serving first."""
        result = await self.db.execute(
            select(CommitteeMember)
            .options(joinedload(CommitteeMember.committee))
            .where(CommitteeMember.representative_id == representative_id)
            .order_by(CommitteeMember.start_date.asc())
        )
        return list(result.scalars().all())
