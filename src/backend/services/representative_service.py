"""
Representative query service.

Composes repository reads into the representative shapes returned by the API.
Every representative carries user identity, constituency summary and social
media links.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from core.config import settings
from core.validation import parse_identifier, require_positive
from repositories.representative_repository import RepresentativeRepository
from schemas.converters import (
    committee_member_to_schema,
    representative_model_to_detail_schema,
    representative_model_to_schema,
    voting_record_model_to_schema,
)
from schemas.representative import (
    CommitteeSeat,
    ParliamentaryActivity,
    PerformanceMetric,
    Representative,
    RepresentativeDetail,
    Statement,
    VotingRecord,
)


class RepresentativeService:
    """Service for browsing representatives and their records."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.repo = RepresentativeRepository(db)

    async def list_all(self) -> list[Representative]:
        """All representatives ordered by name, case-insensitively."""
        reps = await self.repo.list_all()
        return [representative_model_to_schema(rep) for rep in reps]

    async def get_by_id(self, representative_id: str) -> Optional[RepresentativeDetail]:
        """
        One representative with committee memberships and metric history.

        Returns None when no representative has this ID.

        Raises:
            InvalidIdentifierError: If the ID is not a UUID.
        """
        representative_id = parse_identifier(representative_id, "representative_id")
        rep = await self.repo.get_by_id(representative_id)
        if rep is None:
            return None
        metrics = await self.repo.get_performance_metrics(representative_id)
        return representative_model_to_detail_schema(rep, metrics)

    async def get_by_constituency(self, constituency_id: str) -> Optional[Representative]:
        """The representative holding a constituency's seat, if any."""
        constituency_id = parse_identifier(constituency_id, "constituency_id")
        rep = await self.repo.get_by_constituency(constituency_id)
        return representative_model_to_schema(rep) if rep else None

    async def list_by_party(self, party: str) -> list[Representative]:
        reps = await self.repo.list_by_party(party)
        return [representative_model_to_schema(rep) for rep in reps]

    async def search(self, query: str) -> list[Representative]:
        """Match representative name or constituency name, ignoring case."""
        reps = await self.repo.search(query)
        return [representative_model_to_schema(rep) for rep in reps]

    async def get_voting_records(
        self, representative_id: str, limit: int = settings.DEFAULT_HISTORY_LIMIT
    ) -> list[VotingRecord]:
        """Newest voting records with bill summaries."""
        representative_id = parse_identifier(representative_id, "representative_id")
        require_positive(limit, "limit")
        records = await self.repo.get_voting_records(representative_id, limit)
        return [voting_record_model_to_schema(record) for record in records]

    async def get_activity(
        self, representative_id: str, limit: int = settings.DEFAULT_HISTORY_LIMIT
    ) -> list[ParliamentaryActivity]:
        representative_id = parse_identifier(representative_id, "representative_id")
        require_positive(limit, "limit")
        activity = await self.repo.get_activity(representative_id, limit)
        return [ParliamentaryActivity.model_validate(item) for item in activity]

    async def get_performance_metrics(self, representative_id: str) -> list[PerformanceMetric]:
        """Full metric history: newest period first, then metric type order."""
        representative_id = parse_identifier(representative_id, "representative_id")
        metrics = await self.repo.get_performance_metrics(representative_id)
        return [PerformanceMetric.model_validate(metric) for metric in metrics]

    async def get_statements(
        self, representative_id: str, limit: int = settings.DEFAULT_HISTORY_LIMIT
    ) -> list[Statement]:
        representative_id = parse_identifier(representative_id, "representative_id")
        require_positive(limit, "limit")
        statements = await self.repo.get_statements(representative_id, limit)
        return [Statement.model_validate(statement) for statement in statements]

    async def get_committees(self, representative_id: str) -> list[CommitteeSeat]:
        """Committee seats with committee descriptions and service dates."""
        representative_id = parse_identifier(representative_id, "representative_id")
        members = await self.repo.get_committees(representative_id)
        return [committee_member_to_schema(member) for member in members]
