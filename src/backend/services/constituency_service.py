"""
Constituency query service.

Constituency browsing, project tracking and aggregate statistics. Statistics
are computed from live counts on every call.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from core.config import settings
from core.validation import calculate_percentage, parse_identifier
from repositories.constituency_repository import ConstituencyRepository
from schemas.constituency import (
    Constituency,
    ConstituencyDetail,
    ConstituencyStatistics,
    ParishSummary,
    PartyRepresentation,
    Project,
    ProjectDetail,
    ProjectStatusBreakdown,
)
from schemas.converters import (
    constituency_model_to_detail_schema,
    constituency_model_to_schema,
    project_model_to_detail_schema,
    project_model_to_schema,
)


class ConstituencyService:
    """Service for constituencies, their projects and statistics."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.repo = ConstituencyRepository(db)

    async def list_all(self) -> list[Constituency]:
        constituencies = await self.repo.list_all()
        return [constituency_model_to_schema(c) for c in constituencies]

    async def get_by_id(self, constituency_id: str) -> Optional[ConstituencyDetail]:
        """
        One constituency with its most recently started projects.

        Returns None when absent.

        Raises:
            InvalidIdentifierError: If the ID is not a UUID.
        """
        constituency_id = parse_identifier(constituency_id, "constituency_id")
        constituency = await self.repo.get_by_id(constituency_id)
        if constituency is None:
            return None
        recent = await self.repo.get_recent_projects(constituency_id, settings.RECENT_PROJECTS_LIMIT)
        return constituency_model_to_detail_schema(constituency, recent)

    async def list_by_parish(self, parish: str) -> list[Constituency]:
        constituencies = await self.repo.list_by_parish(parish)
        return [constituency_model_to_schema(c) for c in constituencies]

    async def search(self, query: str) -> list[Constituency]:
        """Match constituency name, parish or representative name, ignoring case."""
        constituencies = await self.repo.search(query)
        return [constituency_model_to_schema(c) for c in constituencies]

    async def get_projects(self, constituency_id: str) -> list[Project]:
        """Every project with updates, by status order then newest start."""
        constituency_id = parse_identifier(constituency_id, "constituency_id")
        projects = await self.repo.get_projects(constituency_id)
        return [project_model_to_schema(p) for p in projects]

    async def get_project_by_id(self, project_id: str) -> Optional[ProjectDetail]:
        project_id = parse_identifier(project_id, "project_id")
        project = await self.repo.get_project_by_id(project_id)
        return project_model_to_detail_schema(project) if project else None

    async def list_parishes(self) -> list[ParishSummary]:
        """Distinct parishes with constituency counts, alphabetical."""
        rows = await self.repo.count_by_parish()
        return [ParishSummary(name=parish, constituency_count=count) for parish, count in rows]

    async def get_statistics(self) -> ConstituencyStatistics:
        """
        Aggregate seat and project statistics.

        Percentages are whole numbers rounded half up; a zero denominator
        yields 0.
        """
        total_constituencies = await self.repo.count_constituencies()
        party_rows = await self.repo.count_by_party()
        constituencies_with_projects = await self.repo.count_constituencies_with_projects()
        total_projects = await self.repo.count_projects()
        status_rows = await self.repo.count_projects_by_status()

        return ConstituencyStatistics(
            total_constituencies=total_constituencies,
            party_representation=[
                PartyRepresentation(
                    party=party,
                    count=count,
                    percentage=calculate_percentage(count, total_constituencies),
                )
                for party, count in party_rows
            ],
            constituencies_with_projects=constituencies_with_projects,
            total_projects=total_projects,
            projects_by_status=[
                ProjectStatusBreakdown(
                    status=status,
                    count=count,
                    percentage=calculate_percentage(count, total_projects),
                )
                for status, count in status_rows
            ],
        )
