"""
Constituency, project and statistics Pydantic schemas.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from schemas.representative import Representative
from schemas.user import UserSummary


class ProjectStatusEnum(str, Enum):
    """Project lifecycle status."""

    PROPOSED = "PROPOSED"
    APPROVED = "APPROVED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class RepresentativeSummary(BaseModel):
    """Sitting representative shown on a constituency."""

    id: str
    title: str
    party: str
    user: UserSummary


class ProjectSummary(BaseModel):
    """Project fields shown on a constituency profile."""

    id: str
    title: str
    description: str
    status: ProjectStatusEnum
    budget: float = Field(..., ge=0)
    start_date: datetime
    end_date: Optional[datetime] = None

    model_config = {"from_attributes": True}


class ProjectUpdate(BaseModel):
    """Progress note on a project."""

    id: str
    date: datetime
    description: str
    image_url: Optional[str] = None

    model_config = {"from_attributes": True}


class Project(ProjectSummary):
    """Project with its update history (newest first)."""

    constituency_id: str
    updates: list[ProjectUpdate] = []


class ConstituencyRef(BaseModel):
    """Constituency reference embedded in a project."""

    id: str
    name: str
    parish: str


class ProjectDetail(Project):
    """Project with its owning constituency."""

    constituency: ConstituencyRef


class Constituency(BaseModel):
    """Constituency with its representative summary."""

    id: str
    name: str
    parish: str
    boundaries: str = Field(..., description="Serialized GeoJSON geometry")
    population: Optional[int] = None
    registered_voters: Optional[int] = None
    demographics: Optional[dict[str, dict[str, float]]] = None
    representative: Optional[RepresentativeSummary] = None


class ConstituencyDetail(Constituency):
    """Constituency profile with its most recently started projects."""

    projects: list[ProjectSummary] = []


class ParishSummary(BaseModel):
    """A parish and how many constituencies it contains."""

    name: str
    constituency_count: int


class PartyRepresentation(BaseModel):
    """Seats held by one party."""

    party: str
    count: int
    percentage: int = Field(..., description="Share of all constituencies, rounded to a whole percent")


class ProjectStatusBreakdown(BaseModel):
    """Projects in one status."""

    status: ProjectStatusEnum
    count: int
    percentage: int = Field(..., description="Share of all projects, rounded to a whole percent")


class ConstituencyStatistics(BaseModel):
    """Aggregate constituency and project statistics."""

    total_constituencies: int
    party_representation: list[PartyRepresentation]
    constituencies_with_projects: int
    total_projects: int
    projects_by_status: list[ProjectStatusBreakdown]


class ConstituencyListResponse(BaseModel):
    constituencies: list[Constituency]


class ParishListResponse(BaseModel):
    parishes: list[ParishSummary]


class StatisticsResponse(BaseModel):
    statistics: ConstituencyStatistics


class ConstituencyProfileResponse(BaseModel):
    """
    Constituency profile plus the sections the caller asked for.

    ``projects`` is the complete project list (the profile itself only embeds
    the most recent few).
    """

    constituency: ConstituencyDetail
    projects: Optional[list[Project]] = None
    representative: Optional[Representative] = None


class ProjectResponse(BaseModel):
    project: ProjectDetail
