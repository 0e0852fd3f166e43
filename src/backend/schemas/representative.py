"""
Representative-related Pydantic schemas.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from schemas.user import UserIdentity


class ConstituencySummary(BaseModel):
    """Constituency reference embedded in a representative."""

    id: str
    name: str
    parish: str


class SocialMediaLinks(BaseModel):
    """Social media handles."""

    facebook: Optional[str] = None
    twitter: Optional[str] = None
    instagram: Optional[str] = None
    youtube: Optional[str] = None
    linkedin: Optional[str] = None

    model_config = {"from_attributes": True}


class Representative(BaseModel):
    """Representative enriched with user identity and constituency summary."""

    id: str
    user_id: str
    title: str
    party: str
    biography: str
    phone_number: Optional[str] = None
    office_address: Optional[str] = None
    website: Optional[str] = None
    constituency_id: str
    user: UserIdentity
    constituency: ConstituencySummary
    social_media: Optional[SocialMediaLinks] = None


class CommitteeRef(BaseModel):
    """Committee name reference."""

    id: str
    name: str


class CommitteeMembership(BaseModel):
    """Role held on a committee."""

    committee: CommitteeRef
    role: str


class CommitteeInfo(CommitteeRef):
    """Committee with its remit."""

    description: Optional[str] = None


class CommitteeSeat(BaseModel):
    """Full committee membership record."""

    committee: CommitteeInfo
    role: str
    start_date: datetime
    end_date: Optional[datetime] = None


class PerformanceMetric(BaseModel):
    """A metric value for one reporting period."""

    id: str
    metric_type: str
    value: float
    period: str = Field(..., description="Reporting period label, e.g. 2024-Q1")
    description: Optional[str] = None

    model_config = {"from_attributes": True}


class RepresentativeDetail(Representative):
    """Representative profile with committees and metric history."""

    committees: list[CommitteeMembership] = []
    performance_metrics: list[PerformanceMetric] = []


class BillSummary(BaseModel):
    """Bill fields shown alongside a vote."""

    id: str
    title: str
    status: str
    category: str
    introduced_date: datetime
    last_updated_date: datetime
    document_url: Optional[str] = None

    model_config = {"from_attributes": True}


class VotingRecord(BaseModel):
    """A recorded vote on a bill."""

    id: str
    vote: str
    date: datetime
    bill: BillSummary


class ParliamentaryActivity(BaseModel):
    """Recorded parliamentary action."""

    id: str
    activity_type: str
    date: datetime
    description: str
    document_url: Optional[str] = None

    model_config = {"from_attributes": True}


class Statement(BaseModel):
    """Public statement."""

    id: str
    topic: str
    content: str
    date: datetime
    source: str
    url: Optional[str] = None

    model_config = {"from_attributes": True}


class RepresentativeListResponse(BaseModel):
    """List of representatives."""

    representatives: list[Representative]


class ProfileSection(str, Enum):
    """Optional sections of a representative profile response."""

    ACTIVITY = "activity"
    VOTING = "voting"
    METRICS = "metrics"
    STATEMENTS = "statements"


class RepresentativeProfileResponse(BaseModel):
    """
    Representative profile plus the sections the caller asked for.

    ``sections`` names exactly which optional lists are present; lists for
    sections not requested are omitted from the payload.
    """

    representative: RepresentativeDetail
    sections: list[ProfileSection] = []
    activity: Optional[list[ParliamentaryActivity]] = None
    voting_records: Optional[list[VotingRecord]] = None
    performance_metrics: Optional[list[PerformanceMetric]] = None
    statements: Optional[list[Statement]] = None


class CommitteeListResponse(BaseModel):
    """Committee seats held by a representative."""

    committees: list[CommitteeSeat]
