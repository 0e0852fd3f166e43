"""
Schema converter functions.

Centralized helpers converting SQLAlchemy models to Pydantic schemas. Each
converter documents which relationships must already be loaded; the
repositories load exactly those, so no lazy load is ever triggered under the
async session.
"""

from typing import TYPE_CHECKING, Iterable, Optional

from schemas.constituency import (
    Constituency,
    ConstituencyDetail,
    ConstituencyRef,
    Project,
    ProjectDetail,
    ProjectSummary,
    ProjectUpdate,
    RepresentativeSummary,
)
from schemas.message import Message
from schemas.petition import Petition
from schemas.representative import (
    BillSummary,
    CommitteeInfo,
    CommitteeMembership,
    CommitteeRef,
    CommitteeSeat,
    ConstituencySummary,
    PerformanceMetric,
    Representative,
    RepresentativeDetail,
    SocialMediaLinks,
    VotingRecord,
)
from schemas.user import UserIdentity, UserSummary

if TYPE_CHECKING:
    from models.bill import VotingRecord as VotingRecordModel
    from models.constituency import Constituency as ConstituencyModel
    from models.constituency import Project as ProjectModel
    from models.message import Message as MessageModel
    from models.petition import Petition as PetitionModel
    from models.representative import CommitteeMember as CommitteeMemberModel
    from models.representative import PerformanceMetric as PerformanceMetricModel
    from models.representative import Representative as RepresentativeModel
    from models.user import User as UserModel


def user_identity(user: "UserModel") -> UserIdentity:
    """Name, email and image of a user."""
    return UserIdentity(name=user.name, email=user.email, image=user.image)


# =============================================================================
# Representatives
# =============================================================================


def representative_model_to_schema(rep: "RepresentativeModel") -> Representative:
    """
    Convert a Representative model to the list/profile schema.

    Requires ``user``, ``constituency`` and ``social_media`` loaded.
    """
    return Representative(
        id=str(rep.id),
        user_id=str(rep.user_id),
        title=rep.title,
        party=rep.party,
        biography=rep.biography,
        phone_number=rep.phone_number,
        office_address=rep.office_address,
        website=rep.website,
        constituency_id=str(rep.constituency_id),
        user=user_identity(rep.user),
        constituency=ConstituencySummary(
            id=str(rep.constituency.id),
            name=rep.constituency.name,
            parish=rep.constituency.parish,
        ),
        social_media=SocialMediaLinks.model_validate(rep.social_media) if rep.social_media else None,
    )


def representative_model_to_detail_schema(
    rep: "RepresentativeModel",
    metrics: Iterable["PerformanceMetricModel"],
) -> RepresentativeDetail:
    """
    Convert a Representative model to the detailed profile schema.

    Requires everything ``representative_model_to_schema`` needs plus
    ``committee_members.committee``. ``metrics`` must already be ordered.
    """
    base = representative_model_to_schema(rep)
    return RepresentativeDetail(
        **base.model_dump(),
        committees=[
            CommitteeMembership(
                committee=CommitteeRef(id=str(member.committee.id), name=member.committee.name),
                role=member.role,
            )
            for member in rep.committee_members
        ],
        performance_metrics=[PerformanceMetric.model_validate(m) for m in metrics],
    )


def committee_member_to_schema(member: "CommitteeMemberModel") -> CommitteeSeat:
    """Convert a CommitteeMember (with ``committee`` loaded) to a seat schema."""
    return CommitteeSeat(
        committee=CommitteeInfo(
            id=str(member.committee.id),
            name=member.committee.name,
            description=member.committee.description,
        ),
        role=member.role,
        start_date=member.start_date,
        end_date=member.end_date,
    )


def voting_record_model_to_schema(record: "VotingRecordModel") -> VotingRecord:
    """Convert a VotingRecord (with ``bill`` loaded) to its schema."""
    return VotingRecord(
        id=str(record.id),
        vote=record.vote,
        date=record.date,
        bill=BillSummary.model_validate(record.bill),
    )


def representative_summary(rep: Optional["RepresentativeModel"]) -> Optional[RepresentativeSummary]:
    """Short representative block embedded in a constituency (requires ``user``)."""
    if rep is None:
        return None
    return RepresentativeSummary(
        id=str(rep.id),
        title=rep.title,
        party=rep.party,
        user=UserSummary(name=rep.user.name, image=rep.user.image),
    )


# =============================================================================
# Constituencies and projects
# =============================================================================


def constituency_model_to_schema(constituency: "ConstituencyModel") -> Constituency:
    """Convert a Constituency model (with ``representative.user`` loaded)."""
    return Constituency(
        id=str(constituency.id),
        name=constituency.name,
        parish=constituency.parish,
        boundaries=constituency.boundaries,
        population=constituency.population,
        registered_voters=constituency.registered_voters,
        demographics=constituency.demographics,
        representative=representative_summary(constituency.representative),
    )


def constituency_model_to_detail_schema(
    constituency: "ConstituencyModel",
    recent_projects: Iterable["ProjectModel"],
) -> ConstituencyDetail:
    """Constituency profile with its recent projects embedded."""
    base = constituency_model_to_schema(constituency)
    return ConstituencyDetail(
        **base.model_dump(),
        projects=[ProjectSummary.model_validate(p) for p in recent_projects],
    )


def project_model_to_schema(project: "ProjectModel") -> Project:
    """Convert a Project model (with ``updates`` loaded, newest first)."""
    return Project(
        id=str(project.id),
        title=project.title,
        description=project.description,
        status=project.status,
        budget=project.budget,
        start_date=project.start_date,
        end_date=project.end_date,
        constituency_id=str(project.constituency_id),
        updates=[ProjectUpdate.model_validate(u) for u in project.updates],
    )


def project_model_to_detail_schema(project: "ProjectModel") -> ProjectDetail:
    """Convert a Project model (with ``updates`` and ``constituency`` loaded)."""
    base = project_model_to_schema(project)
    return ProjectDetail(
        **base.model_dump(),
        constituency=ConstituencyRef(
            id=str(project.constituency.id),
            name=project.constituency.name,
            parish=project.constituency.parish,
        ),
    )


# =============================================================================
# Messages and petitions
# =============================================================================


def message_model_to_schema(message: "MessageModel") -> Message:
    """Convert a Message model (with ``sender`` and ``recipient`` loaded)."""
    return Message(
        id=str(message.id),
        subject=message.subject,
        content=message.content,
        sender_id=str(message.sender_id),
        sender=user_identity(message.sender),
        recipient_id=str(message.recipient_id),
        recipient=user_identity(message.recipient),
        read=message.read,
        created_at=message.created_at,
        updated_at=message.updated_at,
    )


def petition_model_to_schema(petition: "PetitionModel", signature_count: int) -> Petition:
    """Convert a Petition model plus its live signature count."""
    return Petition(
        id=str(petition.id),
        title=petition.title,
        description=petition.description,
        target_count=petition.target_count,
        signature_count=signature_count,
        status=petition.status,
        creator_id=str(petition.creator_id) if petition.creator_id else None,
        created_at=petition.created_at,
        expires_at=petition.expires_at,
    )
