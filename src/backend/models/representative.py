"""
Representative profile models.

A Representative links one User to the one Constituency they hold, and owns
the public record shown on their profile: committee seats, performance
metrics, statements and parliamentary activity.
"""

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, List, Optional
from uuid import uuid4

from sqlalchemy import Float, ForeignKey, String, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from db.base import Base
from db.types import UTCDateTime, utc_now

if TYPE_CHECKING:
    from models.bill import VotingRecord
    from models.constituency import Constituency
    from models.user import User


class MetricType(str, Enum):
    """Periodic performance measures."""

    ATTENDANCE_RATE = "ATTENDANCE_RATE"
    BILLS_SPONSORED = "BILLS_SPONSORED"
    QUESTIONS_ASKED = "QUESTIONS_ASKED"
    CONSTITUENCY_VISITS = "CONSTITUENCY_VISITS"
    RESPONSE_RATE = "RESPONSE_RATE"


class ActivityType(str, Enum):
    """Kinds of recorded parliamentary activity."""

    SPEECH = "SPEECH"
    MOTION = "MOTION"
    QUESTION = "QUESTION"
    COMMITTEE_WORK = "COMMITTEE_WORK"
    BILL_SPONSORSHIP = "BILL_SPONSORSHIP"


class Representative(Base):
    """Elected official holding exactly one constituency."""

    __tablename__ = "representatives"

    id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )

    user_id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
    )
    # unique: a constituency has at most one sitting representative
    constituency_id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        ForeignKey("constituencies.id", ondelete="RESTRICT"),
        unique=True,
    )

    title: Mapped[str] = mapped_column(String(100))
    party: Mapped[str] = mapped_column(String(20), index=True)
    biography: Mapped[str] = mapped_column(Text, default="")
    phone_number: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    office_address: Mapped[Optional[str]] = mapped_column(String(300), nullable=True)
    website: Mapped[Optional[str]] = mapped_column(String(300), nullable=True)

    created_at: Mapped[datetime] = mapped_column(UTCDateTime(), default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(UTCDateTime(), default=utc_now, onupdate=utc_now)

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="representative")
    constituency: Mapped["Constituency"] = relationship("Constituency", back_populates="representative")
    social_media: Mapped[Optional["SocialMedia"]] = relationship(
        "SocialMedia", back_populates="representative", uselist=False, cascade="all, delete-orphan"
    )
    committee_members: Mapped[List["CommitteeMember"]] = relationship(
        "CommitteeMember", back_populates="representative", cascade="all, delete-orphan"
    )
    performance_metrics: Mapped[List["PerformanceMetric"]] = relationship(
        "PerformanceMetric", back_populates="representative", cascade="all, delete-orphan"
    )
    statements: Mapped[List["Statement"]] = relationship(
        "Statement", back_populates="representative", cascade="all, delete-orphan"
    )
    activities: Mapped[List["ParliamentaryActivity"]] = relationship(
        "ParliamentaryActivity", back_populates="representative", cascade="all, delete-orphan"
    )
    voting_records: Mapped[List["VotingRecord"]] = relationship(
        "VotingRecord", back_populates="representative", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<Representative {self.title} ({self.party})>"


class SocialMedia(Base):
    """Social media handles for a representative."""

    __tablename__ = "social_media"

    id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )
    representative_id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        ForeignKey("representatives.id", ondelete="CASCADE"),
        unique=True,
    )

    facebook: Mapped[Optional[str]] = mapped_column(String(300), nullable=True)
    twitter: Mapped[Optional[str]] = mapped_column(String(300), nullable=True)
    instagram: Mapped[Optional[str]] = mapped_column(String(300), nullable=True)
    youtube: Mapped[Optional[str]] = mapped_column(String(300), nullable=True)
    linkedin: Mapped[Optional[str]] = mapped_column(String(300), nullable=True)

    representative: Mapped["Representative"] = relationship("Representative", back_populates="social_media")


class Committee(Base):
    """Parliamentary committee."""

    __tablename__ = "committees"

    id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )
    name: Mapped[str] = mapped_column(String(200), unique=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    members: Mapped[List["CommitteeMember"]] = relationship(
        "CommitteeMember", back_populates="committee", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<Committee {self.name}>"


class CommitteeMember(Base):
    """Seat held by a representative on a committee."""

    __tablename__ = "committee_members"
    __table_args__ = (
        UniqueConstraint("representative_id", "committee_id", name="uq_committee_members_rep_committee"),
    )

    id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )
    representative_id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        ForeignKey("representatives.id", ondelete="CASCADE"),
        index=True,
    )
    committee_id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        ForeignKey("committees.id", ondelete="CASCADE"),
        index=True,
    )
    role: Mapped[str] = mapped_column(String(50), default="Member")  # Chair, Vice Chair, Member
    start_date: Mapped[datetime] = mapped_column(UTCDateTime(), default=utc_now)
    end_date: Mapped[Optional[datetime]] = mapped_column(UTCDateTime(), nullable=True)

    representative: Mapped["Representative"] = relationship("Representative", back_populates="committee_members")
    committee: Mapped["Committee"] = relationship("Committee", back_populates="members")


class PerformanceMetric(Base):
    """One metric value for one reporting period (e.g. "2024-Q1")."""

    __tablename__ = "performance_metrics"

    id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )
    representative_id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        ForeignKey("representatives.id", ondelete="CASCADE"),
        index=True,
    )
    metric_type: Mapped[str] = mapped_column(String(30))
    value: Mapped[float] = mapped_column(Float)
    period: Mapped[str] = mapped_column(String(20), index=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    representative: Mapped["Representative"] = relationship("Representative", back_populates="performance_metrics")


class Statement(Base):
    """Public statement attributed to a representative."""

    __tablename__ = "statements"

    id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )
    representative_id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        ForeignKey("representatives.id", ondelete="CASCADE"),
        index=True,
    )
    topic: Mapped[str] = mapped_column(String(200))
    content: Mapped[str] = mapped_column(Text)
    date: Mapped[datetime] = mapped_column(UTCDateTime(), index=True)
    source: Mapped[str] = mapped_column(String(200))
    url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    representative: Mapped["Representative"] = relationship("Representative", back_populates="statements")


class ParliamentaryActivity(Base):
    """Speech, motion, question or other recorded parliamentary action."""

    __tablename__ = "parliamentary_activities"

    id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )
    representative_id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        ForeignKey("representatives.id", ondelete="CASCADE"),
        index=True,
    )
    activity_type: Mapped[str] = mapped_column(String(30))
    date: Mapped[datetime] = mapped_column(UTCDateTime(), index=True)
    description: Mapped[str] = mapped_column(Text)
    document_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    representative: Mapped["Representative"] = relationship("Representative", back_populates="activities")
