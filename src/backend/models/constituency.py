"""
Constituency and development project models.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, List, Optional
from uuid import uuid4

from sqlalchemy import JSON, CheckConstraint, ForeignKey, Integer, Numeric, String, Text, UniqueConstraint, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from db.base import Base
from db.types import UTCDateTime, utc_now

if TYPE_CHECKING:
    from models.representative import Representative

# Allowed drift when a demographic category's fractions are summed
DEMOGRAPHIC_SUM_TOLERANCE = 0.01


class ProjectStatus(str, Enum):
    """Project lifecycle status, in lifecycle order."""

    PROPOSED = "PROPOSED"
    APPROVED = "APPROVED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class Constituency(Base):
    """
    Electoral district.

    Boundaries are stored as serialized GeoJSON. Demographics are a nested
    map of category -> bucket -> fraction, e.g.
    {"age": {"18-29": 0.25, ...}, "gender": {"male": 0.48, "female": 0.52}}.
    """

    __tablename__ = "constituencies"
    __table_args__ = (UniqueConstraint("parish", "name", name="uq_constituencies_parish_name"),)

    id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )

    name: Mapped[str] = mapped_column(String(200), index=True)
    parish: Mapped[str] = mapped_column(String(100), index=True)
    boundaries: Mapped[str] = mapped_column(Text)
    population: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    registered_voters: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    demographics: Mapped[Optional[dict]] = mapped_column(
        JSON().with_variant(JSONB, "postgresql"), nullable=True
    )

    created_at: Mapped[datetime] = mapped_column(UTCDateTime(), default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(UTCDateTime(), default=utc_now, onupdate=utc_now)

    # Relationships
    representative: Mapped[Optional["Representative"]] = relationship(
        "Representative", back_populates="constituency", uselist=False
    )
    projects: Mapped[List["Project"]] = relationship(
        "Project", back_populates="constituency", cascade="all, delete-orphan"
    )

    @validates("demographics")
    def validate_demographics(self, key: str, value: Optional[dict]) -> Optional[dict]:
        if value is not None:
            check_demographics(value)
        return value

    def __repr__(self) -> str:
        return f"<Constituency {self.name} ({self.parish})>"


class Project(Base):
    """Development project funded within a constituency."""

    __tablename__ = "projects"
    __table_args__ = (CheckConstraint("budget >= 0", name="ck_projects_budget_non_negative"),)

    id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )

    title: Mapped[str] = mapped_column(String(300))
    description: Mapped[str] = mapped_column(Text)
    status: Mapped[str] = mapped_column(String(20), default=ProjectStatus.PROPOSED.value, index=True)
    budget: Mapped[Decimal] = mapped_column(Numeric(14, 2), default=Decimal("0"))
    start_date: Mapped[datetime] = mapped_column(UTCDateTime(), index=True)
    end_date: Mapped[Optional[datetime]] = mapped_column(UTCDateTime(), nullable=True)

    constituency_id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        ForeignKey("constituencies.id", ondelete="CASCADE"),
        index=True,
    )

    created_at: Mapped[datetime] = mapped_column(UTCDateTime(), default=utc_now)

    # Relationships
    constituency: Mapped["Constituency"] = relationship("Constituency", back_populates="projects")
    updates: Mapped[List["ProjectUpdate"]] = relationship(
        "ProjectUpdate",
        back_populates="project",
        cascade="all, delete-orphan",
        order_by="ProjectUpdate.date.desc()",
    )

    @validates("budget")
    def validate_budget(self, key: str, value: Decimal | int | float) -> Decimal | int | float:
        if value is not None and value < 0:
            raise ValueError("Project budget must not be negative")
        return value

    def __repr__(self) -> str:
        return f"<Project {self.title} [{self.status}]>"


class ProjectUpdate(Base):
    """Append-only progress note on a project."""

    __tablename__ = "project_updates"

    id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )

    project_id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        ForeignKey("projects.id", ondelete="CASCADE"),
        index=True,
    )
    date: Mapped[datetime] = mapped_column(UTCDateTime(), default=utc_now, index=True)
    description: Mapped[str] = mapped_column(Text)
    image_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    project: Mapped["Project"] = relationship("Project", back_populates="updates")


def check_demographics(demographics: dict) -> None:
    """
    Validate a demographic breakdown.

    Each category must map bucket labels to fractions in [0, 1] that sum to
    1.0 within DEMOGRAPHIC_SUM_TOLERANCE.

    Raises:
        ValueError: If the structure or the sums are invalid.
    """
    for category, buckets in demographics.items():
        if not isinstance(buckets, dict) or not buckets:
            raise ValueError(f"Demographic category {category!r} must map buckets to fractions")
        for bucket, fraction in buckets.items():
            if not isinstance(fraction, (int, float)) or not 0 <= fraction <= 1:
                raise ValueError(f"Demographic fraction {category}.{bucket} must be between 0 and 1")
        total = sum(buckets.values())
        if abs(total - 1.0) > DEMOGRAPHIC_SUM_TOLERANCE:
            raise ValueError(f"Demographic category {category!r} sums to {total:.3f}, expected 1.0")
