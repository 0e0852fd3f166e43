"""
Petition models.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional
from uuid import uuid4

from sqlalchemy import CheckConstraint, ForeignKey, Integer, String, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from db.base import Base
from db.types import UTCDateTime, utc_now


class PetitionStatus(str, Enum):
    """Petition lifecycle status."""

    ACTIVE = "ACTIVE"  # Accepting signatures
    COMPLETED = "COMPLETED"  # Target reached
    EXPIRED = "EXPIRED"  # Deadline passed before the target was reached


class Petition(Base):
    """Public petition collecting citizen signatures."""

    __tablename__ = "petitions"
    __table_args__ = (CheckConstraint("target_count > 0", name="ck_petitions_target_positive"),)

    id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )

    title: Mapped[str] = mapped_column(String(300))
    description: Mapped[str] = mapped_column(Text)
    target_count: Mapped[int] = mapped_column(Integer)
    status: Mapped[str] = mapped_column(String(20), default=PetitionStatus.ACTIVE.value, index=True)

    creator_id: Mapped[Optional[str]] = mapped_column(
        Uuid(as_uuid=False),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )

    created_at: Mapped[datetime] = mapped_column(UTCDateTime(), default=utc_now, index=True)
    expires_at: Mapped[datetime] = mapped_column(UTCDateTime())

    signatures: Mapped[List["PetitionSignature"]] = relationship(
        "PetitionSignature", back_populates="petition", cascade="all, delete-orphan"
    )

    def is_past_expiry(self, now: datetime | None = None) -> bool:
        """Whether the signing deadline has passed."""
        return (now or utc_now()) >= self.expires_at

    def __repr__(self) -> str:
        return f"<Petition {self.title} [{self.status}]>"


class PetitionSignature(Base):
    """A user's signature on a petition (at most one per user)."""

    __tablename__ = "petition_signatures"
    __table_args__ = (UniqueConstraint("petition_id", "user_id", name="uq_petition_signatures_petition_user"),)

    id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )
    petition_id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        ForeignKey("petitions.id", ondelete="CASCADE"),
        index=True,
    )
    user_id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        ForeignKey("users.id", ondelete="CASCADE"),
        index=True,
    )
    signed_at: Mapped[datetime] = mapped_column(UTCDateTime(), default=utc_now)

    petition: Mapped["Petition"] = relationship("Petition", back_populates="signatures")
