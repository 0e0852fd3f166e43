"""
Bill and voting record models.
"""

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, List, Optional
from uuid import uuid4

from sqlalchemy import ForeignKey, String, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from db.base import Base
from db.types import UTCDateTime, utc_now

if TYPE_CHECKING:
    from models.representative import Representative


class BillStatus(str, Enum):
    """Legislative stage of a bill."""

    INTRODUCED = "INTRODUCED"
    IN_COMMITTEE = "IN_COMMITTEE"
    PASSED_HOUSE = "PASSED_HOUSE"
    PASSED_SENATE = "PASSED_SENATE"
    ENACTED = "ENACTED"
    DEFEATED = "DEFEATED"


class VoteChoice(str, Enum):
    """A representative's recorded position on a bill."""

    YES = "YES"
    NO = "NO"
    ABSTAIN = "ABSTAIN"
    ABSENT = "ABSENT"


class Bill(Base):
    """Bill tabled in parliament."""

    __tablename__ = "bills"

    id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )

    title: Mapped[str] = mapped_column(String(300))
    description: Mapped[str] = mapped_column(Text)
    status: Mapped[str] = mapped_column(String(20), default=BillStatus.INTRODUCED.value, index=True)
    introduced_date: Mapped[datetime] = mapped_column(UTCDateTime())
    last_updated_date: Mapped[datetime] = mapped_column(UTCDateTime(), default=utc_now)
    category: Mapped[str] = mapped_column(String(100), index=True)
    document_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    sponsor_id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        ForeignKey("representatives.id", ondelete="RESTRICT"),
        index=True,
    )

    # Relationships
    sponsor: Mapped["Representative"] = relationship("Representative")
    voting_records: Mapped[List["VotingRecord"]] = relationship(
        "VotingRecord", back_populates="bill", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<Bill {self.title} [{self.status}]>"


class VotingRecord(Base):
    """One representative's vote on one bill."""

    __tablename__ = "voting_records"
    __table_args__ = (UniqueConstraint("representative_id", "bill_id", name="uq_voting_records_rep_bill"),)

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
    bill_id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        ForeignKey("bills.id", ondelete="CASCADE"),
        index=True,
    )
    vote: Mapped[str] = mapped_column(String(10))
    date: Mapped[datetime] = mapped_column(UTCDateTime(), index=True)

    representative: Mapped["Representative"] = relationship("Representative", back_populates="voting_records")
    bill: Mapped["Bill"] = relationship("Bill", back_populates="voting_records")
