"""
User model.

Every person known to the platform: citizens, representatives, their staff
and administrators. Credentials live with the external identity provider.
"""

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Optional
from uuid import uuid4

from sqlalchemy import ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from db.base import Base
from db.types import UTCDateTime, utc_now

if TYPE_CHECKING:
    from models.constituency import Constituency
    from models.representative import Representative


class UserRole(str, Enum):
    """Account role, fixed at registration."""

    CITIZEN = "CITIZEN"
    REPRESENTATIVE = "REPRESENTATIVE"
    STAFF = "STAFF"
    ADMIN = "ADMIN"


# Roles allowed to receive constituent messages
MESSAGE_RECIPIENT_ROLES = frozenset({UserRole.REPRESENTATIVE.value, UserRole.STAFF.value})


class User(Base):
    """User account model."""

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )

    name: Mapped[str] = mapped_column(String(200), index=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    role: Mapped[str] = mapped_column(String(20), default=UserRole.CITIZEN.value, index=True)
    image: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    # Home constituency (citizens), not the seat a representative holds
    constituency_id: Mapped[Optional[str]] = mapped_column(
        Uuid(as_uuid=False),
        ForeignKey("constituencies.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    created_at: Mapped[datetime] = mapped_column(UTCDateTime(), default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(UTCDateTime(), default=utc_now, onupdate=utc_now)

    # Relationships
    constituency: Mapped[Optional["Constituency"]] = relationship(
        "Constituency", foreign_keys=[constituency_id]
    )
    representative: Mapped[Optional["Representative"]] = relationship(
        "Representative", back_populates="user", uselist=False
    )

    @property
    def can_receive_messages(self) -> bool:
        """Whether constituents may address messages to this user."""
        return self.role in MESSAGE_RECIPIENT_ROLES

    def __repr__(self) -> str:
        return f"<User {self.email} ({self.role})>"
