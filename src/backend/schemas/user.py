"""
User-related Pydantic schemas.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, EmailStr


class UserRoleEnum(str, Enum):
    """Account role."""

    CITIZEN = "CITIZEN"
    REPRESENTATIVE = "REPRESENTATIVE"
    STAFF = "STAFF"
    ADMIN = "ADMIN"


class UserSummary(BaseModel):
    """Name and picture, as shown next to a representative."""

    name: Optional[str] = None
    image: Optional[str] = None

    model_config = {"from_attributes": True}


class UserIdentity(UserSummary):
    """Public identity of a user, as shown on profiles and messages."""

    email: Optional[str] = None


class UserInDB(BaseModel):
    """The authenticated caller (internal use)."""

    id: str
    name: str
    email: EmailStr
    role: UserRoleEnum
    image: Optional[str] = None
    constituency_id: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
