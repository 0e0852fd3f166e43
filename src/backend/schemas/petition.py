"""
Petition-related Pydantic schemas.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class PetitionStatusEnum(str, Enum):
    """Petition lifecycle status."""

    ACTIVE = "ACTIVE"
    COMPLETED = "COMPLETED"
    EXPIRED = "EXPIRED"


class Petition(BaseModel):
    """Petition with its live signature count."""

    id: str
    title: str
    description: str
    target_count: int
    signature_count: int = 0
    status: PetitionStatusEnum
    creator_id: Optional[str] = None
    created_at: datetime
    expires_at: datetime


class PetitionListResponse(BaseModel):
    petitions: list[Petition]


class PetitionResponse(BaseModel):
    petition: Petition
