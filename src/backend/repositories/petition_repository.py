"""
Petition repository for database operations.
"""

from typing import Optional
from uuid import uuid4

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from models.petition import Petition, PetitionSignature


class PetitionRepository:
    """Repository for petition database operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_petitions(self, status: Optional[str] = None) -> list[Petition]:
        """List petitions newest first, optionally filtered by status."""
        query = select(Petition)
        if status:
            query = query.where(Petition.status == status)
        result = await self.db.execute(query.order_by(Petition.created_at.desc()))
        return list(result.scalars().all())

    async def get_by_id(self, petition_id: str, for_update: bool = False) -> Optional[Petition]:
        """Get a petition, optionally locking its row."""
        query = select(Petition).where(Petition.id == petition_id)
        if for_update:
            query = query.with_for_update()
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def signature_counts(self, petition_ids: list[str]) -> dict[str, int]:
        """Map petition ID -> signature count (petitions without signatures are absent)."""
        if not petition_ids:
            return {}
        result = await self.db.execute(
            select(PetitionSignature.petition_id, func.count(PetitionSignature.id))
            .where(PetitionSignature.petition_id.in_(petition_ids))
            .group_by(PetitionSignature.petition_id)
        )
        return {petition_id: count for petition_id, count in result.all()}

    async def count_signatures(self, petition_id: str) -> int:
        result = await self.db.execute(
            select(func.count(PetitionSignature.id)).where(PetitionSignature.petition_id == petition_id)
        )
        return result.scalar() or 0

    async def has_signed(self, petition_id: str, user_id: str) -> bool:
        """Check whether a user has already signed."""
        result = await self.db.execute(
            select(func.count(PetitionSignature.id)).where(
                PetitionSignature.petition_id == petition_id,
                PetitionSignature.user_id == user_id,
            )
        )
        return (result.scalar() or 0) > 0

    async def add_signature(self, petition_id: str, user_id: str) -> PetitionSignature:
        """Record a signature."""
        signature = PetitionSignature(id=str(uuid4()), petition_id=petition_id, user_id=user_id)
        self.db.add(signature)
        await self.db.flush()
        return signature

    async def set_status(self, petition: Petition, status: str) -> Petition:
        """Persist a status transition on a loaded petition."""
        petition.status = status
        await self.db.flush()
        return petition
