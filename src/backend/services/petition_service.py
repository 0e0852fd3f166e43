"""
Petition tracking service.
"""

from typing import Optional

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import DuplicateSignatureError, NotFoundError, PetitionClosedError
from core.validation import parse_identifier
from db.types import utc_now
from models.petition import Petition as PetitionModel
from models.petition import PetitionStatus
from repositories.petition_repository import PetitionRepository
from schemas.converters import petition_model_to_schema
from schemas.petition import Petition

logger = structlog.get_logger(__name__)


class PetitionService:
    """Service for listing and signing petitions."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.repo = PetitionRepository(db)

    async def _expire_if_due(self, petition: PetitionModel) -> None:
        """Persist the ACTIVE -> EXPIRED transition once the deadline passes."""
        if petition.status == PetitionStatus.ACTIVE.value and petition.is_past_expiry(utc_now()):
            await self.repo.set_status(petition, PetitionStatus.EXPIRED.value)
            logger.info("petition_expired", petition_id=petition.id)

    async def list_petitions(self, status: Optional[PetitionStatus] = None) -> list[Petition]:
        """Petitions newest first with live signature counts."""
        for petition in await self.repo.list_petitions(PetitionStatus.ACTIVE.value):
            await self._expire_if_due(petition)

        petitions = await self.repo.list_petitions(status.value if status is not None else None)
        counts = await self.repo.signature_counts([p.id for p in petitions])
        return [petition_model_to_schema(p, counts.get(p.id, 0)) for p in petitions]

    async def get_by_id(self, petition_id: str) -> Optional[Petition]:
        petition_id = parse_identifier(petition_id, "petition_id")
        petition = await self.repo.get_by_id(petition_id)
        if petition is None:
            return None
        await self._expire_if_due(petition)
        count = await self.repo.count_signatures(petition_id)
        return petition_model_to_schema(petition, count)

    async def sign(self, petition_id: str, user_id: str) -> Petition:
        """
        Add the user's signature.

        Reaching the target count completes the petition.

        Raises:
            NotFoundError: If the petition does not exist.
            PetitionClosedError: If the petition is completed or expired.
            DuplicateSignatureError: If the user already signed.
        """
        petition_id = parse_identifier(petition_id, "petition_id")
        user_id = parse_identifier(user_id, "user_id")

        petition = await self.repo.get_by_id(petition_id, for_update=True)
        if petition is None:
            raise NotFoundError("Petition not found")

        await self._expire_if_due(petition)
        if petition.status != PetitionStatus.ACTIVE.value:
            raise PetitionClosedError(f"Petition is {petition.status.lower()} and no longer accepts signatures")

        if await self.repo.has_signed(petition_id, user_id):
            raise DuplicateSignatureError()

        await self.repo.add_signature(petition_id, user_id)
        count = await self.repo.count_signatures(petition_id)
        logger.info("petition_signed", petition_id=petition_id, user_id=user_id, signatures=count)

        if count >= petition.target_count:
            await self.repo.set_status(petition, PetitionStatus.COMPLETED.value)
            logger.info("petition_completed", petition_id=petition_id, signatures=count)

        return petition_model_to_schema(petition, count)
