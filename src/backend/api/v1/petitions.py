"""
Petition endpoints.
"""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from api.deps import CurrentUser, get_petition_service
from models.petition import PetitionStatus
from schemas.petition import PetitionListResponse, PetitionResponse, PetitionStatusEnum
from services.petition_service import PetitionService

router = APIRouter()

Service = Annotated[PetitionService, Depends(get_petition_service)]


@router.get("", response_model=PetitionListResponse)
async def list_petitions(
    service: Service,
    petition_status: Optional[PetitionStatusEnum] = Query(None, alias="status"),
) -> PetitionListResponse:
    """List petitions newest first, optionally by status."""
    status_filter = PetitionStatus(petition_status.value) if petition_status else None
    return PetitionListResponse(petitions=await service.list_petitions(status_filter))


@router.get("/{petition_id}", response_model=PetitionResponse)
async def get_petition(petition_id: str, service: Service) -> PetitionResponse:
    petition = await service.get_by_id(petition_id)
    if petition is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Petition not found")
    return PetitionResponse(petition=petition)


@router.post("/{petition_id}/sign", response_model=PetitionResponse)
async def sign_petition(
    petition_id: str,
    current_user: CurrentUser,
    service: Service,
) -> PetitionResponse:
    """Sign a petition as the authenticated user."""
    petition = await service.sign(petition_id, current_user.id)
    return PetitionResponse(petition=petition)
