"""
Representative browsing endpoints.

Profiles optionally embed activity, voting records, metrics and statements,
selected with presence flags: ``/representatives/{id}?voting&metrics``.
"""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from api.deps import get_representative_service, has_flag
from schemas.representative import (
    CommitteeListResponse,
    ProfileSection,
    RepresentativeListResponse,
    RepresentativeProfileResponse,
)
from services.representative_service import RepresentativeService

router = APIRouter()

Service = Annotated[RepresentativeService, Depends(get_representative_service)]


@router.get("", response_model=RepresentativeListResponse)
async def list_representatives(
    service: Service,
    party: Optional[str] = Query(None, description="Exact party code, e.g. JLP"),
    q: Optional[str] = Query(None, description="Search representative or constituency name"),
) -> RepresentativeListResponse:
    """
    List representatives ordered by name.

    A search query takes precedence over the party filter.
    """
    if q:
        reps = await service.search(q)
    elif party:
        reps = await service.list_by_party(party)
    else:
        reps = await service.list_all()
    return RepresentativeListResponse(representatives=reps)


@router.get(
    "/{representative_id}",
    response_model=RepresentativeProfileResponse,
    response_model_exclude_unset=True,
)
async def get_representative(
    representative_id: str,
    request: Request,
    service: Service,
) -> RepresentativeProfileResponse:
    """
    Get a representative profile.

    Flags ``activity``, ``voting``, ``metrics`` and ``statements`` add the
    matching history lists to the response.
    """
    representative = await service.get_by_id(representative_id)
    if representative is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Representative not found")

    sections = [section for section in ProfileSection if has_flag(request, section.value)]
    extras = {}
    if ProfileSection.ACTIVITY in sections:
        extras["activity"] = await service.get_activity(representative_id)
    if ProfileSection.VOTING in sections:
        extras["voting_records"] = await service.get_voting_records(representative_id)
    if ProfileSection.METRICS in sections:
        extras["performance_metrics"] = await service.get_performance_metrics(representative_id)
    if ProfileSection.STATEMENTS in sections:
        extras["statements"] = await service.get_statements(representative_id)

    return RepresentativeProfileResponse(representative=representative, sections=sections, **extras)


@router.get("/{representative_id}/committees", response_model=CommitteeListResponse)
async def get_representative_committees(
    representative_id: str,
    service: Service,
) -> CommitteeListResponse:
    """Committee seats held by a representative."""
    representative = await service.get_by_id(representative_id)
    if representative is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Representative not found")
    return CommitteeListResponse(committees=await service.get_committees(representative_id))
