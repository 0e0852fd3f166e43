"""
Constituency, project and statistics endpoints.
"""

from typing import Annotated, Optional, Union

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from api.deps import get_constituency_service, get_representative_service, has_flag
from schemas.constituency import (
    ConstituencyListResponse,
    ConstituencyProfileResponse,
    ParishListResponse,
    ProjectResponse,
    StatisticsResponse,
)
from services.constituency_service import ConstituencyService
from services.representative_service import RepresentativeService

router = APIRouter()

Service = Annotated[ConstituencyService, Depends(get_constituency_service)]


@router.get(
    "",
    response_model=Union[StatisticsResponse, ParishListResponse, ConstituencyListResponse],
)
async def list_constituencies(
    request: Request,
    service: Service,
    parish: Optional[str] = Query(None, description="Exact parish name"),
    q: Optional[str] = Query(None, description="Search constituency, parish or representative name"),
) -> Union[StatisticsResponse, ParishListResponse, ConstituencyListResponse]:
    """
    List constituencies, or aggregate views of them.

    Precedence: ``stats`` flag, then ``parishes`` flag, then ``q``, then
    ``parish``.
    """
    if has_flag(request, "stats"):
        return StatisticsResponse(statistics=await service.get_statistics())
    if has_flag(request, "parishes"):
        return ParishListResponse(parishes=await service.list_parishes())

    if q:
        constituencies = await service.search(q)
    elif parish:
        constituencies = await service.list_by_parish(parish)
    else:
        constituencies = await service.list_all()
    return ConstituencyListResponse(constituencies=constituencies)


@router.get("/projects/{project_id}", response_model=ProjectResponse)
async def get_project(project_id: str, service: Service) -> ProjectResponse:
    """Get a project with its update history and constituency."""
    project = await service.get_project_by_id(project_id)
    if project is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
    return ProjectResponse(project=project)


@router.get(
    "/{constituency_id}",
    response_model=ConstituencyProfileResponse,
    response_model_exclude_unset=True,
)
async def get_constituency(
    constituency_id: str,
    request: Request,
    service: Service,
    representatives: Annotated[RepresentativeService, Depends(get_representative_service)],
) -> ConstituencyProfileResponse:
    """
    Get a constituency profile.

    ``projects`` adds the full project list; ``representative`` adds the
    sitting representative's full record when the seat is held.
    """
    constituency = await service.get_by_id(constituency_id)
    if constituency is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Constituency not found")

    extras = {}
    if has_flag(request, "projects"):
        extras["projects"] = await service.get_projects(constituency_id)
    if has_flag(request, "representative"):
        representative = await representatives.get_by_constituency(constituency_id)
        if representative is not None:
            extras["representative"] = representative

    return ConstituencyProfileResponse(constituency=constituency, **extras)
