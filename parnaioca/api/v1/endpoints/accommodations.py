from typing import List, Optional

from fastapi import APIRouter, Query

from parnaioca.core.common_deps import (
    AccommodationServiceDep,
    AdminSessionDep,
    SessionDep,
)
from parnaioca.core.service_utils import ensure_exists
from parnaioca.schemas.accommodation import (
    Accommodation,
    AccommodationCreate,
    AccommodationUpdate,
)

router = APIRouter()


@router.get("/", response_model=List[Accommodation])
async def get_accommodations(
    service: AccommodationServiceDep,
    session: SessionDep,
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    search: Optional[str] = Query(None, description="Search by name or number"),
    active_only: bool = Query(False),
    has_parking: Optional[bool] = Query(None),
):
    return await service.get_all(skip, limit, search, active_only, has_parking)


@router.post("/", response_model=Accommodation)
async def create_accommodation(
    accommodation_data: AccommodationCreate,
    service: AccommodationServiceDep,
    session: SessionDep,
):
    return await service.create(accommodation_data, session)


@router.get("/{accommodation_id}", response_model=Accommodation)
async def get_accommodation(
    accommodation_id: str,
    service: AccommodationServiceDep,
    session: SessionDep,
):
    accommodation = await service.get_by_id(accommodation_id)
    return ensure_exists(accommodation, "Accommodation", accommodation_id)


@router.put("/{accommodation_id}", response_model=Accommodation)
async def update_accommodation(
    accommodation_id: str,
    accommodation_data: AccommodationUpdate,
    service: AccommodationServiceDep,
    session: SessionDep,
):
    return await service.update(accommodation_id, accommodation_data, session)


@router.patch("/{accommodation_id}/toggle-status", response_model=Accommodation)
async def toggle_accommodation_status(
    accommodation_id: str,
    service: AccommodationServiceDep,
    session: AdminSessionDep,
):
    return await service.toggle_status(accommodation_id, session)
