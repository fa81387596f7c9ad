from typing import List, Optional

from fastapi import APIRouter, Query

from parnaioca.core.common_deps import (
    AccommodationTypeServiceDep,
    AdminSessionDep,
    SessionDep,
)
from parnaioca.core.service_utils import ensure_exists
from parnaioca.schemas.accommodation import (
    AccommodationType,
    AccommodationTypeCreate,
    AccommodationTypeUpdate,
)

router = APIRouter()


@router.get("/", response_model=List[AccommodationType])
async def get_accommodation_types(
    service: AccommodationTypeServiceDep,
    session: SessionDep,
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    search: Optional[str] = Query(None, description="Search by name or description"),
    active_only: bool = Query(False),
):
    return await service.get_all(skip, limit, search, active_only)


@router.post("/", response_model=AccommodationType)
async def create_accommodation_type(
    accommodation_type_data: AccommodationTypeCreate,
    service: AccommodationTypeServiceDep,
    session: SessionDep,
):
    return await service.create(accommodation_type_data, session)


@router.get("/{accommodation_type_id}", response_model=AccommodationType)
async def get_accommodation_type(
    accommodation_type_id: str,
    service: AccommodationTypeServiceDep,
    session: SessionDep,
):
    accommodation_type = await service.get_by_id(accommodation_type_id)
    return ensure_exists(
        accommodation_type, "Accommodation type", accommodation_type_id
    )


@router.put("/{accommodation_type_id}", response_model=AccommodationType)
async def update_accommodation_type(
    accommodation_type_id: str,
    accommodation_type_data: AccommodationTypeUpdate,
    service: AccommodationTypeServiceDep,
    session: SessionDep,
):
    return await service.update(
        accommodation_type_id, accommodation_type_data, session
    )


@router.patch(
    "/{accommodation_type_id}/toggle-status", response_model=AccommodationType
)
async def toggle_accommodation_type_status(
    accommodation_type_id: str,
    service: AccommodationTypeServiceDep,
    session: AdminSessionDep,
):
    return await service.toggle_status(accommodation_type_id, session)
