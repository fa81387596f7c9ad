from typing import List, Optional

from fastapi import APIRouter, Query

from parnaioca.core.common_deps import SessionDep, StayServiceDep
from parnaioca.core.service_utils import ensure_exists
from parnaioca.models.stay import StayStatus
from parnaioca.schemas.minibar import MinibarConsumption, MinibarConsumptionCreate
from parnaioca.schemas.stay import StayCancel, StayWithDetails

router = APIRouter()


@router.get("/", response_model=List[StayWithDetails])
async def get_stays(
    service: StayServiceDep,
    session: SessionDep,
    status: Optional[StayStatus] = Query(None),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
):
    return await service.get_all(status, skip, limit)


@router.get("/{stay_id}", response_model=StayWithDetails)
async def get_stay(stay_id: str, service: StayServiceDep, session: SessionDep):
    stay = await service.get_by_id(stay_id)
    return ensure_exists(stay, "Stay", stay_id)


@router.post("/{stay_id}/cancel", response_model=StayWithDetails)
async def cancel_stay(
    stay_id: str,
    service: StayServiceDep,
    session: SessionDep,
    cancel_data: StayCancel = StayCancel(),
):
    return await service.cancel(stay_id, cancel_data, session)


@router.get("/{stay_id}/minibar", response_model=List[MinibarConsumption])
async def get_minibar_consumptions(
    stay_id: str, service: StayServiceDep, session: SessionDep
):
    return await service.get_minibar_consumptions(stay_id)


@router.post("/{stay_id}/minibar", response_model=MinibarConsumption)
async def add_minibar_consumption(
    stay_id: str,
    consumption_data: MinibarConsumptionCreate,
    service: StayServiceDep,
    session: SessionDep,
):
    return await service.add_minibar_consumption(stay_id, consumption_data, session)
