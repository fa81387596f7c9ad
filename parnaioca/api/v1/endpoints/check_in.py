from fastapi import APIRouter

from parnaioca.core.common_deps import SessionDep, StayServiceDep
from parnaioca.schemas.stay import (
    CheckInBoard,
    StayCheckIn,
    StayCheckOut,
    StayWithDetails,
)

router = APIRouter()


@router.get("/", response_model=CheckInBoard)
async def get_check_in_board(service: StayServiceDep, session: SessionDep):
    return await service.get_check_in_board()


@router.post("/", response_model=StayWithDetails)
async def check_in(
    stay_data: StayCheckIn,
    service: StayServiceDep,
    session: SessionDep,
):
    return await service.check_in(stay_data, session)


@router.post("/{stay_id}/check-out", response_model=StayWithDetails)
async def check_out(
    stay_id: str,
    service: StayServiceDep,
    session: SessionDep,
    checkout_data: StayCheckOut = StayCheckOut(),
):
    return await service.check_out(stay_id, checkout_data, session)
