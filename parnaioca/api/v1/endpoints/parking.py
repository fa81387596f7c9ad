from fastapi import APIRouter

from parnaioca.core.common_deps import ParkingServiceDep, SessionDep
from parnaioca.schemas.occupancy import ParkingOverview

router = APIRouter()


@router.get("/", response_model=ParkingOverview)
async def get_parking_overview(service: ParkingServiceDep, session: SessionDep):
    return await service.get_overview()
