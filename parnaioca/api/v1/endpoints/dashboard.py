from fastapi import APIRouter

from parnaioca.core.common_deps import DashboardServiceDep, SessionDep
from parnaioca.schemas.reports import DashboardStats

router = APIRouter()


@router.get("/", response_model=DashboardStats)
async def get_dashboard(service: DashboardServiceDep, session: SessionDep):
    return await service.get_stats()
