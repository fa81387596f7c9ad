from fastapi import APIRouter

from parnaioca.core.common_deps import AnalyticsServiceDep, SessionDep
from parnaioca.schemas.reports import AnalyticsOverview

router = APIRouter()


@router.get("/", response_model=AnalyticsOverview)
async def get_analytics(service: AnalyticsServiceDep, session: SessionDep):
    return await service.get_overview()
