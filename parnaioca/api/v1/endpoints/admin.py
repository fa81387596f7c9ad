from typing import List

from fastapi import APIRouter, Query

from parnaioca.core.common_deps import AdminServiceDep, AdminSessionDep
from parnaioca.schemas.admin import AdminOverview, ChangeLog
from parnaioca.schemas.responses import MessageResponse, PurgeResponse

router = APIRouter()


@router.get("/", response_model=AdminOverview)
async def get_admin_overview(service: AdminServiceDep, session: AdminSessionDep):
    return await service.get_overview()


@router.get("/change-logs", response_model=List[ChangeLog])
async def get_change_logs(
    service: AdminServiceDep,
    session: AdminSessionDep,
    limit: int = Query(100, ge=1, le=1000),
):
    return await service.get_change_logs(limit)


@router.delete("/change-logs", response_model=PurgeResponse)
async def purge_change_logs(service: AdminServiceDep, session: AdminSessionDep):
    deleted = await service.purge_change_logs(session)
    return PurgeResponse(message="Change logs removed successfully", deleted=deleted)


@router.post("/export", response_model=MessageResponse)
async def export_data(service: AdminServiceDep, session: AdminSessionDep):
    await service.export_data()


@router.post("/backup", response_model=MessageResponse)
async def backup(service: AdminServiceDep, session: AdminSessionDep):
    await service.backup()
