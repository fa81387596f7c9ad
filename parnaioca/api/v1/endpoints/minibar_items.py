from typing import List, Optional

from fastapi import APIRouter, Query

from parnaioca.core.common_deps import AdminSessionDep, MinibarServiceDep, SessionDep
from parnaioca.core.service_utils import ensure_exists
from parnaioca.schemas.minibar import MinibarItem, MinibarItemCreate, MinibarItemUpdate

router = APIRouter()


@router.get("/", response_model=List[MinibarItem])
async def get_minibar_items(
    service: MinibarServiceDep,
    session: SessionDep,
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    search: Optional[str] = Query(None),
    active_only: bool = Query(False),
):
    return await service.get_all(skip, limit, search, active_only)


@router.post("/", response_model=MinibarItem)
async def create_minibar_item(
    item_data: MinibarItemCreate,
    service: MinibarServiceDep,
    session: SessionDep,
):
    return await service.create(item_data, session)


@router.get("/{item_id}", response_model=MinibarItem)
async def get_minibar_item(
    item_id: str,
    service: MinibarServiceDep,
    session: SessionDep,
):
    item = await service.get_by_id(item_id)
    return ensure_exists(item, "Minibar item", item_id)


@router.put("/{item_id}", response_model=MinibarItem)
async def update_minibar_item(
    item_id: str,
    item_data: MinibarItemUpdate,
    service: MinibarServiceDep,
    session: SessionDep,
):
    return await service.update(item_id, item_data, session)


@router.patch("/{item_id}/toggle-status", response_model=MinibarItem)
async def toggle_minibar_item_status(
    item_id: str,
    service: MinibarServiceDep,
    session: AdminSessionDep,
):
    return await service.toggle_status(item_id, session)
