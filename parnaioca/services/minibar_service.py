from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from parnaioca.core.service_utils import apply_updates, ensure_exists, snapshot
from parnaioca.models.change_log import ChangeOperation
from parnaioca.models.minibar import MinibarItem
from parnaioca.schemas.minibar import MinibarItemCreate, MinibarItemUpdate
from parnaioca.schemas.user import SessionContext
from parnaioca.services.change_log_service import ChangeLogService


class MinibarService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.change_log = ChangeLogService(db)

    async def get_all(
        self,
        skip: int = 0,
        limit: int = 100,
        search: Optional[str] = None,
        active_only: bool = False,
    ) -> List[MinibarItem]:
        stmt = select(MinibarItem)

        if search:
            stmt = stmt.where(MinibarItem.name.ilike(f"%{search.strip()}%"))

        if active_only:
            stmt = stmt.where(MinibarItem.is_active)

        stmt = stmt.order_by(MinibarItem.name).offset(skip).limit(limit)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_by_id(self, item_id: str) -> Optional[MinibarItem]:
        result = await self.db.execute(
            select(MinibarItem).where(MinibarItem.id == item_id)
        )
        return result.scalar_one_or_none()

    async def create(
        self, item_data: MinibarItemCreate, actor: SessionContext
    ) -> MinibarItem:
        db_item = MinibarItem(**item_data.model_dump(), is_active=True)
        self.db.add(db_item)
        await self.db.flush()

        self.change_log.record(
            actor,
            MinibarItem.__tablename__,
            ChangeOperation.INSERT,
            db_item.id,
            after=snapshot(db_item),
        )
        await self.db.commit()
        await self.db.refresh(db_item)
        return db_item

    async def update(
        self, item_id: str, item_data: MinibarItemUpdate, actor: SessionContext
    ) -> MinibarItem:
        db_item = await self.get_by_id(item_id)
        db_item = ensure_exists(db_item, "Minibar item", item_id)

        before = snapshot(db_item)
        apply_updates(db_item, item_data.model_dump(exclude_unset=True))
        await self.db.flush()

        self.change_log.record(
            actor,
            MinibarItem.__tablename__,
            ChangeOperation.UPDATE,
            db_item.id,
            before=before,
            after=snapshot(db_item),
        )
        await self.db.commit()
        await self.db.refresh(db_item)
        return db_item

    async def toggle_status(self, item_id: str, actor: SessionContext) -> MinibarItem:
        db_item = await self.get_by_id(item_id)
        db_item = ensure_exists(db_item, "Minibar item", item_id)

        before = {"is_active": db_item.is_active}
        db_item.is_active = not db_item.is_active

        self.change_log.record(
            actor,
            MinibarItem.__tablename__,
            ChangeOperation.UPDATE,
            db_item.id,
            before=before,
            after={"is_active": db_item.is_active},
        )
        await self.db.commit()
        await self.db.refresh(db_item)
        return db_item
