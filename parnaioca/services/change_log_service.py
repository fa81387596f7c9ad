import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from parnaioca.models.change_log import ChangeLog, ChangeOperation
from parnaioca.models.user import User
from parnaioca.schemas.user import SessionContext

logger = logging.getLogger(__name__)


class ChangeLogService:
    def __init__(self, db: AsyncSession):
        self.db = db

    def record(
        self,
        actor: SessionContext,
        table_name: str,
        operation: ChangeOperation,
        row_id: str,
        before: Optional[Dict[str, Any]] = None,
        after: Optional[Dict[str, Any]] = None,
    ) -> ChangeLog:
        """Stage a log row; it is committed together with the change it describes."""
        entry = ChangeLog(
            actor_id=actor.user_id,
            table_name=table_name,
            operation=operation,
            row_id=row_id,
            before=before,
            after=after,
        )
        self.db.add(entry)
        return entry

    async def count(self) -> int:
        result = await self.db.execute(select(func.count(ChangeLog.id)))
        return result.scalar() or 0

    async def get_recent(self, limit: int = 10) -> List[dict]:
        stmt = (
            select(ChangeLog, User.email)
            .outerjoin(User, User.id == ChangeLog.actor_id)
            .order_by(ChangeLog.created_at.desc())
            .limit(limit)
        )
        result = await self.db.execute(stmt)
        return [
            {
                "id": entry.id,
                "actor_id": entry.actor_id,
                "actor_email": actor_email,
                "table_name": entry.table_name,
                "operation": entry.operation,
                "row_id": entry.row_id,
                "before": entry.before,
                "after": entry.after,
                "created_at": entry.created_at,
            }
            for entry, actor_email in result.all()
        ]

    async def purge(self, actor: SessionContext) -> int:
        result = await self.db.execute(delete(ChangeLog))
        await self.db.commit()
        logger.info(f"Change logs purged by {actor.email}: {result.rowcount} rows")
        return result.rowcount
