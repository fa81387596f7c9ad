from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from parnaioca.core.exceptions import FeatureNotAvailableError
from parnaioca.models.base import utcnow
from parnaioca.models.user import User
from parnaioca.schemas.admin import AdminOverview
from parnaioca.schemas.user import SessionContext
from parnaioca.services.change_log_service import ChangeLogService

RECENT_LOG_LIMIT = 10


class AdminService:
    """Administrative screen; every method expects an administrator session."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.change_log = ChangeLogService(db)

    async def get_overview(self) -> AdminOverview:
        result = await self.db.execute(select(func.count(User.id)))
        total_users = result.scalar() or 0

        return AdminOverview(
            total_users=total_users,
            total_logs=await self.change_log.count(),
            # Reaching this line means the store answered both queries
            system_status="online",
            recent_logs=await self.change_log.get_recent(RECENT_LOG_LIMIT),
            generated_at=utcnow(),
        )

    async def get_change_logs(self, limit: int = 100):
        return await self.change_log.get_recent(limit)

    async def purge_change_logs(self, actor: SessionContext) -> int:
        return await self.change_log.purge(actor)

    async def export_data(self) -> None:
        raise FeatureNotAvailableError("Data export")

    async def backup(self) -> None:
        raise FeatureNotAvailableError("Backup")
