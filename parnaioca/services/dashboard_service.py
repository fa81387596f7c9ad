from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from parnaioca.core.service_utils import to_money
from parnaioca.models.accommodation import Accommodation
from parnaioca.models.base import utcnow
from parnaioca.models.customer import Customer
from parnaioca.models.stay import Stay, StayStatus
from parnaioca.schemas.reports import DashboardStats
from parnaioca.services.occupancy import reconcile, summarize
from parnaioca.services.stay_service import StayService, to_active_stay


def month_start(moment: datetime) -> datetime:
    return moment.replace(day=1, hour=0, minute=0, second=0, microsecond=0)


class DashboardService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def count_active(self, model) -> int:
        result = await self.db.execute(
            select(func.count(model.id)).where(model.is_active)
        )
        return result.scalar() or 0

    async def revenue_since(self, start: datetime):
        """Nightly-rate snapshots of non-cancelled stays created since ``start``"""
        result = await self.db.execute(
            select(func.coalesce(func.sum(Stay.nightly_rate), 0)).where(
                Stay.created_at >= start, Stay.status != StayStatus.CANCELLED
            )
        )
        return to_money(result.scalar())

    async def get_stats(self) -> DashboardStats:
        now = utcnow()
        total_customers = await self.count_active(Customer)
        total_accommodations = await self.count_active(Accommodation)

        checked_in = await StayService(self.db).get_checked_in()
        result = await self.db.execute(
            select(Accommodation).where(Accommodation.is_active)
        )
        occupancy = summarize(reconcile(result.scalars().all(), checked_in))

        return DashboardStats(
            total_customers=total_customers,
            total_accommodations=total_accommodations,
            current_occupancy=occupancy.occupied,
            occupancy=occupancy,
            monthly_revenue=await self.revenue_since(month_start(now)),
            active_stays=[to_active_stay(stay) for stay in checked_in],
            generated_at=now,
        )
