from datetime import date, datetime, time
from typing import List, Optional

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from parnaioca.core.service_utils import to_money
from parnaioca.models.accommodation import Accommodation, AccommodationType
from parnaioca.models.base import utcnow
from parnaioca.models.customer import Customer
from parnaioca.models.minibar import MinibarConsumption, MinibarItem
from parnaioca.models.stay import Stay, StayStatus
from parnaioca.schemas.reports import (
    AnalyticsOverview,
    MonthlyOccupancy,
    NamedQuantity,
    NamedRevenue,
    StateCount,
)
from parnaioca.services.occupancy import occupancy_percentage

MONTHS_OF_HISTORY = 6


def shift_month(month: date, offset: int) -> date:
    index = month.year * 12 + month.month - 1 + offset
    return date(index // 12, index % 12 + 1, 1)


def recent_months(today: date, count: int = MONTHS_OF_HISTORY) -> List[date]:
    """First days of the last ``count`` months, oldest first, current month included"""
    current = today.replace(day=1)
    return [shift_month(current, -offset) for offset in range(count - 1, -1, -1)]


class AnalyticsService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_top_minibar_item(self) -> Optional[NamedQuantity]:
        total_quantity = func.sum(MinibarConsumption.quantity)
        stmt = (
            select(MinibarItem.name, total_quantity)
            .join(MinibarConsumption, MinibarConsumption.item_id == MinibarItem.id)
            .group_by(MinibarItem.id, MinibarItem.name)
            .order_by(total_quantity.desc())
            .limit(1)
        )
        row = (await self.db.execute(stmt)).first()
        if row is None:
            return None
        return NamedQuantity(name=row[0], quantity=row[1])

    async def get_most_profitable_accommodation(self) -> Optional[NamedRevenue]:
        revenue = func.sum(Stay.nightly_rate)
        stmt = (
            select(Accommodation.name, revenue)
            .join(Stay, Stay.accommodation_id == Accommodation.id)
            .where(Stay.status != StayStatus.CANCELLED)
            .group_by(Accommodation.id, Accommodation.name)
            .order_by(revenue.desc())
            .limit(1)
        )
        row = (await self.db.execute(stmt)).first()
        if row is None:
            return None
        return NamedRevenue(name=row[0], revenue=to_money(row[1]))

    async def get_revenue_by_type(self) -> List[NamedRevenue]:
        revenue = func.sum(Stay.nightly_rate)
        stmt = (
            select(AccommodationType.name, revenue)
            .join(Accommodation, Accommodation.type_id == AccommodationType.id)
            .join(Stay, Stay.accommodation_id == Accommodation.id)
            .where(Stay.status != StayStatus.CANCELLED)
            .group_by(AccommodationType.id, AccommodationType.name)
            .order_by(revenue.desc())
        )
        result = await self.db.execute(stmt)
        return [
            NamedRevenue(name=name, revenue=to_money(total))
            for name, total in result.all()
        ]

    async def get_customers_by_state(self) -> List[StateCount]:
        count = func.count(Customer.id)
        stmt = (
            select(Customer.state, count)
            .group_by(Customer.state)
            .order_by(count.desc(), Customer.state)
        )
        result = await self.db.execute(stmt)
        return [StateCount(state=state, count=total) for state, total in result.all()]

    async def get_monthly_occupancy(
        self, today: Optional[date] = None
    ) -> List[MonthlyOccupancy]:
        """
        Share of active accommodations that held at least one non-cancelled
        stay overlapping each of the last six months.
        """
        today = today or utcnow().date()
        result = await self.db.execute(
            select(func.count(Accommodation.id)).where(Accommodation.is_active)
        )
        total = result.scalar() or 0

        months = []
        for first_day in recent_months(today):
            month_start = datetime.combine(first_day, time.min)
            month_end = datetime.combine(shift_month(first_day, 1), time.min)
            stmt = (
                select(func.count(func.distinct(Stay.accommodation_id)))
                .select_from(Stay)
                .join(Accommodation, Accommodation.id == Stay.accommodation_id)
                .where(
                    Accommodation.is_active,
                    Stay.status != StayStatus.CANCELLED,
                    Stay.check_in_at < month_end,
                    or_(Stay.check_out_at.is_(None), Stay.check_out_at >= month_start),
                )
            )
            occupied = (await self.db.execute(stmt)).scalar() or 0
            months.append(
                MonthlyOccupancy(
                    month=first_day.strftime("%Y-%m"),
                    occupancy_percentage=occupancy_percentage(occupied, total),
                )
            )
        return months

    async def get_overview(self) -> AnalyticsOverview:
        most_profitable = await self.get_most_profitable_accommodation()
        return AnalyticsOverview(
            top_minibar_item=await self.get_top_minibar_item(),
            most_profitable_accommodation=most_profitable,
            revenue_by_type=await self.get_revenue_by_type(),
            customers_by_state=await self.get_customers_by_state(),
            monthly_occupancy=await self.get_monthly_occupancy(),
        )
