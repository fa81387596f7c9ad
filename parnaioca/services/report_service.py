from datetime import date, datetime, time, timedelta
from typing import Optional

from sqlalchemy import and_, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from parnaioca.core.exceptions import FeatureNotAvailableError
from parnaioca.core.service_utils import to_money, validate_date_range
from parnaioca.models.accommodation import Accommodation
from parnaioca.models.base import utcnow
from parnaioca.models.customer import Customer
from parnaioca.models.stay import Stay, StayStatus
from parnaioca.schemas.reports import ReportSummary
from parnaioca.services.occupancy import reconcile, summarize
from parnaioca.services.stay_service import StayService


def period_bounds(start_date: date, end_date: date):
    """Half-open datetime interval covering both dates entirely."""
    return (
        datetime.combine(start_date, time.min),
        datetime.combine(end_date + timedelta(days=1), time.min),
    )


class ReportService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_summary(
        self, start_date: Optional[date] = None, end_date: Optional[date] = None
    ) -> ReportSummary:
        """
        Period report; the period defaults to the current month up to today.

        Customers are counted by registration date, stays and revenue by
        check-in date. Cancelled stays count for neither.
        """
        today = utcnow().date()
        start_date = start_date or today.replace(day=1)
        end_date = end_date or today
        validate_date_range(start_date, end_date)
        period_start, period_end = period_bounds(start_date, end_date)

        result = await self.db.execute(
            select(func.count(Customer.id)).where(
                Customer.created_at >= period_start, Customer.created_at < period_end
            )
        )
        customers_in_period = result.scalar() or 0

        result = await self.db.execute(
            select(Customer.is_active, func.count(Customer.id)).group_by(
                Customer.is_active
            )
        )
        by_status = {is_active: count for is_active, count in result.all()}

        stays_in_period = and_(
            Stay.check_in_at >= period_start,
            Stay.check_in_at < period_end,
            Stay.status != StayStatus.CANCELLED,
        )
        result = await self.db.execute(
            select(
                func.count(Stay.id), func.coalesce(func.sum(Stay.nightly_rate), 0)
            ).where(stays_in_period)
        )
        stay_count, revenue = result.one()

        checked_in = await StayService(self.db).get_checked_in()
        result = await self.db.execute(
            select(Accommodation).where(Accommodation.is_active)
        )
        occupancy = summarize(reconcile(result.scalars().all(), checked_in))

        return ReportSummary(
            start_date=start_date,
            end_date=end_date,
            customers_in_period=customers_in_period,
            active_customers=by_status.get(True, 0),
            inactive_customers=by_status.get(False, 0),
            stays_in_period=stay_count or 0,
            revenue_in_period=to_money(revenue),
            occupancy_rate=occupancy.occupancy_percentage,
        )

    async def generate_pdf(self) -> None:
        raise FeatureNotAvailableError("PDF report")

    async def export_spreadsheet(self) -> None:
        raise FeatureNotAvailableError("Spreadsheet export")
