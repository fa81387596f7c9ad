from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from parnaioca.models.accommodation import Accommodation
from parnaioca.schemas.occupancy import ParkingOverview
from parnaioca.services.occupancy import reconcile, summarize
from parnaioca.services.stay_service import StayService


class ParkingService:
    """One parking spot per active accommodation that offers parking."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_overview(self) -> ParkingOverview:
        result = await self.db.execute(
            select(Accommodation)
            .where(Accommodation.is_active, Accommodation.has_parking)
            .order_by(Accommodation.number)
        )
        accommodations = list(result.scalars().all())
        checked_in = await StayService(self.db).get_checked_in()

        spots = reconcile(accommodations, checked_in)
        return ParkingOverview(spots=spots, summary=summarize(spots))
