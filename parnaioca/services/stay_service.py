import logging
from decimal import Decimal
from typing import Any, Dict, List, Optional

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from parnaioca.core.exceptions import (
    BusinessRuleViolationError,
    ConflictError,
    ValidationError,
)
from parnaioca.core.service_utils import ensure_exists, snapshot
from parnaioca.models.accommodation import Accommodation
from parnaioca.models.base import utcnow
from parnaioca.models.change_log import ChangeOperation
from parnaioca.models.customer import Customer
from parnaioca.models.minibar import MinibarConsumption, MinibarItem
from parnaioca.models.stay import Stay, StayStatus
from parnaioca.schemas.accommodation import AccommodationSummary
from parnaioca.schemas.customer import CustomerSummary
from parnaioca.schemas.minibar import MinibarConsumptionCreate
from parnaioca.schemas.stay import (
    ActiveStay,
    CheckInBoard,
    StayCancel,
    StayCheckIn,
    StayCheckOut,
)
from parnaioca.schemas.user import SessionContext
from parnaioca.services.change_log_service import ChangeLogService
from parnaioca.services.occupancy import reconcile

logger = logging.getLogger(__name__)


def to_active_stay(stay: Stay) -> ActiveStay:
    """Flatten a checked-in stay with loaded relations into a list row."""
    return ActiveStay(
        id=stay.id,
        customer_name=stay.customer.name,
        accommodation_name=stay.accommodation.name,
        accommodation_number=stay.accommodation.number,
        check_in_at=stay.check_in_at,
        check_out_at=stay.check_out_at,
        nightly_rate=stay.nightly_rate,
    )


def append_note(notes: Optional[str], note: Optional[str]) -> Optional[str]:
    if not note:
        return notes
    if not notes:
        return note
    return f"{notes}\n{note}"


class StayService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.change_log = ChangeLogService(db)

    def _with_details(self, stmt):
        return stmt.options(
            selectinload(Stay.customer), selectinload(Stay.accommodation)
        )

    async def get_all(
        self,
        status: Optional[StayStatus] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[Stay]:
        stmt = self._with_details(select(Stay))
        if status:
            stmt = stmt.where(Stay.status == status)
        stmt = stmt.order_by(Stay.check_in_at.desc()).offset(skip).limit(limit)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_by_id(self, stay_id: str) -> Optional[Stay]:
        stmt = self._with_details(select(Stay)).where(Stay.id == stay_id)
        result = await self.db.execute(stmt.execution_options(populate_existing=True))
        return result.scalar_one_or_none()

    async def get_checked_in(self) -> List[Stay]:
        """Stays currently checked in, oldest check-in first"""
        stmt = (
            self._with_details(select(Stay))
            .where(Stay.status == StayStatus.CHECKED_IN)
            .order_by(Stay.check_in_at)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_checked_in_for_accommodation(
        self, accommodation_id: str
    ) -> Optional[Stay]:
        stmt = select(Stay).where(
            Stay.accommodation_id == accommodation_id,
            Stay.status == StayStatus.CHECKED_IN,
        )
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def check_in(self, stay_data: StayCheckIn, actor: SessionContext) -> Stay:
        customer = await self.db.get(Customer, stay_data.customer_id)
        customer = ensure_exists(customer, "Customer", stay_data.customer_id)
        if not customer.is_active:
            raise ValidationError(
                "Customer is inactive", "customer_id", stay_data.customer_id
            )

        accommodation = await self.db.get(Accommodation, stay_data.accommodation_id)
        accommodation = ensure_exists(
            accommodation, "Accommodation", stay_data.accommodation_id
        )
        if not accommodation.is_active:
            raise ValidationError(
                "Accommodation is inactive",
                "accommodation_id",
                stay_data.accommodation_id,
            )

        if await self.get_checked_in_for_accommodation(accommodation.id):
            raise ConflictError("Accommodation already has a checked-in stay", "Stay")

        db_stay = Stay(
            customer_id=customer.id,
            accommodation_id=accommodation.id,
            check_in_at=stay_data.check_in_at or utcnow(),
            nightly_rate=accommodation.nightly_rate,
            status=StayStatus.CHECKED_IN,
            notes=stay_data.notes,
        )
        self.db.add(db_stay)
        try:
            await self.db.flush()
        except IntegrityError:
            # Another check-in for the same accommodation won the race
            await self.db.rollback()
            raise ConflictError("Accommodation already has a checked-in stay", "Stay")

        self.change_log.record(
            actor,
            Stay.__tablename__,
            ChangeOperation.INSERT,
            db_stay.id,
            after=snapshot(db_stay),
        )
        await self.db.commit()
        logger.info(
            f"Check-in: stay {db_stay.id}, customer {customer.id}, "
            f"accommodation {accommodation.number}"
        )
        return await self.get_by_id(db_stay.id)

    async def _close(
        self,
        stay_id: str,
        new_status: StayStatus,
        actor: SessionContext,
        note: Optional[str] = None,
        check_out_at=None,
    ) -> Stay:
        db_stay = await self.get_by_id(stay_id)
        db_stay = ensure_exists(db_stay, "Stay", stay_id)
        if check_out_at is not None and check_out_at < db_stay.check_in_at:
            raise ValidationError(
                "check_out_at must not be before check_in_at",
                "check_out_at",
                check_out_at.isoformat(),
            )
        before = snapshot(db_stay)

        values: Dict[str, Any] = {
            "status": new_status,
            "notes": append_note(db_stay.notes, note),
            "updated_at": utcnow(),
        }
        if check_out_at is not None:
            values["check_out_at"] = check_out_at

        # Only a stay that is still checked in may transition
        stmt = (
            update(Stay)
            .where(Stay.id == stay_id, Stay.status == StayStatus.CHECKED_IN)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        result = await self.db.execute(stmt)
        if result.rowcount == 0:
            await self.db.rollback()
            raise BusinessRuleViolationError(
                "stay_not_checked_in",
                f"Stay is {db_stay.status.value}, only checked-in stays can be closed",
                {"stay_id": stay_id, "status": db_stay.status.value},
            )

        db_stay = await self.get_by_id(stay_id)
        self.change_log.record(
            actor,
            Stay.__tablename__,
            ChangeOperation.UPDATE,
            stay_id,
            before=before,
            after=snapshot(db_stay),
        )
        await self.db.commit()
        return db_stay

    async def check_out(
        self, stay_id: str, checkout_data: StayCheckOut, actor: SessionContext
    ) -> Stay:
        db_stay = await self._close(
            stay_id,
            StayStatus.CHECKED_OUT,
            actor,
            note=checkout_data.notes,
            check_out_at=checkout_data.check_out_at or utcnow(),
        )
        logger.info(f"Check-out: stay {stay_id} by {actor.email}")
        return db_stay

    async def cancel(
        self, stay_id: str, cancel_data: StayCancel, actor: SessionContext
    ) -> Stay:
        note = f"Cancelled: {cancel_data.reason}" if cancel_data.reason else None
        db_stay = await self._close(stay_id, StayStatus.CANCELLED, actor, note=note)
        logger.info(f"Stay {stay_id} cancelled by {actor.email}")
        return db_stay

    async def add_minibar_consumption(
        self,
        stay_id: str,
        consumption_data: MinibarConsumptionCreate,
        actor: SessionContext,
    ) -> dict:
        db_stay = await self.get_by_id(stay_id)
        db_stay = ensure_exists(db_stay, "Stay", stay_id)

        if db_stay.status != StayStatus.CHECKED_IN:
            raise BusinessRuleViolationError(
                "stay_not_checked_in",
                "Minibar consumption can only be added to a checked-in stay",
                {"stay_id": stay_id, "status": db_stay.status.value},
            )
        if not db_stay.accommodation.has_minibar:
            raise BusinessRuleViolationError(
                "accommodation_without_minibar",
                "Accommodation has no minibar",
                {"accommodation_id": db_stay.accommodation_id},
            )

        item = await self.db.get(MinibarItem, consumption_data.item_id)
        item = ensure_exists(item, "Minibar item", consumption_data.item_id)
        if not item.is_active:
            raise ValidationError(
                "Minibar item is inactive", "item_id", consumption_data.item_id
            )

        unit_price = Decimal(item.unit_price)
        db_consumption = MinibarConsumption(
            stay_id=stay_id,
            item_id=item.id,
            quantity=consumption_data.quantity,
            unit_price=unit_price,
            total=unit_price * consumption_data.quantity,
        )
        self.db.add(db_consumption)
        await self.db.flush()

        self.change_log.record(
            actor,
            MinibarConsumption.__tablename__,
            ChangeOperation.INSERT,
            db_consumption.id,
            after=snapshot(db_consumption),
        )
        await self.db.commit()
        return self._consumption_view(db_consumption, item.name)

    async def get_minibar_consumptions(self, stay_id: str) -> List[dict]:
        db_stay = await self.db.get(Stay, stay_id)
        ensure_exists(db_stay, "Stay", stay_id)

        stmt = (
            select(MinibarConsumption)
            .options(selectinload(MinibarConsumption.item))
            .where(MinibarConsumption.stay_id == stay_id)
            .order_by(MinibarConsumption.created_at)
        )
        result = await self.db.execute(stmt)
        return [
            self._consumption_view(consumption, consumption.item.name)
            for consumption in result.scalars().all()
        ]

    @staticmethod
    def _consumption_view(consumption: MinibarConsumption, item_name: str) -> dict:
        return {
            "id": consumption.id,
            "stay_id": consumption.stay_id,
            "item_id": consumption.item_id,
            "item_name": item_name,
            "quantity": consumption.quantity,
            "unit_price": consumption.unit_price,
            "total": consumption.total,
            "created_at": consumption.created_at,
        }

    async def get_check_in_board(self) -> CheckInBoard:
        """Active guests, free accommodations and customers for the check-in screen"""
        checked_in = await self.get_checked_in()

        result = await self.db.execute(
            select(Accommodation)
            .where(Accommodation.is_active)
            .order_by(Accommodation.number)
        )
        accommodations = list(result.scalars().all())
        occupancy = reconcile(accommodations, checked_in)

        result = await self.db.execute(
            select(Customer).where(Customer.is_active).order_by(Customer.name)
        )
        customers = result.scalars().all()

        return CheckInBoard(
            active_stays=[to_active_stay(stay) for stay in checked_in],
            available_accommodations=[
                AccommodationSummary.model_validate(accommodation)
                for accommodation, record in zip(accommodations, occupancy)
                if not record.occupied
            ],
            customers=[CustomerSummary.model_validate(c) for c in customers],
            generated_at=utcnow(),
        )
