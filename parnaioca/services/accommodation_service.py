from typing import List, Optional

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from parnaioca.core.exceptions import BusinessRuleViolationError, ValidationError
from parnaioca.core.service_utils import (
    apply_updates,
    ensure_exists,
    snapshot,
    validate_unique_field,
)
from parnaioca.models.accommodation import Accommodation, AccommodationType
from parnaioca.models.base import utcnow
from parnaioca.models.change_log import ChangeOperation
from parnaioca.models.stay import Stay, StayStatus
from parnaioca.schemas.accommodation import (
    AccommodationCreate,
    AccommodationTypeCreate,
    AccommodationTypeUpdate,
    AccommodationUpdate,
)
from parnaioca.schemas.user import SessionContext
from parnaioca.services.change_log_service import ChangeLogService


class AccommodationTypeService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.change_log = ChangeLogService(db)

    async def get_all(
        self,
        skip: int = 0,
        limit: int = 100,
        search: Optional[str] = None,
        active_only: bool = False,
    ) -> List[AccommodationType]:
        stmt = select(AccommodationType)

        if search:
            pattern = f"%{search.strip()}%"
            stmt = stmt.where(
                or_(
                    AccommodationType.name.ilike(pattern),
                    AccommodationType.description.ilike(pattern),
                )
            )

        if active_only:
            stmt = stmt.where(AccommodationType.is_active)

        stmt = stmt.order_by(AccommodationType.name).offset(skip).limit(limit)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_by_id(
        self, accommodation_type_id: str
    ) -> Optional[AccommodationType]:
        stmt = select(AccommodationType).where(
            AccommodationType.id == accommodation_type_id
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def create(
        self, accommodation_type_data: AccommodationTypeCreate, actor: SessionContext
    ) -> AccommodationType:
        db_accommodation_type = AccommodationType(
            **accommodation_type_data.model_dump(), is_active=True
        )
        self.db.add(db_accommodation_type)
        await self.db.flush()

        self.change_log.record(
            actor,
            AccommodationType.__tablename__,
            ChangeOperation.INSERT,
            db_accommodation_type.id,
            after=snapshot(db_accommodation_type),
        )
        await self.db.commit()
        await self.db.refresh(db_accommodation_type)
        return db_accommodation_type

    async def update(
        self,
        accommodation_type_id: str,
        accommodation_type_data: AccommodationTypeUpdate,
        actor: SessionContext,
    ) -> AccommodationType:
        db_accommodation_type = await self.get_by_id(accommodation_type_id)
        db_accommodation_type = ensure_exists(
            db_accommodation_type, "Accommodation type", accommodation_type_id
        )

        before = snapshot(db_accommodation_type)
        apply_updates(
            db_accommodation_type,
            accommodation_type_data.model_dump(exclude_unset=True),
        )
        await self.db.flush()

        self.change_log.record(
            actor,
            AccommodationType.__tablename__,
            ChangeOperation.UPDATE,
            db_accommodation_type.id,
            before=before,
            after=snapshot(db_accommodation_type),
        )
        await self.db.commit()
        await self.db.refresh(db_accommodation_type)
        return db_accommodation_type

    async def toggle_status(
        self, accommodation_type_id: str, actor: SessionContext
    ) -> AccommodationType:
        db_accommodation_type = await self.get_by_id(accommodation_type_id)
        db_accommodation_type = ensure_exists(
            db_accommodation_type, "Accommodation type", accommodation_type_id
        )

        before = {"is_active": db_accommodation_type.is_active}
        db_accommodation_type.is_active = not db_accommodation_type.is_active

        self.change_log.record(
            actor,
            AccommodationType.__tablename__,
            ChangeOperation.UPDATE,
            db_accommodation_type.id,
            before=before,
            after={"is_active": db_accommodation_type.is_active},
        )
        await self.db.commit()
        await self.db.refresh(db_accommodation_type)
        return db_accommodation_type


class AccommodationService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.change_log = ChangeLogService(db)

    async def get_all(
        self,
        skip: int = 0,
        limit: int = 100,
        search: Optional[str] = None,
        active_only: bool = False,
        has_parking: Optional[bool] = None,
    ) -> List[Accommodation]:
        stmt = select(Accommodation).options(selectinload(Accommodation.type))

        if search:
            pattern = f"%{search.strip()}%"
            stmt = stmt.where(
                or_(
                    Accommodation.name.ilike(pattern),
                    Accommodation.number.like(pattern),
                )
            )

        if active_only:
            stmt = stmt.where(Accommodation.is_active)

        if has_parking is not None:
            stmt = stmt.where(Accommodation.has_parking == has_parking)

        stmt = stmt.order_by(Accommodation.number).offset(skip).limit(limit)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_by_id(self, accommodation_id: str) -> Optional[Accommodation]:
        stmt = (
            select(Accommodation)
            .options(selectinload(Accommodation.type))
            .where(Accommodation.id == accommodation_id)
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_number(self, number: str) -> Optional[Accommodation]:
        result = await self.db.execute(
            select(Accommodation).where(Accommodation.number == number)
        )
        return result.scalar_one_or_none()

    async def _ensure_type_exists(self, type_id: str) -> None:
        accommodation_type = await self.db.get(AccommodationType, type_id)
        if not accommodation_type:
            raise ValidationError("Accommodation type not found", "type_id", type_id)

    async def create(
        self, accommodation_data: AccommodationCreate, actor: SessionContext
    ) -> Accommodation:
        await self._ensure_type_exists(accommodation_data.type_id)

        existing = await self.get_by_number(accommodation_data.number)
        validate_unique_field(existing, "number", "Accommodation")

        db_accommodation = Accommodation(
            **accommodation_data.model_dump(), is_active=True
        )
        self.db.add(db_accommodation)
        await self.db.flush()

        self.change_log.record(
            actor,
            Accommodation.__tablename__,
            ChangeOperation.INSERT,
            db_accommodation.id,
            after=snapshot(db_accommodation),
        )
        await self.db.commit()
        return await self._reload(db_accommodation)

    async def update(
        self,
        accommodation_id: str,
        accommodation_data: AccommodationUpdate,
        actor: SessionContext,
    ) -> Accommodation:
        db_accommodation = await self.get_by_id(accommodation_id)
        db_accommodation = ensure_exists(
            db_accommodation, "Accommodation", accommodation_id
        )

        update_data = accommodation_data.model_dump(exclude_unset=True)

        if update_data.get("number"):
            existing = await self.get_by_number(update_data["number"])
            validate_unique_field(existing, "number", "Accommodation", accommodation_id)

        if update_data.get("type_id"):
            await self._ensure_type_exists(update_data["type_id"])

        before = snapshot(db_accommodation)
        apply_updates(db_accommodation, update_data)
        db_accommodation.updated_at = utcnow()
        await self.db.flush()

        self.change_log.record(
            actor,
            Accommodation.__tablename__,
            ChangeOperation.UPDATE,
            db_accommodation.id,
            before=before,
            after=snapshot(db_accommodation),
        )
        await self.db.commit()
        return await self._reload(db_accommodation)

    async def toggle_status(
        self, accommodation_id: str, actor: SessionContext
    ) -> Accommodation:
        db_accommodation = await self.get_by_id(accommodation_id)
        db_accommodation = ensure_exists(
            db_accommodation, "Accommodation", accommodation_id
        )
        if db_accommodation.is_active and await self._has_checked_in_stay(
            db_accommodation.id
        ):
            raise BusinessRuleViolationError(
                "accommodation_occupied",
                "Accommodation has a checked-in stay and cannot be deactivated",
                {"accommodation_id": db_accommodation.id},
            )

        before = {"is_active": db_accommodation.is_active}
        db_accommodation.is_active = not db_accommodation.is_active
        db_accommodation.updated_at = utcnow()

        self.change_log.record(
            actor,
            Accommodation.__tablename__,
            ChangeOperation.UPDATE,
            db_accommodation.id,
            before=before,
            after={"is_active": db_accommodation.is_active},
        )
        await self.db.commit()
        return await self._reload(db_accommodation)

    async def _has_checked_in_stay(self, accommodation_id: str) -> bool:
        result = await self.db.execute(
            select(Stay.id).where(
                Stay.accommodation_id == accommodation_id,
                Stay.status == StayStatus.CHECKED_IN,
            )
        )
        return result.first() is not None

    async def _reload(self, db_accommodation: Accommodation) -> Accommodation:
        # A changed type_id leaves a stale type relationship behind
        stmt = (
            select(Accommodation)
            .options(selectinload(Accommodation.type))
            .where(Accommodation.id == db_accommodation.id)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return result.scalar_one()
