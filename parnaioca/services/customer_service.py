from typing import List, Optional

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from parnaioca.core.service_utils import (
    apply_updates,
    ensure_exists,
    snapshot,
    validate_unique_field,
)
from parnaioca.models.base import utcnow
from parnaioca.models.change_log import ChangeOperation
from parnaioca.models.customer import Customer
from parnaioca.schemas.customer import CustomerCreate, CustomerUpdate
from parnaioca.schemas.user import SessionContext
from parnaioca.services.change_log_service import ChangeLogService


class CustomerService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.change_log = ChangeLogService(db)

    async def get_all(
        self,
        skip: int = 0,
        limit: int = 100,
        search: Optional[str] = None,
        active_only: bool = False,
    ) -> List[Customer]:
        """List customers by name, optionally matching name, national ID or email"""
        query = select(Customer)

        if search:
            pattern = f"%{search.strip()}%"
            query = query.where(
                or_(
                    Customer.name.ilike(pattern),
                    Customer.national_id.like(pattern),
                    Customer.email.ilike(pattern),
                )
            )

        if active_only:
            query = query.where(Customer.is_active)

        query = query.order_by(Customer.name).offset(skip).limit(limit)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get_by_id(self, customer_id: str) -> Optional[Customer]:
        result = await self.db.execute(
            select(Customer).where(Customer.id == customer_id)
        )
        return result.scalar_one_or_none()

    async def get_by_national_id(self, national_id: str) -> Optional[Customer]:
        result = await self.db.execute(
            select(Customer).where(Customer.national_id == national_id)
        )
        return result.scalar_one_or_none()

    async def create(
        self, customer_data: CustomerCreate, actor: SessionContext
    ) -> Customer:
        # Pre-check gives a readable error; the unique constraint settles races
        existing = await self.get_by_national_id(customer_data.national_id)
        validate_unique_field(existing, "national ID", "Customer")

        db_customer = Customer(**customer_data.model_dump(), is_active=True)
        self.db.add(db_customer)
        await self.db.flush()

        self.change_log.record(
            actor,
            Customer.__tablename__,
            ChangeOperation.INSERT,
            db_customer.id,
            after=snapshot(db_customer),
        )
        await self.db.commit()
        await self.db.refresh(db_customer)
        return db_customer

    async def update(
        self, customer_id: str, customer_data: CustomerUpdate, actor: SessionContext
    ) -> Customer:
        db_customer = await self.get_by_id(customer_id)
        db_customer = ensure_exists(db_customer, "Customer", customer_id)

        update_data = customer_data.model_dump(exclude_unset=True)
        if update_data.get("national_id"):
            existing = await self.get_by_national_id(update_data["national_id"])
            validate_unique_field(existing, "national ID", "Customer", customer_id)

        before = snapshot(db_customer)
        apply_updates(db_customer, update_data)
        db_customer.updated_at = utcnow()
        await self.db.flush()

        self.change_log.record(
            actor,
            Customer.__tablename__,
            ChangeOperation.UPDATE,
            db_customer.id,
            before=before,
            after=snapshot(db_customer),
        )
        await self.db.commit()
        await self.db.refresh(db_customer)
        return db_customer

    async def toggle_status(self, customer_id: str, actor: SessionContext) -> Customer:
        """Flip the active flag; the caller is expected to be an administrator"""
        db_customer = await self.get_by_id(customer_id)
        db_customer = ensure_exists(db_customer, "Customer", customer_id)

        before = {"is_active": db_customer.is_active}
        db_customer.is_active = not db_customer.is_active
        db_customer.updated_at = utcnow()

        self.change_log.record(
            actor,
            Customer.__tablename__,
            ChangeOperation.UPDATE,
            db_customer.id,
            before=before,
            after={"is_active": db_customer.is_active},
        )
        await self.db.commit()
        await self.db.refresh(db_customer)
        return db_customer
