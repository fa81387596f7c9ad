"""Demonstration dataset for the in-memory store."""

import logging
from datetime import date, timedelta
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from parnaioca.core.security import get_password_hash
from parnaioca.models import (
    Accommodation,
    AccommodationType,
    ChangeLog,
    ChangeOperation,
    Customer,
    MinibarItem,
    Stay,
    StayStatus,
    User,
    UserRole,
)
from parnaioca.models.base import utcnow

logger = logging.getLogger(__name__)

FIXTURE_USERS = [
    ("admin@parnaioca.com", "admin123", "Administrador", UserRole.ADMIN),
    ("funcionario@parnaioca.com", "func123", "Funcionário", UserRole.STAFF),
]

MINIBAR_ITEMS = [
    ("Água Mineral 500ml", Decimal("3.50")),
    ("Refrigerante Coca-Cola 350ml", Decimal("5.00")),
    ("Cerveja Heineken 330ml", Decimal("8.00")),
    ("Suco de Laranja 300ml", Decimal("4.50")),
    ("Chocolate Nestlé", Decimal("6.00")),
]


async def seed_fixture_data(db: AsyncSession) -> None:
    now = utcnow()

    users = [
        User(
            email=email,
            full_name=full_name,
            hashed_password=get_password_hash(password),
            role=role,
        )
        for email, password, full_name, role in FIXTURE_USERS
    ]
    db.add_all(users)

    suite = AccommodationType(
        name="Suíte", description="Acomodação luxuosa com vista para o mar"
    )
    apartment = AccommodationType(
        name="Apartamento", description="Acomodação confortável para famílias"
    )
    db.add_all([suite, apartment])
    await db.flush()

    lopes_mendes = Accommodation(
        name="Suíte Lopes Mendes",
        number="101",
        nightly_rate=Decimal("350.00"),
        max_occupancy=2,
        type_id=suite.id,
        has_minibar=True,
        has_parking=True,
    )
    parnaioca = Accommodation(
        name="Suíte Parnaioca",
        number="102",
        nightly_rate=Decimal("400.00"),
        max_occupancy=3,
        type_id=suite.id,
        has_minibar=True,
        has_parking=True,
    )
    lagoa_azul = Accommodation(
        name="Suíte Lagoa Azul",
        number="103",
        nightly_rate=Decimal("380.00"),
        max_occupancy=2,
        type_id=suite.id,
        has_minibar=True,
        has_parking=False,
    )
    db.add_all([lopes_mendes, parnaioca, lagoa_azul])

    joao = Customer(
        name="João Silva",
        birth_date=date(1985, 3, 12),
        national_id="123.456.789-00",
        email="joao@email.com",
        phone="(21) 99999-0001",
        state="RJ",
        city="Angra dos Reis",
    )
    maria = Customer(
        name="Maria Santos",
        birth_date=date(1990, 7, 25),
        national_id="987.654.321-00",
        email="maria@email.com",
        phone="(11) 98888-0002",
        state="SP",
        city="São Paulo",
    )
    db.add_all([joao, maria])
    db.add_all(
        [MinibarItem(name=name, unit_price=price) for name, price in MINIBAR_ITEMS]
    )
    await db.flush()

    stay = Stay(
        customer_id=joao.id,
        accommodation_id=parnaioca.id,
        check_in_at=now,
        nightly_rate=parnaioca.nightly_rate,
        status=StayStatus.CHECKED_IN,
    )
    db.add(stay)
    await db.flush()

    admin, staff = users
    db.add_all(
        [
            ChangeLog(
                actor_id=admin.id,
                table_name="customers",
                operation=ChangeOperation.INSERT,
                row_id=joao.id,
                after={"name": joao.name},
                created_at=now - timedelta(hours=2),
            ),
            ChangeLog(
                actor_id=staff.id,
                table_name="accommodations",
                operation=ChangeOperation.UPDATE,
                row_id=lopes_mendes.id,
                before={"is_active": False},
                after={"is_active": True},
                created_at=now - timedelta(hours=1),
            ),
            ChangeLog(
                actor_id=admin.id,
                table_name="stays",
                operation=ChangeOperation.INSERT,
                row_id=stay.id,
                after={"status": StayStatus.CHECKED_IN.value},
                created_at=now,
            ),
        ]
    )

    await db.commit()
    logger.info("Seeded the in-memory store with demonstration data")
