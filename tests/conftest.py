"""
Shared fixtures.

Every test gets its own freshly seeded in-memory store, so tests may write
freely without cleaning up.
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import select

from parnaioca.core.database import FixtureDataSource, get_db
from parnaioca.core.security import create_session_token
from parnaioca.main import app
from parnaioca.models import (
    Accommodation,
    AccommodationType,
    Customer,
    MinibarItem,
    Stay,
    StayStatus,
    User,
    UserRole,
)
from parnaioca.schemas.user import SessionContext


@pytest.fixture
async def data_source():
    source = FixtureDataSource()
    await source.initialize()
    yield source
    await source.dispose()


@pytest.fixture
async def db(data_source):
    async with data_source.sessionmaker() as session:
        yield session


@pytest.fixture
async def client(data_source):
    async def override_get_db():
        async with data_source.sessionmaker() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


async def _user_with_role(data_source, role: UserRole) -> User:
    async with data_source.sessionmaker() as session:
        result = await session.execute(select(User).where(User.role == role))
        return result.scalar_one()


@pytest.fixture
async def admin_session(data_source) -> SessionContext:
    user = await _user_with_role(data_source, UserRole.ADMIN)
    return SessionContext(user_id=user.id, email=user.email, role=user.role)


@pytest.fixture
async def staff_session(data_source) -> SessionContext:
    user = await _user_with_role(data_source, UserRole.STAFF)
    return SessionContext(user_id=user.id, email=user.email, role=user.role)


@pytest.fixture
async def admin_headers(data_source) -> dict:
    user = await _user_with_role(data_source, UserRole.ADMIN)
    return {"Authorization": f"Bearer {create_session_token(user)}"}


@pytest.fixture
async def staff_headers(data_source) -> dict:
    user = await _user_with_role(data_source, UserRole.STAFF)
    return {"Authorization": f"Bearer {create_session_token(user)}"}


@pytest.fixture
async def accommodations(db) -> dict:
    """Seeded accommodations keyed by unit number."""
    result = await db.execute(select(Accommodation))
    return {accommodation.number: accommodation for accommodation in result.scalars()}


@pytest.fixture
async def suite_type(db) -> AccommodationType:
    result = await db.execute(
        select(AccommodationType).where(AccommodationType.name == "Suíte")
    )
    return result.scalar_one()


@pytest.fixture
async def customers(db) -> dict:
    """Seeded customers keyed by name."""
    result = await db.execute(select(Customer))
    return {customer.name: customer for customer in result.scalars()}


@pytest.fixture
async def minibar_items(db) -> dict:
    result = await db.execute(select(MinibarItem))
    return {item.name: item for item in result.scalars()}


@pytest.fixture
async def checked_in_stay(db) -> Stay:
    result = await db.execute(select(Stay).where(Stay.status == StayStatus.CHECKED_IN))
    return result.scalar_one()
