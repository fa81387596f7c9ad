"""
Data sources backing the request-scoped sessions.

Two implementations share one interface: the remote relational store named by
``DATABASE_URL``, and an in-memory fixture store seeded with demonstration
data. The fixture is used whenever the URL is absent or malformed, so call
sites never branch on the mode themselves.
"""

import logging
from typing import Optional

from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from parnaioca.core.config import settings
from parnaioca.core.fixtures import seed_fixture_data
from parnaioca.models import Base

logger = logging.getLogger(__name__)

SUPPORTED_SCHEMES = (
    "postgres",
    "postgresql",
    "postgresql+asyncpg",
    "sqlite",
    "sqlite+aiosqlite",
)


def normalize_database_url(url: str) -> str:
    """Convert sync driver URLs to their async counterparts."""
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql+asyncpg://", 1)
    if url.startswith("sqlite://"):
        return url.replace("sqlite://", "sqlite+aiosqlite://", 1)
    return url


def is_valid_database_url(url: Optional[str]) -> bool:
    if not url or not url.strip():
        return False
    try:
        parsed = make_url(url.strip())
    except ArgumentError:
        return False
    if parsed.drivername not in SUPPORTED_SCHEMES:
        return False
    if parsed.drivername.startswith("postgres"):
        return bool(parsed.host and parsed.database)
    return True


class DataSource:
    """A relational store reachable through async SQLAlchemy sessions."""

    is_fixture = False

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self.sessionmaker = async_sessionmaker(
            engine, class_=AsyncSession, expire_on_commit=False
        )

    async def initialize(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()


class RemoteDataSource(DataSource):
    def __init__(self, database_url: str):
        self.database_url = normalize_database_url(database_url)
        super().__init__(create_async_engine(self.database_url, pool_pre_ping=True))


class FixtureDataSource(DataSource):
    """In-memory store; its contents live only as long as the process."""

    is_fixture = True

    def __init__(self, seed: bool = True):
        self.seed = seed
        super().__init__(
            create_async_engine(
                "sqlite+aiosqlite://",
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        )

    async def initialize(self) -> None:
        await super().initialize()
        if self.seed:
            async with self.sessionmaker() as session:
                await seed_fixture_data(session)


def create_data_source(database_url: Optional[str] = None) -> DataSource:
    if is_valid_database_url(database_url):
        return RemoteDataSource(database_url.strip())

    if database_url:
        logger.warning(
            "DATABASE_URL is not a supported database URL, "
            "falling back to the in-memory demonstration store"
        )
    else:
        logger.warning(
            "DATABASE_URL is not set, using the in-memory demonstration store"
        )
    return FixtureDataSource()


data_source = create_data_source(settings.DATABASE_URL)


async def get_db():
    async with data_source.sessionmaker() as session:
        yield session
