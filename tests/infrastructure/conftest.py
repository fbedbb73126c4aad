"""Database fixtures: in-memory SQLite shared across sessions."""

import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from core.infrastructure.database.config import get_session_factory, init_database
from core.infrastructure.database.order_store import SQLAlchemyOrderStore


# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def db_engine():
    """Create test database engine with all tables."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )
    await init_database(engine)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def sql_store(db_engine) -> SQLAlchemyOrderStore:
    return SQLAlchemyOrderStore(get_session_factory(db_engine))
